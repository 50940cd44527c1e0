import os

from flask import Flask, Response, request, jsonify
from flask_cors import CORS
from get_products import handle_products
from get_image import handle_image
from create_checkout import handle_checkout

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

app = Flask(__name__)
CORS(app)


def to_response(result):
    body = result["body"]
    if body is None or isinstance(body, bytes):
        return Response(body, status=result["statusCode"], headers=result["headers"])
    return jsonify(body), result["statusCode"], result["headers"]


@app.route("/api/products", methods=ALL_METHODS)
def products():
    return to_response(handle_products(request.method))


@app.route("/api/image", methods=ALL_METHODS)
def image():
    return to_response(handle_image(request.method, request.args))


@app.route("/api/checkout", methods=ALL_METHODS)
def checkout():
    body = request.get_json(force=True, silent=True) if request.method == "POST" else None
    origin = f"{request.scheme}://{request.host}"
    return to_response(handle_checkout(request.method, body, origin))


if __name__ == "__main__":
    app.run(port=int(os.getenv("PORT", "5000")))
