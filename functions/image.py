# functions/image.py

from get_image import handle_image
from lambda_response import event_method, serialize


def handler(event, context):
    params = event.get("queryStringParameters") or {}
    return serialize(handle_image(event_method(event), params))
