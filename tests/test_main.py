import json

import pytest

from main import app
from get_products import PRODUCTS_URL
from create_checkout import SESSIONS_URL
from conftest import FakeResponse


@pytest.fixture
def client():
    app.config["TESTING"] = True
    return app.test_client()


@pytest.mark.parametrize("path", ["/api/products", "/api/image", "/api/checkout"])
def test_preflight_has_cors_headers_and_no_body(client, path):
    resp = client.options(path)
    assert resp.status_code == 204
    assert resp.data == b""
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "OPTIONS" in resp.headers["Access-Control-Allow-Methods"]
    assert resp.headers["Access-Control-Allow-Headers"] == "Content-Type"


def test_wrong_method_is_405_json(client):
    resp = client.put("/api/products")
    assert resp.status_code == 405
    assert resp.get_json() == { "error": "Method not allowed" }
    assert client.get("/api/checkout").status_code == 405


def test_products_route(client, fake_session, monkeypatch):
    monkeypatch.setenv("STRIPE_API_KEY_PRODUCTS", "rk_test_x")
    fake_session.routes[("GET", PRODUCTS_URL)] = FakeResponse(payload={ "data": [
        { "id": "prod_1", "name": "Sunrise", "images": [],
          "default_price": { "id": "price_1", "unit_amount": 3000, "currency": "eur" } },
    ] })
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert resp.get_json()["products"][0]["price"] == "30.00"


def test_image_route_returns_bytes(client, fake_session):
    link = "https://files.stripe.com/links/abc"
    fake_session.routes[("GET", link)] = FakeResponse(content=b"img", headers={ "Content-Type": "image/webp" })
    resp = client.get("/api/image", query_string={ "url": link })
    assert resp.status_code == 200
    assert resp.data == b"img"
    assert resp.headers["Content-Type"] == "image/webp"
    assert resp.headers["Cache-Control"] == "public, max-age=31536000"


def test_image_route_rejects_other_hosts(client):
    resp = client.get("/api/image", query_string={ "url": "https://example.com/a.jpg" })
    assert resp.status_code == 400


def test_checkout_route_uses_request_origin(client, fake_session, monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_x")
    fake_session.routes[("POST", SESSIONS_URL)] = FakeResponse(payload={ "url": "https://checkout.stripe.com/y" })
    resp = client.post("/api/checkout", json={ "cart": [{ "id": "prod_THxs9v5Opt7nLE" }] })
    assert resp.status_code == 200
    assert resp.get_json() == { "url": "https://checkout.stripe.com/y" }
    _, _, kwargs = fake_session.calls[0]
    assert "success_url=http%3A%2F%2Flocalhost%2Fcart%2Findex.html%3Fsuccess%3Dtrue" in kwargs["data"]


def test_checkout_route_bad_json(client, monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_x")
    resp = client.post("/api/checkout", data="not json", content_type="application/json")
    assert resp.status_code == 400


def test_checkout_route_parses_json_sent_as_text_plain(client, fake_session, monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_x")
    fake_session.routes[("POST", SESSIONS_URL)] = FakeResponse(payload={ "url": "https://checkout.stripe.com/t" })
    resp = client.post(
        "/api/checkout",
        data=json.dumps({ "cart": [{ "id": "prod_THxs9v5Opt7nLE" }] }),
        content_type="text/plain",
    )
    assert resp.status_code == 200
    assert resp.get_json() == { "url": "https://checkout.stripe.com/t" }
    assert fake_session.closed is True
