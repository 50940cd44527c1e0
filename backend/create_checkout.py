# backend/create_checkout.py

import os
import logging
import urllib.parse

import requests

from catalog import price_id_for
from stripe_api import (
    DEFAULT_CURRENCY,
    STRIPE_API_BASE,
    auth_headers,
    internal_error,
    json_response,
    log_full_queries,
    mask_secret,
    method_not_allowed,
    preflight_response,
)

SESSIONS_URL   = f"{STRIPE_API_BASE}/checkout/sessions"
SECRET_KEY_VAR = "STRIPE_SECRET_KEY"
METHODS        = ("POST",)

# ISO 3166-1 alpha-2 codes we ship to
ALLOWED_COUNTRIES = (
    "IE", "GB", "US", "CA", "AU", "NZ", "FR", "DE", "IT", "ES",
    "NL", "BE", "AT", "CH", "SE", "NO", "DK", "FI", "PL", "PT",
)

logger = logging.getLogger("storefront.backend.create_checkout")
if not logger.handlers:
    logging.basicConfig(level=logging.INFO)


class UnknownProductError(KeyError):
    def __init__(self, product_id):
        super().__init__(product_id)
        self.product_id = product_id


def build_line_items(cart):
    """One line item per cart entry; repeated ids stay separate at quantity 1."""
    line_items = []
    for item in cart:
        product_id = item.get("id") if isinstance(item, dict) else None
        price_id = price_id_for(product_id)
        if not price_id:
            raise UnknownProductError(product_id)
        line_items.append({ "price": price_id, "quantity": 1 })
    return line_items


def build_session_form(line_items, success_url, cancel_url):
    form = [
        ("mode", "payment"),
        ("success_url", success_url),
        ("cancel_url", cancel_url),
        ("currency", DEFAULT_CURRENCY),
        ("billing_address_collection", "required"),
    ]
    form += [("shipping_address_collection[allowed_countries][]", c) for c in ALLOWED_COUNTRIES]
    form.append(("phone_number_collection[enabled]", "true"))
    for index, item in enumerate(line_items):
        form.append((f"line_items[{index}][price]", item["price"]))
        form.append((f"line_items[{index}][quantity]", str(item["quantity"])))
    return form


def handle_checkout(method, body, origin, env=None):
    env = os.environ if env is None else env

    if method == "OPTIONS":
        return preflight_response(METHODS)
    if method != "POST":
        return method_not_allowed(METHODS)

    secret_key = env.get(SECRET_KEY_VAR)
    if not secret_key:
        return json_response(500, { "error": "Stripe API key not configured" }, METHODS)

    if not isinstance(body, dict):
        return json_response(400, { "error": "Invalid request body" }, METHODS)

    cart = body.get("cart")
    if not isinstance(cart, list) or not cart:
        return json_response(400, { "error": "Cart is empty or invalid" }, METHODS)

    try:
        line_items = build_line_items(cart)
    except UnknownProductError as e:
        return json_response(400, { "error": f"Product ID {e.product_id} not found" }, METHODS)

    success_url = body.get("successUrl") or f"{origin}/cart/index.html?success=true"
    cancel_url = body.get("cancelUrl") or f"{origin}/cart/index.html?canceled=true"

    try:
        form = build_session_form(line_items, success_url, cancel_url)
        logger.info("POST %s line_items=%d key=%s", SESSIONS_URL, len(line_items), mask_secret(secret_key))
        if log_full_queries(env):
            logger.warning("FULL POST %s data=%s", SESSIONS_URL, urllib.parse.urlencode(form))

        with requests.Session() as session:
            resp = session.post(
                SESSIONS_URL,
                headers={ **auth_headers(secret_key), "Content-Type": "application/x-www-form-urlencoded" },
                data=urllib.parse.urlencode(form)
            )
        if not resp.ok:
            logger.error("Stripe API error: %s", resp.text)
            return json_response(500, {
                "error": "Failed to create checkout session",
                "details": resp.text,
            }, METHODS)

        return json_response(200, { "url": resp.json().get("url") }, METHODS)

    except Exception as e:
        logger.exception("Checkout handler error")
        return internal_error(e, METHODS)
