# backend/get_products.py

import os
import re
import logging
import unicodedata
import urllib.parse
from decimal import Decimal

import requests

from stripe_api import (
    DEFAULT_CURRENCY,
    FILE_ID_PREFIX,
    FILE_LINK_PATH,
    IMAGE_PROXY_PATH,
    STRIPE_API_BASE,
    STRIPE_FILES_BASE,
    auth_headers,
    internal_error,
    json_response,
    mask_secret,
    method_not_allowed,
    preflight_response,
)

PRODUCTS_URL = f"{STRIPE_API_BASE}/products"
PRICES_URL   = f"{STRIPE_API_BASE}/prices"
API_KEY_VAR  = "STRIPE_API_KEY_PRODUCTS"
METHODS      = ("GET",)
ZERO_PRICE   = "0.00"

# characters encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "-_.!~*'()"

logger = logging.getLogger("storefront.backend.get_products")
if not logger.handlers:
    logging.basicConfig(level=logging.INFO)


def name_to_slug(name):
    """Lowercase, collapse non-alphanumeric runs to "-", trim the ends."""
    return re.sub(r"[^a-z0-9]+", "-", (name or "").lower()).strip("-")


def format_amount(unit_amount):
    return str((Decimal(unit_amount) / 100).quantize(Decimal("0.01")))


def resolve_image(ref):
    if not isinstance(ref, str):
        return None
    if ref.startswith(FILE_ID_PREFIX):
        return f"{STRIPE_FILES_BASE}/{ref}/contents"
    if FILE_LINK_PATH in ref:
        return f"{IMAGE_PROXY_PATH}?url={urllib.parse.quote(ref, safe=URI_COMPONENT_SAFE)}"
    if ref.startswith(("http://", "https://")):
        return ref
    return None


def sort_key(product):
    folded = unicodedata.normalize("NFKD", product["name"] or "")
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch)).casefold()
    # lowercase before uppercase on ties, like localeCompare
    return (folded, (product["name"] or "").swapcase())


def normalize_product(product):
    price = ZERO_PRICE
    price_id = None
    currency = DEFAULT_CURRENCY

    default_price = product.get("default_price")
    if isinstance(default_price, dict):
        price_id = default_price.get("id")
        currency = default_price.get("currency") or DEFAULT_CURRENCY
        if isinstance(default_price.get("unit_amount"), int):
            price = format_amount(default_price["unit_amount"])
    elif isinstance(default_price, str) and default_price:
        price_id = default_price

    images = [url for url in map(resolve_image, product.get("images") or []) if url]
    name = product.get("name") or ""

    return {
        "id": product.get("id"),
        "name": name,
        "description": product.get("description") or "",
        "price": price,
        "priceId": price_id,
        "currency": currency,
        "url": f"/{name_to_slug(name)}/index.html",
        "image": images[0] if images else None,
        "images": images,
    }


def backfill_prices(session, products, api_key):
    """Look up prices one by one for products still at zero; failures keep zero."""
    for product in products:
        if product["price"] != ZERO_PRICE or not product["priceId"]:
            continue
        url = f"{PRICES_URL}/{product['priceId']}"
        logger.info("GET %s", url)
        try:
            resp = session.get(url, headers=auth_headers(api_key))
            if not resp.ok:
                logger.warning("Price lookup failed for %s: %s %s", product["id"], resp.status_code, resp.text)
                continue
            price = resp.json()
            unit_amount = price.get("unit_amount")
            if not isinstance(unit_amount, int):
                logger.warning("Price %s has no unit_amount", product["priceId"])
                continue
            product["price"] = format_amount(unit_amount)
            product["currency"] = price.get("currency") or product["currency"]
        except (requests.RequestException, ValueError) as e:
            logger.warning("Price lookup failed for %s: %s", product["id"], e)
    return products


def handle_products(method, env=None):
    env = os.environ if env is None else env

    if method == "OPTIONS":
        return preflight_response(METHODS)
    if method != "GET":
        return method_not_allowed(METHODS)

    api_key = env.get(API_KEY_VAR)
    if not api_key:
        return json_response(500, {
            "error": f"Stripe API key not configured. Please set {API_KEY_VAR} in the environment variables."
        }, METHODS)

    try:
        with requests.Session() as session:
            params = { "active": "true", "limit": 100, "expand[]": "data.default_price" }
            logger.info("GET %s?%s key=%s", PRODUCTS_URL, urllib.parse.urlencode(params), mask_secret(api_key))
            resp = session.get(PRODUCTS_URL, headers=auth_headers(api_key), params=params)
            if not resp.ok:
                logger.error("Stripe API error: %s", resp.text)
                return json_response(500, { "error": "Failed to fetch products", "details": resp.text }, METHODS)

            products = [normalize_product(p) for p in resp.json().get("data", [])]
            backfill_prices(session, products, api_key)

        products.sort(key=sort_key)

        return json_response(200, { "products": products }, METHODS)

    except Exception as e:
        logger.exception("Products handler error")
        return internal_error(e, METHODS)
