# backend/cart.py
#
# The browser cart: a flat JSON list under one key of a string key-value
# store (localStorage in the page, a dict in tests).

import json
from decimal import Decimal

from catalog import FALLBACK_PRODUCT, PRODUCTS

CART_KEY = "cart"


class CartStore:
    def __init__(self, storage, key=CART_KEY):
        self.storage = storage
        self.key = key

    def read(self):
        raw = self.storage.get(self.key)
        return json.loads(raw) if raw else []

    def write(self, items):
        self.storage[self.key] = json.dumps(items)

    def clear(self):
        self.storage.pop(self.key, None)


def add_item_to_cart(store, product_id):
    """Append a copy of the product's current name/price/description."""
    product = PRODUCTS.get(product_id, FALLBACK_PRODUCT)
    cart = store.read()
    cart.append({
        "id": product_id,
        "name": product["name"],
        "price": product["price"],
        "description": product["description"] or "",
    })
    store.write(cart)
    return cart


def remove_item(store, index):
    cart = store.read()
    if 0 <= index < len(cart):
        del cart[index]
        store.write(cart)
    return cart


def cart_total(items):
    total = sum((Decimal(str(item.get("price") or "0")) for item in items), Decimal("0"))
    return str(total.quantize(Decimal("0.01")))


def checkout_payload(items, success_url=None, cancel_url=None):
    payload = { "cart": [{ "id": item["id"] } for item in items] }
    if success_url:
        payload["successUrl"] = success_url
    if cancel_url:
        payload["cancelUrl"] = cancel_url
    return payload
