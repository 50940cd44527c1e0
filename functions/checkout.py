# functions/checkout.py

from create_checkout import handle_checkout
from lambda_response import event_body, event_method, event_origin, serialize


def handler(event, context):
    method = event_method(event)
    body = event_body(event) if method == "POST" else None
    return serialize(handle_checkout(method, body, event_origin(event)))
