# functions/products.py

from get_products import handle_products
from lambda_response import event_method, serialize


def handler(event, context):
    return serialize(handle_products(event_method(event)))
