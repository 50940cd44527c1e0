# backend/stripe_api.py

import os

STRIPE_API_BASE   = "https://api.stripe.com/v1"
STRIPE_FILES_BASE = "https://files.stripe.com/v1/files"
FILE_ID_PREFIX    = "file_"
FILE_LINK_PATH    = "files.stripe.com/links/"
IMAGE_PROXY_PATH  = "/api/image"
DEFAULT_CURRENCY  = "eur"


def cors_headers(methods):
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ", ".join([*methods, "OPTIONS"]),
        "Access-Control-Allow-Headers": "Content-Type",
    }


def json_response(status, body, methods):
    return {
        "statusCode": status,
        "headers": { **cors_headers(methods), "Content-Type": "application/json" },
        "body": body,
    }


def preflight_response(methods):
    return {
        "statusCode": 204,
        "headers": cors_headers(methods),
        "body": None,
    }


def method_not_allowed(methods):
    return json_response(405, { "error": "Method not allowed" }, methods)


def internal_error(exc, methods):
    return json_response(500, { "error": "Internal server error", "message": str(exc) }, methods)


def auth_headers(key):
    return { "Authorization": f"Bearer {key}" }


def mask_secret(value):
    """Keep the last four characters, blank out the rest."""
    value = str(value or "")
    return value[-4:].rjust(len(value), "x")


def log_full_queries(env=None):
    env = os.environ if env is None else env
    return str(env.get("LOG_FULL_QUERIES", "")).lower() in ("1", "true", "yes", "on")


def mask_file_link(link):
    """Hide the file link token (and its query string), keep the host and path prefix."""
    head, _, token = str(link or "").partition(FILE_LINK_PATH)
    if not token:
        return head
    return f"{head}{FILE_LINK_PATH}{mask_secret(token.split('?', 1)[0])}"
