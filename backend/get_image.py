# backend/get_image.py
#
# Stripe file links are download links, not embeddable images, so the bytes
# are fetched here and served back with cache headers.

import logging

import requests

from stripe_api import (
    FILE_LINK_PATH,
    cors_headers,
    internal_error,
    json_response,
    log_full_queries,
    mask_file_link,
    method_not_allowed,
    preflight_response,
)

METHODS              = ("GET",)
DEFAULT_CONTENT_TYPE = "image/jpeg"
CACHE_CONTROL        = "public, max-age=31536000"

logger = logging.getLogger("storefront.backend.get_image")
if not logger.handlers:
    logging.basicConfig(level=logging.INFO)


def handle_image(method, params):
    if method == "OPTIONS":
        return preflight_response(METHODS)
    if method != "GET":
        return method_not_allowed(METHODS)

    file_link = params.get("url")
    if not file_link:
        return json_response(400, { "error": "Missing url parameter" }, METHODS)
    if FILE_LINK_PATH not in file_link:
        return json_response(400, { "error": "Invalid file link" }, METHODS)

    try:
        masked_link = mask_file_link(file_link)
        logger.info("GET %s", masked_link)
        if log_full_queries():
            logger.warning("FULL GET %s", file_link)
        with requests.Session() as session:
            resp = session.get(
                file_link,
                headers={ "User-Agent": "Mozilla/5.0" },
                allow_redirects=True
            )
        if not resp.ok:
            logger.error("Image fetch failed: %s %s", resp.status_code, masked_link)
            return json_response(500, { "error": "Failed to fetch image" }, METHODS)

        return {
            "statusCode": 200,
            "headers": {
                **cors_headers(METHODS),
                "Content-Type": resp.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE,
                "Cache-Control": CACHE_CONTROL,
            },
            "body": resp.content,
        }

    except Exception as e:
        logger.exception("Image proxy error")
        return internal_error(e, METHODS)
