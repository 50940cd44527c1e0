# functions/lambda_response.py
#
# Turns a backend handler result into what the functions platform expects:
# a JSON string body, or base64 with isBase64Encoded for binary payloads.

import json
import base64


def serialize(result):
    body = result["body"]
    response = {
        "statusCode": result["statusCode"],
        "headers": result["headers"],
    }
    if body is None:
        response["body"] = ""
    elif isinstance(body, bytes):
        response["body"] = base64.b64encode(body).decode("ascii")
        response["isBase64Encoded"] = True
    else:
        response["body"] = json.dumps(body)
    return response


def event_method(event):
    return (event.get("httpMethod") or "GET").upper()


def event_body(event):
    raw = event.get("body")
    if not raw:
        return None
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return None


def event_origin(event):
    headers = { k.lower(): v for k, v in (event.get("headers") or {}).items() }
    scheme = headers.get("x-forwarded-proto", "https")
    return f"{scheme}://{headers.get('host', 'localhost')}"
