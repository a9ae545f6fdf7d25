"""Map raw HTTP responses onto the uniform result shape."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .errors import BasecampParseError
from .transport import RawResponse

# Statuses answered with {"message": ...} and no body decode.
STATUS_MESSAGES: Dict[int, str] = {
    204: "Resource succesfully deleted",
    304: "304 Not Modified",
    400: "400 Bad Request",
    403: "403 Forbidden",
    404: "404 Not Found",
    415: "415 Unsupported Media Type",
    429: "429 Too Many Requests. {retry_after}",
    500: "500 Hmm, that is not right",
    502: "502 Bad Gateway",
    503: "503 Service Unavailable",
    504: "504 Gateway Timeout",
}

# Statuses whose decoded body gets a message attached.
DECODED_MESSAGES: Dict[int, str] = {
    201: "Created",
}


def decode_body(raw: RawResponse) -> Any:
    # Empty responses decode to {}
    if not raw.body:
        return {}
    try:
        return json.loads(raw.body)
    except ValueError as exc:
        snippet = raw.body[:500].decode("utf-8", errors="replace")
        raise BasecampParseError(
            f"Expected JSON for status {raw.status_code}, "
            f"got non-JSON body snippet: {snippet!r}"
        ) from exc


def status_message(raw: RawResponse) -> Optional[str]:
    template = STATUS_MESSAGES.get(raw.status_code)
    if template is None:
        return None
    return template.format(retry_after=raw.header("Retry-After") or "")


def normalize(raw: RawResponse) -> Any:
    """
    Return either the decoded payload or a {"message": ...} descriptor.
    - 201: decoded object plus message "Created".
    - Table statuses: message only, body ignored.
    - Anything else (200 included): decoded body unchanged.
    Raises BasecampParseError when a decode is attempted on malformed JSON.
    """
    message = status_message(raw)
    if message is not None:
        return {"message": message}

    data = decode_body(raw)
    attached = DECODED_MESSAGES.get(raw.status_code)
    if attached is not None and isinstance(data, dict):
        data = {**data, "message": attached}
    return data


def extract_validator(raw: RawResponse) -> Optional[str]:
    """ETag value to store, or None when the response carries none."""
    etag = (raw.header("ETag") or "").strip()
    if etag.startswith("W/"):
        return etag
    etag = etag.strip('"')
    return etag or None


__all__ = [
    "STATUS_MESSAGES",
    "DECODED_MESSAGES",
    "decode_body",
    "extract_validator",
    "normalize",
    "status_message",
]
