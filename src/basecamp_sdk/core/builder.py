"""Request construction: URL, headers, body, auth and conditional header."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .models import AccountConfig
from .validators import ValidatorStore

DEFAULT_BASE_URL = "https://basecamp.com"
API_VERSION = "api/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0
ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
BINARY_KEY = "binary"


@dataclass(frozen=True)
class PreparedRequest:
    method: str
    url: str
    resource_path: str
    fingerprint: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    basic_auth: Optional[Tuple[str, str]] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def conditional(self) -> bool:
        return "If-None-Match" in self.headers


def build_url(base_url: str, account_id: str, resource_path: str) -> str:
    base = (base_url or DEFAULT_BASE_URL).rstrip("/")
    return f"{base}/{account_id}/{API_VERSION}/{resource_path.lstrip('/')}"


def _encode_body(params: Optional[Mapping[str, Any]]) -> Optional[bytes]:
    if not params:
        return None
    # Attachments: raw bytes are sent as is.
    if BINARY_KEY in params:
        raw = params[BINARY_KEY]
        if isinstance(raw, str):
            return raw.encode("utf-8")
        return bytes(raw)
    return json.dumps(dict(params)).encode("utf-8")


def build_request(
    config: AccountConfig,
    method: str,
    resource_path: str,
    params: Optional[Mapping[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    *,
    store: ValidatorStore,
    base_url: str = DEFAULT_BASE_URL,
    content_type: Optional[str] = None,
) -> PreparedRequest:
    """
    Assemble one request.
    - Looks up the stored validator and sends it as If-None-Match.
    - Auth priority: login+password (Basic), then token (Bearer), then none.
    - content_type overrides the JSON Content-Type, e.g. for raw uploads.
    - Reads the store; does not write it.
    """
    method = (method or "").upper()
    if method not in ALLOWED_METHODS:
        raise ValueError(f"Unsupported method {method!r}")
    if timeout is None or timeout <= 0:
        raise ValueError("timeout must be a positive number of seconds.")

    headers = {
        "User-Agent": config.app_name,
        "Content-Type": content_type or "application/json",
        "Accept": "application/json",
    }

    fingerprint = store.create_hash(method, resource_path, params)
    etag = store.get(fingerprint)
    if etag:
        headers["If-None-Match"] = etag

    basic_auth: Optional[Tuple[str, str]] = None
    mode = config.auth_mode
    if mode == "basic":
        basic_auth = (config.login or "", config.password or "")
    elif mode == "bearer":
        headers["Authorization"] = f"Bearer {config.token}"

    return PreparedRequest(
        method=method,
        url=build_url(base_url, config.account_id, resource_path),
        resource_path=resource_path,
        fingerprint=fingerprint,
        headers=headers,
        body=_encode_body(params),
        basic_auth=basic_auth,
        timeout=float(timeout),
    )


__all__ = [
    "PreparedRequest",
    "build_request",
    "build_url",
    "ALLOWED_METHODS",
    "API_VERSION",
    "BINARY_KEY",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
]
