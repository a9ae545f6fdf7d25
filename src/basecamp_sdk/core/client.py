from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional

import httpx

from .builder import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    PreparedRequest,
    build_request,
)
from .errors import BasecampClientError, BasecampParseError, BasecampTransportError
from .models import AccountConfig
from .normalizer import DECODED_MESSAGES, extract_validator, normalize
from .transport import HttpxTransport, RawResponse, Transport
from .validators import InMemoryValidatorStore, ValidatorStore


class BasecampClient:
    """
    Shared request pipeline for the Basecamp API.
    - Builds requests (auth, headers, conditional If-None-Match)
    - Sends them through a pluggable Transport
    - Normalizes statuses into payloads or {"message": ...} descriptors
    - Records ETags in the ValidatorStore after every response
    No retries and no business logic; resource modules own paths and bodies.
    """

    def __init__(
        self,
        config: AccountConfig | Mapping[str, Any],
        *,
        base_url: str = DEFAULT_BASE_URL,
        store: Optional[ValidatorStore] = None,
        transport: Optional[Transport] = None,
        http: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if not isinstance(config, AccountConfig):
            config = AccountConfig.model_validate(dict(config))

        if not config.account_id:
            raise ValueError("account_id must be provided.")
        if not config.app_name:
            raise ValueError("app_name must be provided.")

        self._config = config
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.store = store if store is not None else InMemoryValidatorStore()
        self.log = logger or logging.getLogger("basecamp_sdk.client")

        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpxTransport(http)

    @classmethod
    def from_env(cls, **kwargs) -> "BasecampClient":
        from .config import load_base_url, load_env_config

        config = load_env_config()
        base_url = load_base_url()
        if base_url and "base_url" not in kwargs:
            kwargs["base_url"] = base_url
        return cls(config, **kwargs)

    @property
    def config(self) -> AccountConfig:
        return self._config

    def set_token(self, value: Optional[str]) -> "BasecampClient":
        """Rotate the OAuth token; other account data stays fixed."""
        self._config = self._config.with_token(value)
        return self

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "BasecampClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def prepare(
        self,
        method: str,
        resource: str,
        params: Optional[Mapping[str, Any]] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        *,
        content_type: Optional[str] = None,
    ) -> PreparedRequest:
        return build_request(
            self._config,
            method,
            resource,
            params,
            timeout,
            store=self.store,
            base_url=self.base_url,
            content_type=content_type,
        )

    async def request(
        self,
        method: str,
        resource: str,
        params: Optional[Mapping[str, Any]] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        *,
        content_type: Optional[str] = None,
    ) -> Any:
        """
        Core request method.
        - resource is relative to /{account_id}/api/v1/
        - params is a JSON body, or {"binary": bytes} for raw uploads
        - Raises BasecampTransportError on network/timeout errors (no retry)
        - Raises BasecampParseError if a decoded body isn't valid JSON
        - HTTP error statuses are returned as {"message": ...}, never raised
        """
        prepared = self.prepare(
            method, resource, params, timeout, content_type=content_type
        )
        start = time.perf_counter()

        raw = await self.transport.send(prepared)
        duration_ms = int((time.perf_counter() - start) * 1000)

        # structured-ish log without secrets
        self.log.debug(
            "bc.request",
            extra={
                "method": prepared.method,
                "path": prepared.resource_path,
                "status": raw.status_code,
                "duration_ms": duration_ms,
                "conditional": prepared.conditional,
                "fingerprint": prepared.fingerprint,
            },
        )

        self._remember_validator(prepared, raw)
        return normalize(raw)

    def _remember_validator(self, prepared: PreparedRequest, raw: RawResponse) -> None:
        # Error responses update the store too; a missing ETag leaves it alone.
        validator = extract_validator(raw)
        if validator is not None:
            self.store.put(prepared.fingerprint, validator)

    async def get(
        self, resource: str, *, timeout: float = DEFAULT_TIMEOUT_SECONDS
    ) -> Any:
        return await self.request("GET", resource, timeout=timeout)

    async def post(
        self,
        resource: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        content_type: Optional[str] = None,
    ) -> Any:
        return await self.request(
            "POST", resource, params, timeout, content_type=content_type
        )

    async def put(
        self,
        resource: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> Any:
        return await self.request("PUT", resource, params, timeout)

    async def delete(
        self, resource: str, *, timeout: float = DEFAULT_TIMEOUT_SECONDS
    ) -> Any:
        return await self.request("DELETE", resource, timeout=timeout)


def is_status_result(result: Any) -> bool:
    """
    True when a result is a bare {"message": ...} status descriptor.
    A 201 with an empty body normalizes to {"message": "Created"}; that is a
    success and is not reported here.
    """
    return (
        isinstance(result, dict)
        and set(result) == {"message"}
        and result["message"] not in DECODED_MESSAGES.values()
    )


__all__ = [
    "BasecampClient",
    "BasecampClientError",
    "BasecampTransportError",
    "BasecampParseError",
    "is_status_result",
]
