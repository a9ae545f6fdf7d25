"""HTTP backends behind a single send(PreparedRequest) capability."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

import httpx

from .builder import PreparedRequest
from .errors import BasecampClientError, BasecampParseError, BasecampTransportError


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        if isinstance(self.headers, httpx.Headers):
            return self.headers.get(name)
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class Transport(Protocol):
    async def send(self, request: PreparedRequest) -> RawResponse: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """
    Default backend on top of httpx.AsyncClient.
    - Per-request timeout and Basic credentials come from the PreparedRequest.
    - Network/TLS/timeout failures become BasecampTransportError; no retries.
    - Corrupt content encoding becomes BasecampParseError; any other httpx
      error becomes BasecampClientError.
    """

    def __init__(self, http: Optional[httpx.AsyncClient] = None):
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient()

    async def send(self, request: PreparedRequest) -> RawResponse:
        auth = httpx.BasicAuth(*request.basic_auth) if request.basic_auth else None
        try:
            resp = await self.http.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
                auth=auth,
                timeout=request.timeout,
            )
        except httpx.TransportError as exc:
            raise BasecampTransportError(
                method=request.method,
                url=request.url,
                message=f"Network/timeout error: {exc}",
            ) from exc
        except httpx.DecodingError as exc:
            raise BasecampParseError(
                f"Undecodable response body from {request.method} {request.url}: {exc}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # Other httpx exceptions (redirect loops, bad URLs) - not retried either
            raise BasecampClientError(
                f"HTTPX error calling {request.method} {request.url}: {exc}"
            ) from exc

        return RawResponse(
            status_code=resp.status_code,
            headers=resp.headers,
            body=resp.content,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()


__all__ = ["RawResponse", "Transport", "HttpxTransport"]
