"""Concrete HTTP transport using httpx (injected where HttpTransport is needed)."""
from __future__ import annotations

from typing import Mapping

import httpx

from rest_api.constants import DEFAULT_CONNECT_TIMEOUT_SECONDS, DEFAULT_READ_TIMEOUT_SECONDS
from rest_api.ports.http_transport import (
    HttpResponse,
    HttpTransport,
    RequestTimeout,
    TransportError,
    TransportTimeoutError,
)

DEFAULT_TIMEOUT = RequestTimeout(
    connect_seconds=DEFAULT_CONNECT_TIMEOUT_SECONDS,
    read_seconds=DEFAULT_READ_TIMEOUT_SECONDS,
)


class _HttpxResponseAdapter:
    """Adapts httpx.Response to the HttpResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._response.headers)

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def url(self) -> str:
        return str(self._response.url)

    @property
    def is_success(self) -> bool:
        return self._response.is_success


class HttpxTransport(HttpTransport):
    """HttpTransport implementation using one httpx.AsyncClient."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        timeout: RequestTimeout | None = None,
    ) -> None:
        self._client = client
        self._timeout = timeout or DEFAULT_TIMEOUT

    @property
    def headers(self) -> httpx.Headers:
        return self._client.headers

    @property
    def timeout(self) -> RequestTimeout:
        return self._timeout

    async def send(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        httpx_timeout = httpx.Timeout(
            connect=self._timeout.connect_seconds,
            read=self._timeout.read_seconds,
            write=self._timeout.read_seconds,
            pool=self._timeout.connect_seconds,
        )
        try:
            response = await self._client.request(
                method,
                url,
                content=content,
                headers=dict(headers) if headers else None,
                timeout=httpx_timeout,
            )
            return _HttpxResponseAdapter(response)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"timeout while sending {method} {url}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

    async def close(self) -> None:
        await self._client.aclose()
