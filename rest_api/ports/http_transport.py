"""HTTP transport port: contract for sending a single request.

The client depends on this port; infrastructure (e.g. httpx) implements it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, MutableMapping, Protocol, runtime_checkable


class TransportError(Exception):
    """Base for transport failures (connect, read, protocol)."""


class TransportTimeoutError(TransportError):
    """Raised when the request times out."""


@runtime_checkable
class HttpResponse(Protocol):
    """Minimal read-only view of a fully read HTTP response."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def content(self) -> bytes: ...

    @property
    def text(self) -> str: ...

    @property
    def url(self) -> str: ...

    @property
    def is_success(self) -> bool: ...


@dataclass(frozen=True)
class RequestTimeout:
    """Connect and read timeouts in seconds."""

    connect_seconds: float
    read_seconds: float


@runtime_checkable
class HttpTransport(Protocol):
    """Port: send requests over one long-lived connection handle."""

    @property
    def headers(self) -> MutableMapping[str, str]:
        """Default headers sent with every request. Names are case-insensitive."""
        ...

    async def send(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send one request; raise TransportTimeoutError or TransportError on failure."""
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool)."""
        ...
