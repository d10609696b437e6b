"""HTTP transport factory: builds an HttpTransport bound to a base address."""
from __future__ import annotations

import httpx

from rest_api.infrastructure.http.httpx_transport import HttpxTransport
from rest_api.ports.http_transport import HttpTransport, RequestTimeout


def normalize_base_address(base_address: str) -> str:
    """Give a bare host an http:// scheme, as a URI builder would."""
    address = base_address.strip()
    if "://" not in address:
        address = f"http://{address}"
    return address


def create_transport(
    base_address: str,
    *,
    proxy: str | httpx.Proxy | None = None,
    timeout: RequestTimeout | None = None,
) -> HttpTransport:
    """Build the transport. Without an explicit proxy the ambient environment
    (proxy variables, .netrc credentials) is trusted; with one it is not.
    """
    async_client = httpx.AsyncClient(
        base_url=normalize_base_address(base_address),
        proxy=proxy,
        trust_env=proxy is None,
    )
    return HttpxTransport(async_client, timeout=timeout)
