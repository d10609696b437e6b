"""
Composition root: builds a RestApiClient from Settings.

The caller owns the client's lifecycle (``async with`` or ``close()``).
"""
from __future__ import annotations

from rest_api.application.rest_api_client import RestApiClient
from rest_api.config.settings import Settings
from rest_api.ports.http_transport import HttpTransport, RequestTimeout


def create_rest_api_client(
    settings: Settings | None = None,
    *,
    transport: HttpTransport | None = None,
) -> RestApiClient:
    """Build a client from settings: media types, proxy, timeouts, token and User-Agent."""
    _settings = settings or Settings()
    timeout = RequestTimeout(
        connect_seconds=_settings.connect_timeout_seconds,
        read_seconds=_settings.read_timeout_seconds,
    )
    client = RestApiClient(
        _settings.base_address,
        _settings.content_type,
        _settings.accept_type,
        proxy=_settings.proxy or None,
        timeout=timeout,
        transport=transport,
    )
    if _settings.access_token:
        client.set_access_token(_settings.access_token)
    if _settings.user_agent:
        client.set_custom_header("User-Agent", _settings.user_agent)
    return client
