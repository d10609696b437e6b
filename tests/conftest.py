from __future__ import annotations

import pytest

from rest_api import MediaType, RestApiClient
from rest_api.ports.http_transport import TransportError
from tests.fakes import FakeTransport


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def failing_transport() -> FakeTransport:
    return FakeTransport(raise_on_send=TransportError("connection refused"))


@pytest.fixture()
def json_client(fake_transport: FakeTransport) -> RestApiClient:
    return RestApiClient(
        "https://api.example.com",
        MediaType.JSON,
        MediaType.JSON,
        transport=fake_transport,
    )


@pytest.fixture()
def xml_client(fake_transport: FakeTransport) -> RestApiClient:
    return RestApiClient(
        "https://api.example.com",
        MediaType.XML,
        MediaType.XML,
        transport=fake_transport,
    )
