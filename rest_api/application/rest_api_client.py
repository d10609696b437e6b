"""REST client: typed request/response pipeline over one HTTP transport.

Each verb validates its arguments locally, encodes the request model with the
configured content type, sends it, turns a non-2xx response into
HttpResponseError and decodes the body into the requested type.

Configuration mutators are not thread-safe. Default headers live on the shared
transport, so changing them while requests are in flight may or may not affect
those requests.
"""
from __future__ import annotations

from typing import Any, MutableMapping, TypeVar

import httpx
from loguru import logger

from rest_api.constants import SERVICE_NAME, MediaType
from rest_api.domain import codec
from rest_api.domain.errors import ClientClosedError, InvalidArgumentError, MissingArgumentError
from rest_api.domain.media_types import mime_string_for
from rest_api.domain.models import EncodedContent, JsonSerializerSettings
from rest_api.domain.response_checks import ensure_success_status_code
from rest_api.infrastructure.http.factory import create_transport
from rest_api.ports.http_transport import HttpResponse, HttpTransport, RequestTimeout

TResponse = TypeVar("TResponse")

_NO_CONTENT: Any = object()


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def _require_not_blank(value: str | None, name: str) -> None:
    if value is None or not value.strip():
        raise MissingArgumentError(name)


def _require_not_empty(value: str | None, name: str) -> None:
    if not value:
        raise InvalidArgumentError(f"{name} must be a non-empty URI")


class RestApiClient:
    """HTTP client helper with JSON/XML content negotiation.

    Use as an async context manager, or call close() when done:

        async with RestApiClient("https://api.example.com", MediaType.JSON, MediaType.JSON) as client:
            item = await client.post("/items", NewItem(name="x"), response_type=Item)
    """

    def __init__(
        self,
        base_address: str,
        content_type: MediaType | None = None,
        accept_type: MediaType | None = None,
        *,
        proxy: str | httpx.Proxy | None = None,
        timeout: RequestTimeout | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        self._base_address = base_address
        self._transport = transport or create_transport(base_address, proxy=proxy, timeout=timeout)
        self._content_type = content_type or MediaType.JSON
        self._accept_type = accept_type or MediaType.JSON
        self._json_serializer_settings: JsonSerializerSettings | None = None
        self._json_deserializer_settings: JsonSerializerSettings | None = None
        self._closed = False

        if content_type is not None or accept_type is not None:
            self._install_accept_header(self._accept_type)

        _log(
            "client_created",
            base_address=base_address,
            content_type=self._content_type.value,
            accept_type=self._accept_type.value,
            proxy=proxy is not None,
        )

    async def __aenter__(self) -> "RestApiClient":
        self._ensure_open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def base_address(self) -> str:
        return self._base_address

    @property
    def content_type(self) -> MediaType:
        return self._content_type

    @property
    def accept_type(self) -> MediaType:
        return self._accept_type

    @property
    def headers(self) -> MutableMapping[str, str]:
        """Default headers sent with every request (shared with the transport)."""
        return self._transport.headers

    @property
    def closed(self) -> bool:
        return self._closed

    # HTTP methods

    async def post(
        self,
        request_uri: str,
        request_model: Any = _NO_CONTENT,
        *,
        response_type: type[TResponse],
    ) -> TResponse:
        """Send POST, with request_model as body when given, and decode the response."""
        self._ensure_open()
        _require_not_blank(request_uri, "request_uri")
        content = self._content_for(request_model)

        response = await self._send("POST", request_uri, content)
        return self._response_model(response, response_type)

    async def put(
        self,
        request_uri: str,
        request_model: Any = _NO_CONTENT,
        *,
        response_type: type[TResponse] | None = None,
    ) -> TResponse | None:
        """Send PUT, with request_model as body when given.

        Returns the decoded response when response_type is given, otherwise None
        once the status has been checked.
        """
        self._ensure_open()
        _require_not_blank(request_uri, "request_uri")
        content = self._content_for(request_model)

        response = await self._send("PUT", request_uri, content)
        if response_type is None:
            ensure_success_status_code(response)
            return None
        return self._response_model(response, response_type)

    async def get(self, request_uri: str, *, response_type: type[TResponse]) -> TResponse:
        """Send GET and decode the response."""
        self._ensure_open()
        _require_not_empty(request_uri, "request_uri")

        response = await self._send("GET", request_uri, None)
        return self._response_model(response, response_type)

    async def get_bytes(self, request_uri: str) -> bytes:
        """Send GET and return the response body bytes without decoding."""
        self._ensure_open()
        _require_not_empty(request_uri, "request_uri")

        response = await self._send("GET", request_uri, None)
        ensure_success_status_code(response)
        return response.content

    # Configuration

    def set_json_serializer_settings(self, settings: JsonSerializerSettings | None) -> "RestApiClient":
        self._ensure_open()
        self._json_serializer_settings = settings
        return self

    def set_json_deserializer_settings(self, settings: JsonSerializerSettings | None) -> "RestApiClient":
        self._ensure_open()
        self._json_deserializer_settings = settings
        return self

    def set_custom_header(self, name: str, value: str) -> "RestApiClient":
        """Set a default header, replacing any existing header of the same name."""
        self._ensure_open()
        if not name:
            raise MissingArgumentError("name")
        if not value:
            raise MissingArgumentError("value")

        headers = self._transport.headers
        if name in headers:
            del headers[name]
        headers[name] = value
        return self

    def set_access_token(self, access_token: str) -> "RestApiClient":
        """Send access_token verbatim as the Authorization header.

        No scheme is prepended; pass e.g. "Bearer <token>".
        """
        self._ensure_open()
        if not access_token:
            raise MissingArgumentError("access_token")

        self._transport.headers["Authorization"] = access_token
        return self

    def set_content_type(self, media_type: MediaType) -> "RestApiClient":
        self._ensure_open()
        self._content_type = media_type
        return self

    def set_accept_type(self, media_type: MediaType) -> "RestApiClient":
        self._ensure_open()
        self._install_accept_header(media_type)
        self._accept_type = media_type
        return self

    async def close(self) -> None:
        """Close the transport. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self._transport.close()
        _log("client_closed", base_address=self._base_address)

    # Internals

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("client is closed")

    def _install_accept_header(self, media_type: MediaType) -> None:
        accept = mime_string_for(media_type)
        headers = self._transport.headers
        if "Accept" in headers:
            del headers["Accept"]
        headers["Accept"] = accept

    def _content_for(self, request_model: Any) -> EncodedContent | None:
        if request_model is _NO_CONTENT:
            return None
        if request_model is None:
            raise MissingArgumentError("request_model")
        return codec.encode(request_model, self._content_type, self._json_serializer_settings)

    async def _send(self, method: str, request_uri: str, content: EncodedContent | None) -> HttpResponse:
        _log(
            "request_sent",
            method=method,
            uri=request_uri,
            content_type=content.content_type if content is not None else None,
        )
        response = await self._transport.send(
            method,
            request_uri,
            content=content.data if content is not None else None,
            headers=content.headers if content is not None else None,
        )
        _log("response_received", method=method, uri=request_uri, status_code=response.status_code)
        return response

    def _response_model(self, response: HttpResponse, response_type: type[TResponse]) -> TResponse:
        ensure_success_status_code(response)
        text = response.text

        # raw result requested: no deserialization
        if response_type is str:
            return text  # type: ignore[return-value]

        return codec.decode(text, response_type, self._content_type, self._json_deserializer_settings)
