"""Generic REST client helper with JSON/XML content negotiation."""

from loguru import logger

from rest_api.application.rest_api_client import RestApiClient
from rest_api.composition import create_rest_api_client
from rest_api.constants import APPLICATION_JSON, APPLICATION_XML, MediaType
from rest_api.domain.codec import decode, encode
from rest_api.domain.errors import (
    ClientClosedError,
    HttpResponseError,
    InvalidArgumentError,
    MissingArgumentError,
    RestApiError,
    UnsupportedMediaTypeError,
    XmlSerializationError,
)
from rest_api.domain.media_types import mime_string_for
from rest_api.domain.models import EncodedContent, JsonSerializerSettings
from rest_api.domain.response_checks import ensure_success_status_code
from rest_api.domain.xml_serializer import xml_deserialize_from_string, xml_serialize_to_string
from rest_api.ports.http_transport import RequestTimeout, TransportError, TransportTimeoutError

# library: applications opt in with logger.enable("rest_api")
logger.disable("rest_api")

__all__ = [
    "APPLICATION_JSON",
    "APPLICATION_XML",
    "ClientClosedError",
    "EncodedContent",
    "HttpResponseError",
    "InvalidArgumentError",
    "JsonSerializerSettings",
    "MediaType",
    "MissingArgumentError",
    "RequestTimeout",
    "RestApiClient",
    "RestApiError",
    "TransportError",
    "TransportTimeoutError",
    "UnsupportedMediaTypeError",
    "XmlSerializationError",
    "create_rest_api_client",
    "decode",
    "encode",
    "ensure_success_status_code",
    "mime_string_for",
    "xml_deserialize_from_string",
    "xml_serialize_to_string",
]
