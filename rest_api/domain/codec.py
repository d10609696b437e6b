"""Body codec: typed values <-> bytes/text for each MediaType.

Strings bypass structured serialization in both directions. JSON goes through
pydantic TypeAdapters, XML through the reflective element serializer.
"""
from __future__ import annotations

from typing import Any, TypeVar

from rest_api.constants import MediaType
from rest_api.domain.errors import MissingArgumentError, UnsupportedMediaTypeError
from rest_api.domain.media_types import mime_string_for
from rest_api.domain.models import EncodedContent, JsonSerializerSettings
from rest_api.domain.type_adapters import type_adapter
from rest_api.domain.xml_serializer import xml_deserialize_from_string, xml_serialize_to_string

T = TypeVar("T")

_DEFAULT_SETTINGS = JsonSerializerSettings()


def encode(
    value: Any,
    media_type: MediaType,
    settings: JsonSerializerSettings | None = None,
) -> EncodedContent:
    """Serialize value into a request body tagged with media_type's Content-Type."""
    if value is None:
        raise MissingArgumentError("value")

    content_type = mime_string_for(media_type)

    # strings are sent as-is
    if isinstance(value, str):
        return EncodedContent(data=value.encode("utf-8"), content_type=content_type)

    if media_type == MediaType.JSON:
        options = settings or _DEFAULT_SETTINGS
        data = type_adapter(type(value)).dump_json(value, **options.dump_kwargs())
    elif media_type == MediaType.XML:
        data = xml_serialize_to_string(value).encode("utf-8")
    else:
        raise UnsupportedMediaTypeError(f"Content Type '{media_type}' is not supported.")

    return EncodedContent(data=data, content_type=content_type)


def decode(
    text: str,
    target_type: type[T],
    media_type: MediaType,
    settings: JsonSerializerSettings | None = None,
) -> T:
    """Deserialize a response body into target_type.

    Media types other than XML are decoded as JSON. An empty JSON body
    decodes to None.
    """
    if target_type is str:
        return text  # type: ignore[return-value]

    if media_type == MediaType.XML:
        return xml_deserialize_from_string(text, target_type)

    if not text:
        return None  # type: ignore[return-value]
    options = settings or _DEFAULT_SETTINGS
    return type_adapter(target_type).validate_json(text, **options.validate_kwargs())
