"""Content-type registry: MediaType -> MIME string."""
from __future__ import annotations

from rest_api.constants import APPLICATION_JSON, APPLICATION_XML, MediaType
from rest_api.domain.errors import UnsupportedMediaTypeError

_MIME_STRINGS: dict[MediaType, str] = {
    MediaType.JSON: APPLICATION_JSON,
    MediaType.XML: APPLICATION_XML,
}


def mime_string_for(media_type: MediaType) -> str:
    """Return the MIME string sent in Content-Type/Accept headers for media_type."""
    try:
        return _MIME_STRINGS[media_type]
    except (KeyError, TypeError):
        raise UnsupportedMediaTypeError(f"Media type '{media_type}' is not supported.") from None
