"""Library-level constants shared across modules."""
from __future__ import annotations

from enum import Enum

SERVICE_NAME = "rest_api"

# JavaScript Object Notation; defined in RFC 4627
APPLICATION_JSON = "application/json"

# Extensible Markup Language; defined in RFC 3023
APPLICATION_XML = "application/xml"

DEFAULT_CONNECT_TIMEOUT_SECONDS = 5.0
DEFAULT_READ_TIMEOUT_SECONDS = 100.0


class MediaType(str, Enum):
    """Media type of a request body or an accepted response."""

    JSON = "json"
    XML = "xml"
