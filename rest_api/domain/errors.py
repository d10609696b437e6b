"""Errors raised by the REST client. All derive from RestApiError."""
from __future__ import annotations

from http import HTTPStatus


class RestApiError(Exception):
    """Base for every error raised by this package."""


class InvalidArgumentError(RestApiError, ValueError):
    """An argument is malformed. Raised locally; no request is sent."""


class MissingArgumentError(InvalidArgumentError):
    """A required argument is None, empty or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be empty")
        self.name = name


class UnsupportedMediaTypeError(RestApiError, ValueError):
    """Raised for a media type outside MediaType."""


class XmlSerializationError(RestApiError, ValueError):
    """Raised when an XML body cannot be parsed."""


class ClientClosedError(RestApiError, RuntimeError):
    """Raised when a closed client is used."""


class HttpResponseError(RestApiError):
    """Non-success HTTP response. Carries the status code and the full body text."""

    def __init__(self, status_code: int, content: str) -> None:
        super().__init__(content)
        self._status_code = int(status_code)
        self._content = content

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def content(self) -> str:
        return self._content

    @property
    def reason_phrase(self) -> str:
        try:
            return HTTPStatus(self._status_code).phrase
        except ValueError:
            return ""

    def __reduce__(self):
        return (type(self), (self._status_code, self._content))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self._status_code}, content={self._content!r})"
