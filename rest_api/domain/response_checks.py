"""Response fault translation: non-2xx responses become HttpResponseError."""
from __future__ import annotations

from rest_api.domain.errors import HttpResponseError
from rest_api.ports.http_transport import HttpResponse


def ensure_success_status_code(response: HttpResponse) -> None:
    """Return if the response is 2xx; otherwise raise HttpResponseError with the body text."""
    if response.is_success:
        return

    content = response.text
    raise HttpResponseError(response.status_code, content)
