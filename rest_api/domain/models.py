"""Domain value objects."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class JsonSerializerSettings:
    """JSON options. Install one instance for encoding and another for decoding.

    by_alias, exclude_none, exclude_defaults and indent apply when encoding;
    strict applies when decoding.
    """

    by_alias: bool = False
    exclude_none: bool = False
    exclude_defaults: bool = False
    indent: int | None = None
    strict: bool | None = None

    def dump_kwargs(self) -> dict[str, Any]:
        return {
            "by_alias": self.by_alias,
            "exclude_none": self.exclude_none,
            "exclude_defaults": self.exclude_defaults,
            "indent": self.indent,
        }

    def validate_kwargs(self) -> dict[str, Any]:
        return {"strict": self.strict}


@dataclass(frozen=True)
class EncodedContent:
    """Request body bytes tagged with their Content-Type header."""

    data: bytes
    content_type: str
    headers: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise TypeError("content.data must be bytes")
        object.__setattr__(self, "headers", {"Content-Type": self.content_type})
