"""Cached pydantic TypeAdapters, shared by the JSON and XML codecs."""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter


@lru_cache(maxsize=256)
def type_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)
