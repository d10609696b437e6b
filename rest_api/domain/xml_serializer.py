"""Reflective XML element serialization.

Values are flattened with pydantic (``TypeAdapter.dump_python``) and written as
nested elements: the root element is named after the value's class, each field
becomes a child element, list fields become repeated sibling elements (an empty
list is a single empty element) and None fields are omitted. Deserialization
walks the target type's fields so repeated elements are regrouped into lists,
then hands the result to pydantic for validation.
"""
from __future__ import annotations

import dataclasses
import datetime
import decimal
import re
import types
import typing
import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar, Union

from pydantic import BaseModel

from rest_api.domain.errors import MissingArgumentError, XmlSerializationError
from rest_api.domain.type_adapters import type_adapter

T = TypeVar("T")

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
XSI_NIL = "{http://www.w3.org/2001/XMLSchema-instance}nil"

_LIST_ORIGINS = (list, tuple, set, frozenset, Sequence)

# XSD names for builtin scalars, used for items of top-level lists
_SCALAR_TAGS = {
    str: "string",
    int: "int",
    float: "double",
    bool: "boolean",
    decimal.Decimal: "decimal",
    datetime.datetime: "dateTime",
}

# XML 1.0 Name production, without ':' (no namespace handling)
_NAME_START_CHARS = (
    "A-Z_a-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u02ff\u0370-\u037d\u037f-\u1fff"
    "\u200c-\u200d\u2070-\u218f\u2c00-\u2fef\u3001-\ud7ff\uf900-\ufdcf\ufdf0-\ufffd"
)
_NAME_CHARS = _NAME_START_CHARS + "\\-.0-9\u00b7\u0300-\u036f\u203f-\u2040"
_XML_NAME = re.compile(f"[{_NAME_START_CHARS}][{_NAME_CHARS}]*")


def xml_serialize_to_string(model: Any) -> str:
    """Serialize model to an XML document string."""
    if model is None:
        raise MissingArgumentError("model")

    data = type_adapter(type(model)).dump_python(model, mode="json", by_alias=True)

    if isinstance(data, list):
        item_tag = _item_tag(model)
        root = ET.Element(_checked_tag(f"ArrayOf{item_tag[:1].upper()}{item_tag[1:]}"))
        for item in data:
            _append_child(root, item_tag, item)
    else:
        root = ET.Element(_checked_tag(_root_tag(type(model))))
        _write_value(root, data)

    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def xml_deserialize_from_string(xml_string: str, target_type: type[T]) -> T:
    """Deserialize an XML document string into target_type."""
    if not xml_string:
        raise MissingArgumentError("xml_string")

    try:
        root = ET.fromstring(xml_string)
    except ET.ParseError as exc:
        raise XmlSerializationError(f"invalid XML document: {exc}") from exc

    data = _element_to_value(root, target_type)
    return type_adapter(target_type).validate_python(data)


def _root_tag(cls: type) -> str:
    return getattr(cls, "__xml_root__", None) or _SCALAR_TAGS.get(cls) or cls.__name__


def _item_tag(items: Any) -> str:
    for item in items:
        if item is not None:
            return _root_tag(type(item))
    return "anyType"


def _checked_tag(tag: str) -> str:
    if not _XML_NAME.fullmatch(tag):
        raise XmlSerializationError(f"'{tag}' is not a valid XML element name")
    return tag


def _write_value(element: ET.Element, value: Any) -> None:
    if isinstance(value, Mapping):
        for key, child in value.items():
            if child is None:
                continue
            tag = str(key)
            if isinstance(child, list):
                if not child:
                    ET.SubElement(element, _checked_tag(tag))
                for item in child:
                    _append_child(element, tag, item)
            else:
                _append_child(element, tag, child)
    elif isinstance(value, list):
        for item in value:
            _append_child(element, "item", item)
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    else:
        element.text = str(value)


def _append_child(parent: ET.Element, tag: str, value: Any) -> None:
    child = ET.SubElement(parent, _checked_tag(tag))
    if value is None:
        child.set(XSI_NIL, "true")
        return
    _write_value(child, value)


def _unwrap(annotation: Any) -> Any:
    """Strip Optional[...] and Annotated[...] down to the concrete annotation."""
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return _unwrap(typing.get_args(annotation)[0])
    if _is_union(annotation):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
    return annotation


def _is_union(annotation: Any) -> bool:
    return typing.get_origin(annotation) is Union or isinstance(annotation, types.UnionType)


def _is_optional(annotation: Any) -> bool:
    if typing.get_origin(annotation) is typing.Annotated:
        return _is_optional(typing.get_args(annotation)[0])
    return annotation is None or (_is_union(annotation) and type(None) in typing.get_args(annotation))


def _is_list_type(annotation: Any) -> bool:
    origin = typing.get_origin(annotation) or annotation
    return isinstance(origin, type) and issubclass(origin, _LIST_ORIGINS) and not issubclass(origin, (str, bytes))


def _list_item_type(annotation: Any) -> Any:
    args = typing.get_args(annotation)
    return args[0] if args else Any


def _is_empty_marker(children: list[ET.Element]) -> bool:
    if len(children) != 1:
        return False
    child = children[0]
    return not len(child) and not child.text and not child.attrib


def _field_types(cls: type) -> dict[str, Any] | None:
    """Map element tag -> field annotation for models and dataclasses."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return {
            (info.alias or name): info.annotation
            for name, info in cls.model_fields.items()
        }
    if isinstance(cls, type) and dataclasses.is_dataclass(cls):
        hints = typing.get_type_hints(cls)
        return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(cls)}
    return None


def _element_to_value(element: ET.Element, annotation: Any) -> Any:
    if element.get(XSI_NIL) == "true":
        return None

    annotation = _unwrap(annotation)

    if _is_list_type(annotation):
        item_type = _list_item_type(annotation)
        return [_element_to_value(child, item_type) for child in element]

    fields = _field_types(annotation)
    if fields is not None:
        grouped: dict[str, list[ET.Element]] = {}
        for child in element:
            grouped.setdefault(child.tag, []).append(child)

        result: dict[str, Any] = {}
        for tag, children in grouped.items():
            field_type = _unwrap(fields.get(tag, Any))
            if _is_list_type(field_type):
                if _is_empty_marker(children):
                    result[tag] = []
                    continue
                item_type = _list_item_type(field_type)
                result[tag] = [_element_to_value(child, item_type) for child in children]
            else:
                result[tag] = _element_to_value(children[-1], field_type)

        # a missing non-optional list field is an empty list
        for tag, field_type in fields.items():
            if tag not in result and not _is_optional(field_type) and _is_list_type(_unwrap(field_type)):
                result[tag] = []
        return result

    if len(element):
        return _untyped(element)
    return element.text or ""


def _untyped(element: ET.Element) -> Any:
    """Convert an element without type information; repeated tags become lists."""
    if element.get(XSI_NIL) == "true":
        return None
    if not len(element):
        return element.text or ""

    result: dict[str, Any] = {}
    for child in element:
        value = _untyped(child)
        if child.tag in result:
            existing = result[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[child.tag] = [existing, value]
        else:
            result[child.tag] = value
    return result
