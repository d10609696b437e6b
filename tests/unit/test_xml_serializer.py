from __future__ import annotations

from typing import Any

import pytest

from rest_api import (
    MissingArgumentError,
    XmlSerializationError,
    xml_deserialize_from_string,
    xml_serialize_to_string,
)
from tests.models import Address, Basket, Item, Labels, Order, Point


def test_document_starts_with_declaration():
    xml = xml_serialize_to_string(Item(id=1, name="x"))

    assert xml == '<?xml version="1.0" encoding="utf-8"?><Item><id>1</id><name>x</name></Item>'


def test_fields_become_elements():
    order = Order(
        id=2,
        customer="bob",
        paid=True,
        tags=["red", "blue"],
        address=Address(city="Oslo", zip_code="0150"),
    )

    xml = xml_serialize_to_string(order)

    assert "<paid>true</paid>" in xml
    assert "<tags>red</tags><tags>blue</tags>" in xml
    assert "<address><city>Oslo</city><zipCode>0150</zipCode></address>" in xml
    assert "<note" not in xml


def test_top_level_list_is_wrapped():
    xml = xml_serialize_to_string([Item(id=1, name="a"), Item(id=2, name="b")])

    assert xml.endswith(
        "<ArrayOfItem><Item><id>1</id><name>a</name></Item><Item><id>2</id><name>b</name></Item></ArrayOfItem>"
    )
    assert xml_deserialize_from_string(xml, list[Item]) == [Item(id=1, name="a"), Item(id=2, name="b")]


def test_xml_root_override_and_dataclass_round_trip():
    xml = xml_serialize_to_string(Point(x=3, y=4))

    assert "<point><x>3</x><y>4</y></point>" in xml
    assert xml_deserialize_from_string(xml, Point) == Point(x=3, y=4)


def test_single_repeated_element_decodes_to_list():
    xml = "<Order><id>1</id><customer>c</customer><tags>only</tags></Order>"

    order = xml_deserialize_from_string(xml, Order)

    assert order.tags == ["only"]
    assert order.paid is False
    assert order.address is None


def test_nil_element_decodes_to_none():
    xml = (
        '<Order xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
        '<id>1</id><customer>c</customer><note xsi:nil="true" /></Order>'
    )

    assert xml_deserialize_from_string(xml, Order).note is None


def test_untyped_target_keeps_structure():
    xml = "<Root><a>1</a><b><c>x</c></b><d>1</d><d>2</d></Root>"

    assert xml_deserialize_from_string(xml, dict[str, Any]) == {
        "a": "1",
        "b": {"c": "x"},
        "d": ["1", "2"],
    }


def test_serialize_none_raises():
    with pytest.raises(MissingArgumentError):
        xml_serialize_to_string(None)


def test_deserialize_empty_raises():
    with pytest.raises(MissingArgumentError):
        xml_deserialize_from_string("", Item)


def test_deserialize_malformed_raises():
    with pytest.raises(XmlSerializationError):
        xml_deserialize_from_string("<Item><id>1</id>", Item)


def test_empty_list_field_is_an_empty_element():
    xml = xml_serialize_to_string(Basket(name="b", items=[]))

    assert xml.endswith("<Basket><name>b</name><items /></Basket>")
    assert xml_deserialize_from_string(xml, Basket) == Basket(name="b", items=[])


def test_optional_list_keeps_empty_and_none_apart():
    empty = xml_serialize_to_string(Labels(labels=[]))
    missing = xml_serialize_to_string(Labels())

    assert xml_deserialize_from_string(empty, Labels) == Labels(labels=[])
    assert xml_deserialize_from_string(missing, Labels) == Labels(labels=None)


def test_missing_required_list_decodes_to_empty():
    assert xml_deserialize_from_string("<Basket><name>b</name></Basket>", Basket) == Basket(name="b", items=[])


def test_empty_top_level_list():
    xml = xml_serialize_to_string([])

    assert xml.endswith("<ArrayOfAnyType />")
    assert xml_deserialize_from_string(xml, list[Item]) == []


def test_top_level_scalar_list_uses_xsd_names():
    assert xml_serialize_to_string(["a", "b"]).endswith(
        "<ArrayOfString><string>a</string><string>b</string></ArrayOfString>"
    )
    assert xml_serialize_to_string([1, 2]).endswith("<ArrayOfInt><int>1</int><int>2</int></ArrayOfInt>")
    assert xml_deserialize_from_string("<ArrayOfInt><int>1</int><int>2</int></ArrayOfInt>", list[int]) == [1, 2]


@pytest.mark.parametrize("key", ["a b", "1x", "", "<x>", "ns:tag"])
def test_invalid_element_name_raises(key):
    with pytest.raises(XmlSerializationError, match="not a valid XML element name"):
        xml_serialize_to_string({key: 1})


def test_non_ascii_element_names_are_allowed():
    assert xml_serialize_to_string({"navn": "x", "größe": 2}).endswith(
        "<dict><navn>x</navn><größe>2</größe></dict>"
    )
