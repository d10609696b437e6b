"""Request/response models shared by the unit tests."""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class NewItem(BaseModel):
    name: str


class Item(BaseModel):
    id: int
    name: str


class Address(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city: str
    zip_code: str = Field(alias="zipCode")


class Order(BaseModel):
    id: int
    customer: str
    paid: bool = False
    tags: list[str] = []
    address: Address | None = None
    note: str | None = None


@dataclass
class Point:
    __xml_root__ = "point"

    x: int
    y: int


class Basket(BaseModel):
    name: str
    items: list[Item]


class Labels(BaseModel):
    labels: list[str] | None = None
