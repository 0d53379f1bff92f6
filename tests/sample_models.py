"""Example records shared by the test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from openapidoc.field_customization import FieldDoc


def tagged(name: str, **kwargs: Any) -> Any:
    metadata = dict(kwargs.pop("metadata", {}))
    metadata["json"] = name
    return field(metadata=metadata, **kwargs)


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class Animal:
    name: str = tagged("Name")
    age: int = tagged("Age")
    tags: list[str] = tagged("Tags", default_factory=list)


@dataclass
class Toy:
    label: str = tagged("label")


@dataclass
class Child:
    name: str = tagged("Name")
    toy: Toy | None = tagged("toy", default=None)


@dataclass
class Parent:
    name: str = tagged("Name")
    kids: list[Child] = tagged("Kids", default_factory=list)


@dataclass
class Node:
    value: int = tagged("value")
    next: Node | None = tagged("next", default=None)


@dataclass
class Book:
    title: str = tagged("title")
    author: Author | None = tagged("author", default=None)


@dataclass
class Author:
    name: str = tagged("name")
    books: list[Book] = tagged("books", default_factory=list)
    favorite: Book | None = tagged("favorite", default=None)


@dataclass
class Address:
    street: str = tagged("street")
    city: str = tagged("city")


@dataclass
class Customer:
    name: str = tagged("name")
    home: Address = tagged("home")
    work: Address = tagged("work")


@dataclass
class Holder:
    payload: Any = tagged("payload")


@dataclass
class Quantity:
    amount: float
    unit: str

    def __str__(self) -> str:
        return f"{self.amount}{self.unit}"


@dataclass
class Measurement:
    taken_at: datetime = tagged("takenAt")
    quantity: Quantity = tagged("quantity")
    color: Color = tagged("color")


@dataclass
class Pet:
    id: int = tagged("id", metadata={"openapi": "ex:2"})
    name: str = tagged("name", metadata={"openapi": FieldDoc(description="Pet name")})
    owner: Customer | None = tagged(
        "owner", default=None, metadata={"openapi": "desc:'who owns it',required:'name;home'"}
    )


def build_animal() -> Animal:
    return Animal(name="Kit", age=3, tags=["a", "b"])


def build_parent() -> Parent:
    return Parent(name="P", kids=[Child(name="A"), Child(name="B")])


def build_customer() -> Customer:
    return Customer(
        name="Ada",
        home=Address(street="1 Main St", city="Springfield"),
        work=Address(street="9 Office Rd", city="Shelbyville"),
    )


def build_pet() -> Pet:
    return Pet(id=7, name="Rex", owner=build_customer())


ROOT_ANIMAL = build_animal()
