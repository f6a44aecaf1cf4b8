"""Entity records shared by the generator and the loader."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from sales_datagen.formats.lines import parse_int, split_fields


class DocumentType(str, enum.Enum):
    CC = "CC"  # Cedula de ciudadania
    CE = "CE"  # Cedula de extranjeria


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _require_str(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


@dataclass(unsafe_hash=True)
class Product:
    """
    A catalog entry read from or written to the products file.

    Identity is the product id. Name and price can be updated after
    construction; every assignment is validated.
    """

    id: int
    name: str = field(compare=False)
    price: int = field(compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id":
            if "id" in self.__dict__:
                raise AttributeError("Product id cannot be reassigned")
            _require_int(name, value)
            if value <= 0:
                raise ValueError(f"Product id must be > 0, got {value}")
        elif name == "name":
            _require_str(name, value)
        elif name == "price":
            _require_int(name, value)
            if value < 0:
                raise ValueError(f"Product price must be >= 0, got {value}")
        super().__setattr__(name, value)


@dataclass(unsafe_hash=True)
class Salesman:
    """
    A member of the sales roster, identified by (doc_type, doc_number).

    doc_type is kept as its plain code ("CC" or "CE") so it can be joined
    directly into sales file names.
    """

    doc_type: str
    doc_number: int
    first_name: str = field(compare=False)
    last_name: str = field(compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "doc_type":
            _require_str(name, value)
            try:
                value = DocumentType(value).value
            except ValueError:
                valid = [t.value for t in DocumentType]
                raise ValueError(
                    f"Unknown document type '{value}'. Valid types: {valid}"
                ) from None
        elif name == "doc_number":
            _require_int(name, value)
            if value < 0:
                raise ValueError(f"Document number must be >= 0, got {value}")
        elif name in ("first_name", "last_name"):
            _require_str(name, value)
        super().__setattr__(name, value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def sales_file_key(self) -> str:
        """Key shared with the sales file name: DocType_DocNumber."""
        return f"{self.doc_type}_{self.doc_number}"


@dataclass(frozen=True)
class Sale:
    """A single product/quantity pair from a sales file."""

    product_id: int
    quantity: int

    def __post_init__(self) -> None:
        _require_int("product_id", self.product_id)
        _require_int("quantity", self.quantity)
        if self.product_id <= 0:
            raise ValueError(f"Sale product_id must be > 0, got {self.product_id}")
        if self.quantity < 0:
            raise ValueError(f"Sale quantity must be >= 0, got {self.quantity}")

    @classmethod
    def parse(cls, line: str) -> Sale:
        """
        Parse a sales line of the form "productId;quantity", with an optional
        trailing separator ("3;5;" -> Sale(3, 5)).

        Raises:
            ValueError: If the line is empty, has fewer than two fields,
                or either number cannot be parsed.
        """
        if line is None or not line.strip():
            raise ValueError("Sale line is empty")

        parts = split_fields(line)
        if len(parts) < 2:
            raise ValueError(f"Invalid sale line, expected 'productId;quantity': {line!r}")

        try:
            product_id = parse_int(parts[0])
            quantity = parse_int(parts[1])
        except ValueError as e:
            raise ValueError(f"Invalid number in sale line: {line!r}") from e
        return cls(product_id, quantity)
