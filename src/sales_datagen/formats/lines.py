"""
Line grammar for the products, salesmen and sales files.

    product-line  = integer ";" text ";" integer
    salesman-line = doc-type ";" integer ";" text ";" text
    sale-line     = integer ";" integer [";"]

Both the writers and the loaders go through this module so the two sides
cannot drift apart.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sales_datagen.models.core import Product, Sale, Salesman

SEPARATOR = ";"
KEY_SEPARATOR = "_"
FILE_EXTENSION = ".txt"

INT32_BITS = 32
INT64_BITS = 64

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def split_fields(text: str, sep: str = SEPARATOR) -> list[str]:
    """
    Split on `sep`, dropping trailing empty fields.

    "3;5;" -> ["3", "5"], "A_B_" -> ["A", "B"]. Interior empty fields are
    kept ("1;;500" -> ["1", "", "500"]).
    """
    parts = text.split(sep)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_int(text: str, bits: int = INT32_BITS) -> int:
    """
    Parse a signed decimal integer that fits in `bits` bits.

    Surrounding whitespace is ignored. Digit separators, non-ASCII digits and
    out-of-range values raise ValueError.
    """
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise ValueError(f"Not an integer: {text!r}")
    value = int(stripped)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"Integer out of {bits}-bit range: {text!r}")
    return value


def format_product_line(product: Product) -> str:
    return SEPARATOR.join((str(product.id), product.name, str(product.price)))


def format_salesman_line(salesman: Salesman) -> str:
    return SEPARATOR.join(
        (
            salesman.doc_type,
            str(salesman.doc_number),
            salesman.first_name,
            salesman.last_name,
        )
    )


def format_sale_line(sale: Sale) -> str:
    return SEPARATOR.join((str(sale.product_id), str(sale.quantity)))


def sales_file_name(doc_type: str, doc_number: int) -> str:
    """File name of a salesman's sales log: CC_12345678.txt."""
    return f"{doc_type}{KEY_SEPARATOR}{doc_number}{FILE_EXTENSION}"


def sales_file_key(file_name: str) -> str | None:
    """
    Recover the salesman key from a sales file name.

    Returns None when the name does not end in .txt or its base name does
    not split into exactly two parts on "_" (FOO.txt, A_B_C.txt).
    """
    if not file_name.endswith(FILE_EXTENSION):
        return None
    base = file_name[: -len(FILE_EXTENSION)]
    parts = split_fields(base, KEY_SEPARATOR)
    if len(parts) != 2:
        return None
    return f"{parts[0]}{KEY_SEPARATOR}{parts[1]}"
