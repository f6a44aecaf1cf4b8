"""
Loaders for the products, salesmen and sales files.

Malformed rows and dangling references are skipped with a warning; only a
missing sales directory (or an unreadable products/salesmen file) is fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from sales_datagen.formats.lines import (
    FILE_EXTENSION,
    INT64_BITS,
    parse_int,
    sales_file_key,
    split_fields,
)
from sales_datagen.models.core import Product, Sale, Salesman

logger = logging.getLogger(__name__)

UNDECODABLE = "\ufffd"


def _iter_lines(path: Path) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, line) for every non-blank line of path.

    Bytes that are not valid UTF-8 are decoded as U+FFFD; lines carrying them
    are skipped with a warning instead of failing the whole file.
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        for line_no, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            if UNDECODABLE in line:
                logger.warning("Undecodable line skipped (%s:%d): %r", path, line_no, line)
                continue
            yield line_no, line


def load_products(file_path: str | Path) -> dict[int, Product]:
    """
    Load products keyed by id.

    Format per line: ID;ProductName;Price. Duplicate ids keep the last row.
    """
    path = Path(file_path)
    products: dict[int, Product] = {}

    for line_no, line in _iter_lines(path):
        parts = split_fields(line)
        if len(parts) != 3:
            logger.warning("Invalid product line skipped (%s:%d): %s", path, line_no, line)
            continue

        try:
            product = Product(parse_int(parts[0]), parts[1].strip(), parse_int(parts[2]))
        except ValueError as e:
            logger.warning(
                "Invalid product data skipped (%s:%d): %s (%s)", path, line_no, line, e
            )
            continue

        if product.id in products:
            logger.warning(
                "Duplicate product id %d (%s:%d), keeping the last row",
                product.id,
                path,
                line_no,
            )
        products[product.id] = product

    logger.debug("Loaded %d products from %s", len(products), path)
    return products


def load_salesmen(file_path: str | Path) -> dict[str, Salesman]:
    """
    Load salesmen keyed by "DocType_DocNumber", the sales file naming scheme.

    Format per line: DocType;DocNumber;FirstName;LastName
    """
    path = Path(file_path)
    salesmen: dict[str, Salesman] = {}

    for line_no, line in _iter_lines(path):
        parts = split_fields(line)
        if len(parts) != 4:
            logger.warning("Invalid salesman line skipped (%s:%d): %s", path, line_no, line)
            continue

        doc_type, doc_number_str, first_name, last_name = (p.strip() for p in parts)
        try:
            doc_number = parse_int(doc_number_str, bits=INT64_BITS)
        except ValueError:
            logger.warning("Invalid doc number skipped (%s:%d): %s", path, line_no, line)
            continue

        try:
            salesman = Salesman(doc_type, doc_number, first_name, last_name)
        except ValueError as e:
            logger.warning(
                "Invalid salesman data skipped (%s:%d): %s (%s)", path, line_no, line, e
            )
            continue

        key = salesman.sales_file_key
        if key in salesmen:
            logger.warning(
                "Duplicate salesman %s (%s:%d), keeping the last row", key, path, line_no
            )
        salesmen[key] = salesman

    logger.debug("Loaded %d salesmen from %s", len(salesmen), path)
    return salesmen


def _parse_sale(
    line: str, file_name: str, products: dict[int, Product]
) -> Sale | None:
    """Parse one sales line, or warn and return None."""
    parts = split_fields(line)
    if len(parts) < 2:
        logger.warning("Invalid sale line skipped in %s: %s", file_name, line)
        return None

    try:
        product_id = parse_int(parts[0])
        quantity = parse_int(parts[1])
    except ValueError:
        logger.warning("Invalid sale data skipped in %s: %s", file_name, line)
        return None

    if product_id not in products:
        logger.warning("Sale ignored, product not found: %d in %s", product_id, file_name)
        return None
    if quantity <= 0:
        logger.warning("Sale ignored, invalid quantity: %s in %s", line, file_name)
        return None

    return Sale(product_id, quantity)


def load_sales(
    sales_dir: str | Path,
    salesmen: dict[str, Salesman],
    products: dict[int, Product],
) -> dict[Salesman, list[Sale]]:
    """
    Load every salesman's sales from sales_dir.

    Each salesman has a file named DocType_DocNumber.txt; each line is
    ProductID;Quantity with an optional trailing separator. Files are read in
    sorted name order and sales keep their in-file order.

    Raises:
        FileNotFoundError: If sales_dir does not exist.
        NotADirectoryError: If sales_dir is not a directory.
    """
    directory = Path(sales_dir)
    if not directory.exists():
        raise FileNotFoundError(f"Sales directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Sales directory is not a directory: {directory}")

    sales_data: dict[Salesman, list[Sale]] = {}

    for file in sorted(directory.iterdir()):
        if not file.is_file() or not file.name.endswith(FILE_EXTENSION):
            continue

        key = sales_file_key(file.name)
        if key is None:
            logger.warning("Invalid sales file name skipped: %s", file.name)
            continue

        salesman = salesmen.get(key)
        if salesman is None:
            logger.warning("Sales file ignored, salesman not found: %s", file.name)
            continue

        sales_list = sales_data.setdefault(salesman, [])
        try:
            for _, line in _iter_lines(file):
                sale = _parse_sale(line, file.name, products)
                if sale is not None:
                    sales_list.append(sale)
        except OSError as e:
            logger.warning("Error reading sales file %s: %s", file.name, e)

    logger.debug(
        "Loaded %d sales for %d salesmen from %s",
        sum(len(v) for v in sales_data.values()),
        len(sales_data),
        directory,
    )
    return sales_data
