"""Writer for the semicolon-delimited products, salesmen and sales files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from sales_datagen.config.layout import DataLayout
from sales_datagen.formats.lines import (
    format_product_line,
    format_sale_line,
    format_salesman_line,
)
from sales_datagen.models.core import Product, Sale, Salesman
from sales_datagen.writers.base import BaseWriter

logger = logging.getLogger(__name__)


def format_record(record: Any) -> str:
    """Render one entity as a line of its file kind (no newline)."""
    if isinstance(record, Product):
        return format_product_line(record)
    if isinstance(record, Salesman):
        return format_salesman_line(record)
    if isinstance(record, Sale):
        return format_sale_line(record)
    raise TypeError(f"Cannot format record of type {type(record).__name__}")


class DelimitedWriter(BaseWriter):
    """Writes entities under a DataLayout, one ';'-delimited line per record."""

    def __init__(self, layout: DataLayout) -> None:
        self.layout = layout

    def write(self, records: Iterable[Any], destination: Path) -> int:
        """
        Write records to destination, replacing any existing file.

        OSError from opening or writing propagates to the caller; the file
        handle is closed on every path.
        """
        count = 0
        with open(destination, "w", encoding="utf-8", newline="\n") as f:
            for record in records:
                f.write(format_record(record))
                f.write("\n")
                count += 1
        logger.debug("Wrote %d rows to %s", count, destination)
        return count

    def write_products(self, products: Iterable[Product]) -> int:
        """Write products to products.txt."""
        return self.write(products, self.layout.products_file)

    def write_salesmen(self, salesmen: Iterable[Salesman]) -> int:
        """Write the roster to salesmen.txt."""
        return self.write(salesmen, self.layout.salesmen_file)

    def write_sales(self, salesman: Salesman, sales: Iterable[Sale]) -> int:
        """Write one salesman's sales to sales/<docType>_<docNumber>.txt."""
        path = self.layout.sales_file(salesman.doc_type, salesman.doc_number)
        return self.write(sales, path)
