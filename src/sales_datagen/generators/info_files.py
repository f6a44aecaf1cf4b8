"""Pseudo-random generator for the products, salesmen and sales input files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from sales_datagen.config.layout import DataLayout
from sales_datagen.config.loader import DEFAULT_GENERATION_CONFIG, merge_config
from sales_datagen.generators.static_pool import NamePool
from sales_datagen.models.core import DocumentType, Product, Sale, Salesman
from sales_datagen.writers.delimited_writer import DelimitedWriter

if TYPE_CHECKING:
    from numpy.random import Generator

logger = logging.getLogger(__name__)

DOCUMENT_TYPES = tuple(t.value for t in DocumentType)


def _bounds(ranges: dict[str, Any], key: str) -> tuple[int, int]:
    low, high = ranges[key]
    if low > high:
        raise ValueError(f"Invalid {key} range: [{low}, {high}]")
    return int(low), int(high)


@dataclass
class GenerationPass:
    """
    State of one generation pass, threaded through the generator calls.

    catalog_size is set by create_products_file so that the sales files of
    the same pass only reference product ids in [1, catalog_size].
    """

    fallback_catalog_size: int = 10
    catalog_size: int | None = None
    doc_types: dict[int, str] = field(default_factory=dict)  # doc_number -> doc_type
    files_written: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def effective_catalog_size(self) -> int:
        """Highest product id sales may reference."""
        if self.catalog_size is not None and self.catalog_size > 0:
            return self.catalog_size
        return self.fallback_catalog_size

    @property
    def used_doc_numbers(self) -> set[int]:
        return set(self.doc_types)

    @property
    def ok(self) -> bool:
        return not self.errors


class InfoFileGenerator:
    """
    Generates a coherent products / salesmen / sales triple on disk.

    Products must be generated before salesmen within a pass; otherwise sales
    reference ids in [1, fallback_catalog_size].
    """

    def __init__(
        self,
        layout: DataLayout | None = None,
        seed: int | None = None,
        config: dict[str, Any] | None = None,
        pool: NamePool | None = None,
    ) -> None:
        self.config = merge_config(DEFAULT_GENERATION_CONFIG, config or {})
        self.layout = layout or DataLayout()
        self.seed = seed if seed is not None else self.config.get("seed")
        self.rng: Generator = np.random.default_rng(self.seed)
        self.pool = pool or NamePool.from_config(self.config, seed=self.seed)
        self.writer = DelimitedWriter(self.layout)

        ranges = self.config["ranges"]
        self.price_range = _bounds(ranges, "price")
        self.doc_number_range = _bounds(ranges, "doc_number")
        self.sales_lines_range = _bounds(ranges, "sales_lines")
        self.quantity_range = _bounds(ranges, "quantity")

    def new_pass(self) -> GenerationPass:
        return GenerationPass(fallback_catalog_size=self.config["fallback_catalog_size"])

    def _randint(self, bounds: tuple[int, int], size: int | None = None) -> Any:
        """Uniform integer(s) in the closed interval bounds."""
        return self.rng.integers(bounds[0], bounds[1], size=size, endpoint=True)

    def _record_failure(self, generation_pass: GenerationPass, message: str) -> None:
        logger.error(message)
        generation_pass.errors.append(message)

    def generate(self, n_products: int, n_salesmen: int) -> GenerationPass:
        """Run a full pass: products first, then salesmen and their sales."""
        generation_pass = self.new_pass()
        self.create_products_file(n_products, generation_pass)
        self.create_salesmen_file(n_salesmen, generation_pass)
        logger.info(
            "Generated %d products and %d salesmen under %s (%d files, %d errors)",
            n_products,
            n_salesmen,
            self.layout.root,
            len(generation_pass.files_written),
            len(generation_pass.errors),
        )
        return generation_pass

    def create_products_file(
        self, products_count: int, generation_pass: GenerationPass | None = None
    ) -> GenerationPass:
        """
        Write products.txt with ids 1..products_count.

        Line format: ID;ProductName;Price
        """
        if products_count < 0:
            raise ValueError(f"products_count must be >= 0, got {products_count}")
        if generation_pass is None:
            generation_pass = self.new_pass()

        generation_pass.catalog_size = products_count

        names = self.pool.sample_product_names(products_count)
        prices = self._randint(self.price_range, size=products_count)
        products = [
            Product(i + 1, names[i], int(prices[i])) for i in range(products_count)
        ]

        path = self.layout.products_file
        try:
            self.layout.ensure_dirs()
            self.writer.write_products(products)
        except OSError as e:
            self._record_failure(generation_pass, f"Error creating products file: {e}")
        else:
            generation_pass.files_written.append(path)
        return generation_pass

    def _draw_doc_number(self, generation_pass: GenerationPass) -> int:
        """Uniform doc number, re-drawn until unused in this pass."""
        while True:
            doc_number = int(self._randint(self.doc_number_range))
            if doc_number not in generation_pass.doc_types:
                return doc_number

    def create_salesmen_file(
        self, salesman_count: int, generation_pass: GenerationPass | None = None
    ) -> GenerationPass:
        """
        Write salesmen.txt and one sales file per generated salesman.

        Line format: DocType;DocNumber;FirstName;LastName
        """
        if salesman_count < 0:
            raise ValueError(f"salesman_count must be >= 0, got {salesman_count}")
        if generation_pass is None:
            generation_pass = self.new_pass()

        low, high = self.doc_number_range
        available = (high - low + 1) - len(generation_pass.doc_types)
        if salesman_count > available:
            raise ValueError(
                f"Cannot draw {salesman_count} unique document numbers; "
                f"only {available} remain in [{low}, {high}]"
            )

        first_names = self.pool.sample_first_names(salesman_count)
        last_names = self.pool.sample_last_names(salesman_count)

        salesmen: list[Salesman] = []
        for i in range(salesman_count):
            doc_type = DOCUMENT_TYPES[int(self.rng.integers(len(DOCUMENT_TYPES)))]
            doc_number = self._draw_doc_number(generation_pass)
            generation_pass.doc_types[doc_number] = doc_type
            salesmen.append(Salesman(doc_type, doc_number, first_names[i], last_names[i]))

        path = self.layout.salesmen_file
        try:
            self.layout.ensure_dirs()
            self.writer.write_salesmen(salesmen)
        except OSError as e:
            self._record_failure(generation_pass, f"Error creating salesmen file: {e}")
            return generation_pass
        generation_pass.files_written.append(path)

        for salesman in salesmen:
            n_sales = int(self._randint(self.sales_lines_range))
            self.create_sales_file(salesman, n_sales, generation_pass)
        return generation_pass

    def create_sales_file(
        self,
        salesman: Salesman,
        sales_count: int,
        generation_pass: GenerationPass | None = None,
    ) -> GenerationPass:
        """
        Write sales/<DocType>_<DocNumber>.txt with sales_count random sales.

        Line format: ProductID;Quantity
        """
        if sales_count < 0:
            raise ValueError(f"sales_count must be >= 0, got {sales_count}")
        if generation_pass is None:
            generation_pass = self.new_pass()

        max_product_id = generation_pass.effective_catalog_size
        product_ids = self._randint((1, max_product_id), size=sales_count)
        quantities = self._randint(self.quantity_range, size=sales_count)
        sales = [Sale(int(p), int(q)) for p, q in zip(product_ids, quantities)]

        path = self.layout.sales_file(salesman.doc_type, salesman.doc_number)
        try:
            self.layout.ensure_dirs()
            self.writer.write_sales(salesman, sales)
        except OSError as e:
            self._record_failure(
                generation_pass,
                f"Error creating sales file for {salesman.full_name} "
                f"({salesman.doc_number}): {e}",
            )
        else:
            generation_pass.files_written.append(path)
        return generation_pass
