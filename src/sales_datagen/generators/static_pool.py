"""
NamePool - Pre-generated Faker names for O(1) vectorized sampling.

First and last names are produced once per pool with a seeded Faker instance
and then sampled with NumPy, so a pass never calls Faker per row.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import numpy as np
from faker import Faker

from sales_datagen.config.loader import DEFAULT_GENERATION_CONFIG
from sales_datagen.formats.lines import SEPARATOR

if TYPE_CHECKING:
    from numpy.random import Generator

DEFAULT_LOCALE: str = DEFAULT_GENERATION_CONFIG["name_pool"]["locale"]
DEFAULT_POOL_SIZES: dict[str, int] = DEFAULT_GENERATION_CONFIG["name_pool"]["pool_sizes"]

# Product names are a curated list; Faker has no catalog provider
PRODUCT_NAMES = (
    "Cocacola",
    "Speedmax",
    "Gatorade",
    "Pepsi",
    "Colombiana",
    "Ponymalta",
    "Redbull",
    "Electrolit",
    "Colapola",
    "Quatro",
    "Manzana Postobon",
    "Hit",
    "Vive100",
    "Cristal",
    "Brisa",
)


def _clean(value: str) -> str:
    """Drop characters that would break the line grammar."""
    return " ".join(value.replace(SEPARATOR, " ").split())


class NamePool:
    """
    Pre-generated pools of first names, last names and product names.

    Attributes:
        seed: Random seed for reproducibility (None draws fresh entropy)
        first_names: Pool of first names
        last_names: Pool of last names
        product_names: Pool of product names
    """

    def __init__(
        self,
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.seed = seed
        self._rng: Generator = np.random.default_rng(seed)

        sizes = {**DEFAULT_POOL_SIZES, **(pool_sizes or {})}

        # seed_instance keeps this pool independent of other Faker users
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)

        self.first_names: list[str] = self._generate_pool(
            self._faker.first_name, sizes["first_names"]
        )
        self.last_names: list[str] = self._generate_pool(
            self._faker.last_name, sizes["last_names"]
        )
        self.product_names: list[str] = list(PRODUCT_NAMES)

    @classmethod
    def from_config(cls, config: dict[str, Any], seed: int | None = None) -> NamePool:
        """Build a pool from the "name_pool" section of the generation config."""
        pool_conf = config.get("name_pool", {})
        return cls(
            seed=seed,
            pool_sizes=pool_conf.get("pool_sizes"),
            locale=pool_conf.get("locale", DEFAULT_LOCALE),
        )

    def _generate_pool(self, generator_func: Callable[[], str], size: int) -> list[str]:
        """
        Generate a pool of unique, grammar-safe values.

        Falls back to duplicates when uniqueness cannot be reached within
        3x the requested size.
        """
        if size <= 0:
            raise ValueError(f"Pool size must be > 0, got {size}")

        pool: list[str] = []
        seen: set[str] = set()
        max_attempts = size * 3
        attempts = 0

        while len(pool) < size and attempts < max_attempts:
            value = _clean(str(generator_func()))
            if value and value not in seen:
                seen.add(value)
                pool.append(value)
            attempts += 1

        while len(pool) < size:
            value = _clean(str(generator_func()))
            if value:
                pool.append(value)

        return pool

    def _sample_from_pool(self, pool: list[str], n: int) -> list[str]:
        """Sample n items (with replacement) using vectorized NumPy indexing."""
        if n == 0:
            return []
        indices = self._rng.choice(len(pool), size=n, replace=True)
        return [pool[i] for i in indices]

    def sample_first_names(self, n: int) -> list[str]:
        return self._sample_from_pool(self.first_names, n)

    def sample_last_names(self, n: int) -> list[str]:
        return self._sample_from_pool(self.last_names, n)

    def sample_product_names(self, n: int) -> list[str]:
        return self._sample_from_pool(self.product_names, n)

