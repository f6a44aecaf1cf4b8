"""Generators module for creating the synthetic input files."""

from sales_datagen.generators.info_files import GenerationPass, InfoFileGenerator
from sales_datagen.generators.static_pool import NamePool

__all__ = [
    "GenerationPass",
    "InfoFileGenerator",
    "NamePool",
]
