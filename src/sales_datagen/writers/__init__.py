"""Writers module for exporting generated datasets."""

from sales_datagen.writers.base import BaseWriter
from sales_datagen.writers.delimited_writer import DelimitedWriter

__all__ = ["BaseWriter", "DelimitedWriter"]
