"""Loaders module for reading generated datasets back into entities."""

from sales_datagen.loaders.data_loader import load_products, load_sales, load_salesmen
from sales_datagen.loaders.dataset import Dataset, load_dataset

__all__ = [
    "Dataset",
    "load_dataset",
    "load_products",
    "load_sales",
    "load_salesmen",
]
