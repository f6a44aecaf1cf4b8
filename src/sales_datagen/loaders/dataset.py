from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from sales_datagen.config.layout import DataLayout
from sales_datagen.loaders.data_loader import load_products, load_sales, load_salesmen
from sales_datagen.models.core import Product, Sale, Salesman


class Dataset:
    """
    The container for one loaded products / salesmen / sales triple.
    """

    def __init__(
        self,
        products: Optional[Dict[int, Product]] = None,
        salesmen: Optional[Dict[str, Salesman]] = None,
        sales: Optional[Dict[Salesman, List[Sale]]] = None,
    ):
        self.products: Dict[int, Product] = products or {}
        self.salesmen: Dict[str, Salesman] = salesmen or {}
        self.sales: Dict[Salesman, List[Sale]] = sales or {}

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    def get_salesman(self, key: str) -> Optional[Salesman]:
        return self.salesmen.get(key)

    def get_sales(self, salesman: Salesman) -> List[Sale]:
        return self.sales.get(salesman, [])

    @property
    def total_sales(self) -> int:
        return sum(len(sales) for sales in self.sales.values())


def load_dataset(root: Union[str, Path, DataLayout] = "data") -> Dataset:
    """Load products, salesmen and sales from a dataset directory."""
    layout = root if isinstance(root, DataLayout) else DataLayout(Path(root))
    products = load_products(layout.products_file)
    salesmen = load_salesmen(layout.salesmen_file)
    sales = load_sales(layout.sales_dir, salesmen, products)
    return Dataset(products, salesmen, sales)
