"""On-disk layout of a generated dataset."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sales_datagen.formats.lines import sales_file_name

DATA_FOLDER = "data"
SALES_FOLDER = "sales"
PRODUCTS_FILE = "products.txt"
SALESMEN_FILE = "salesmen.txt"


@dataclass(frozen=True)
class DataLayout:
    """
    Paths of the three file kinds under one root directory.

        <root>/products.txt
        <root>/salesmen.txt
        <root>/sales/<docType>_<docNumber>.txt
    """

    root: Path = Path(DATA_FOLDER)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))

    @property
    def products_file(self) -> Path:
        return self.root / PRODUCTS_FILE

    @property
    def salesmen_file(self) -> Path:
        return self.root / SALESMEN_FILE

    @property
    def sales_dir(self) -> Path:
        return self.root / SALES_FOLDER

    def sales_file(self, doc_type: str, doc_number: int) -> Path:
        return self.sales_dir / sales_file_name(doc_type, doc_number)

    def ensure_dirs(self) -> None:
        """Create the data and sales directories if they do not exist."""
        self.root.mkdir(parents=True, exist_ok=True)
        self.sales_dir.mkdir(parents=True, exist_ok=True)
