"""Base classes for data writers."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any


class BaseWriter(ABC):
    """Abstract base class for all dataset writers."""

    @abstractmethod
    def write(self, records: Iterable[Any], destination: Path) -> int:
        """Write records to the specified destination, returning the row count."""
        pass
