"""
Spreadsheet store interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class SheetStoreInterface(ABC):
    """Range-based access to a tabular spreadsheet."""

    @abstractmethod
    async def get_values(self, range_: str) -> List[List[str]]:
        """Read the values of an A1 range, row by row."""
        pass

    @abstractmethod
    async def append_values(
        self, range_: str, rows: List[List[Any]]
    ) -> Dict[str, Any]:
        """Append rows after the last non-empty row of the range."""
        pass

    @abstractmethod
    async def update_values(
        self, range_: str, rows: List[List[Any]]
    ) -> Dict[str, Any]:
        """Overwrite the cells of the range."""
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
