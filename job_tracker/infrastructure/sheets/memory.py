"""
In-memory spreadsheet store for development and tests.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from job_tracker.application.interfaces.sheets import SheetStoreInterface
from job_tracker.config.logging import get_logger
from job_tracker.domain.exceptions.sheets_error import SheetsAPIError

logger = get_logger(__name__)

_A1_PATTERN = re.compile(
    r"^(?:(?P<sheet>'(?:[^']|'')+'|[^!]+)!)?"
    r"(?P<start_col>[A-Z]+)(?P<start_row>\d+)?"
    r"(?::(?P<end_col>[A-Z]+)(?P<end_row>\d+)?)?$"
)


def column_index(letters: str) -> int:
    """Convert column letters to a 0-based index (A -> 0, AA -> 26)."""
    index = 0
    for char in letters:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1


def column_letters(index: int) -> str:
    letters = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


@dataclass
class A1Range:
    """Parsed A1 range; rows are 0-based, ``None`` means unbounded."""

    sheet: str
    start_col: int
    end_col: int
    start_row: Optional[int]
    end_row: Optional[int]

    @classmethod
    def parse(cls, range_: str, default_sheet: str) -> "A1Range":
        match = _A1_PATTERN.match(range_.strip())
        if not match:
            raise SheetsAPIError(400, f"Unable to parse range: {range_}")

        sheet = match.group("sheet") or default_sheet
        if sheet.startswith("'"):
            sheet = sheet[1:-1].replace("''", "'")

        start_col = column_index(match.group("start_col"))
        end_col = column_index(match.group("end_col") or match.group("start_col"))
        start_row = match.group("start_row")
        end_row = match.group("end_row")
        if match.group("end_col") is None:
            end_row = start_row

        return cls(
            sheet=sheet,
            start_col=start_col,
            end_col=end_col,
            start_row=int(start_row) - 1 if start_row else None,
            end_row=int(end_row) - 1 if end_row else None,
        )


class InMemorySheetStore(SheetStoreInterface):
    """Dictionary backed stand-in for a Google spreadsheet."""

    def __init__(
        self,
        sheets: Optional[Dict[str, List[List[Any]]]] = None,
        default_sheet: str = "Sheet1",
    ):
        self.sheets: Dict[str, List[List[str]]] = {
            name: [[self._cell(v) for v in row] for row in rows]
            for name, rows in (sheets or {}).items()
        }
        self.default_sheet = default_sheet
        logger.info("InMemorySheetStore initialized", sheets=list(self.sheets))

    @staticmethod
    def _cell(value: Any) -> str:
        return "" if value is None else str(value)

    def _sheet(self, name: str) -> List[List[str]]:
        if name not in self.sheets:
            raise SheetsAPIError(400, f"Unable to parse range: {name}")
        return self.sheets[name]

    async def get_values(self, range_: str) -> List[List[str]]:
        a1 = A1Range.parse(range_, self.default_sheet)
        rows = self._sheet(a1.sheet)

        start = a1.start_row or 0
        end = len(rows) if a1.end_row is None else min(a1.end_row + 1, len(rows))

        values = []
        for row in rows[start:end]:
            cells = row[a1.start_col : a1.end_col + 1]
            while cells and cells[-1] == "":
                cells = cells[:-1]
            values.append(list(cells))

        while values and not values[-1]:
            values.pop()
        return values

    async def append_values(
        self, range_: str, rows: List[List[Any]]
    ) -> Dict[str, Any]:
        a1 = A1Range.parse(range_, self.default_sheet)
        sheet = self._sheet(a1.sheet)

        last_used = len(sheet)
        while last_used and not any(sheet[last_used - 1]):
            last_used -= 1
        del sheet[last_used:]

        first_row = len(sheet)
        for row in rows:
            sheet.append([""] * a1.start_col + [self._cell(v) for v in row])

        updated_range = (
            f"{a1.sheet}!{column_letters(a1.start_col)}{first_row + 1}:"
            f"{column_letters(a1.start_col + max(len(r) for r in rows) - 1)}"
            f"{first_row + len(rows)}"
            if rows
            else None
        )
        logger.debug("Rows appended", sheet=a1.sheet, rows=len(rows))
        return {
            "updates": {
                "updatedRange": updated_range,
                "updatedRows": len(rows),
                "updatedCells": sum(len(r) for r in rows),
            }
        }

    async def update_values(
        self, range_: str, rows: List[List[Any]]
    ) -> Dict[str, Any]:
        a1 = A1Range.parse(range_, self.default_sheet)
        sheet = self._sheet(a1.sheet)
        start_row = a1.start_row or 0

        for offset, row in enumerate(rows):
            index = start_row + offset
            while len(sheet) <= index:
                sheet.append([])
            target = sheet[index]
            needed = a1.start_col + len(row)
            if len(target) < needed:
                target.extend([""] * (needed - len(target)))
            for col_offset, value in enumerate(row):
                target[a1.start_col + col_offset] = self._cell(value)

        logger.debug("Range updated", range=range_, rows=len(rows))
        return {
            "updatedRange": range_,
            "updatedRows": len(rows),
            "updatedCells": sum(len(r) for r in rows),
        }
