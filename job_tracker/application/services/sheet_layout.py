"""
Sheet layout: field-to-column mapping and A1 range helpers.
"""

import re
from typing import Dict, List, Optional, Sequence

from job_tracker.domain.entities.job_entry import SHEET_FIELDS
from job_tracker.domain.exceptions.validation_error import UnknownFieldError

FIELD_TO_COLUMN: Dict[str, str] = {
    name: chr(ord("A") + index) for index, name in enumerate(SHEET_FIELDS)
}

JOB_NUMBER_COLUMN = FIELD_TO_COLUMN["jobNumber"]
FIRST_COLUMN = "A"
LAST_COLUMN = FIELD_TO_COLUMN[SHEET_FIELDS[-1]]

# Row 1 holds column titles
HEADER_ROWS = 1

_PLAIN_SHEET_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def column_for_field(field_name: str) -> str:
    """Return the column letter for a wire field name."""
    column = FIELD_TO_COLUMN.get(field_name)
    if not column:
        raise UnknownFieldError(field_name)
    return column


def quote_sheet_name(sheet_name: str) -> str:
    """Quote a sheet name for A1 notation when it is not a bare identifier."""
    if _PLAIN_SHEET_NAME.match(sheet_name):
        return sheet_name
    return "'" + sheet_name.replace("'", "''") + "'"


def column_range(sheet_name: str, column: str) -> str:
    return f"{quote_sheet_name(sheet_name)}!{column}:{column}"


def table_range(sheet_name: str) -> str:
    return f"{quote_sheet_name(sheet_name)}!{FIRST_COLUMN}:{LAST_COLUMN}"


def cell_range(sheet_name: str, field_name: str, row_number: int) -> str:
    """Build the A1 range of a single cell, e.g. ``Sheet2!K7``."""
    if row_number < 1:
        raise ValueError(f"Row numbers start at 1, got {row_number}")
    return f"{quote_sheet_name(sheet_name)}!{column_for_field(field_name)}{row_number}"


def cell_text(row: Sequence, index: int) -> str:
    """Read a cell as text; the API omits trailing empty cells."""
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def row_to_record(row: Sequence, sno: Optional[int] = None) -> Dict[str, str]:
    """Map a raw sheet row to a wire-named record."""
    record = {name: cell_text(row, index) for index, name in enumerate(SHEET_FIELDS)}
    if sno is not None:
        record = {"sno": str(sno), **record}
    return record


def header_row() -> List[str]:
    """Column titles written to row 1 of a fresh sheet."""
    return [
        re.sub(r"(?<!^)(?=[A-Z])", " ", name).title() for name in SHEET_FIELDS
    ]
