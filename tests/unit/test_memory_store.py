"""
Unit tests for the in-memory sheet store.
"""

import pytest

from job_tracker.domain.exceptions.sheets_error import SheetsAPIError
from job_tracker.infrastructure.sheets.memory import (
    A1Range,
    InMemorySheetStore,
    column_index,
    column_letters,
)


@pytest.fixture
def store():
    return InMemorySheetStore(
        sheets={"Sheet2": [["Job Number", "Customer"], ["ROPR1", "Acme", ""]]},
        default_sheet="Sheet2",
    )


class TestA1Range:
    """Test A1 range parsing."""

    def test_column_conversion(self):
        assert column_index("A") == 0
        assert column_index("P") == 15
        assert column_index("AA") == 26
        assert column_letters(0) == "A"
        assert column_letters(26) == "AA"

    def test_parse_column(self):
        a1 = A1Range.parse("Sheet2!A:A", "Sheet1")
        assert (a1.sheet, a1.start_col, a1.end_col) == ("Sheet2", 0, 0)
        assert a1.start_row is None and a1.end_row is None

    def test_parse_cell(self):
        a1 = A1Range.parse("Sheet2!K7", "Sheet1")
        assert (a1.start_col, a1.end_col, a1.start_row, a1.end_row) == (10, 10, 6, 6)

    def test_parse_quoted_sheet(self):
        assert A1Range.parse("'Bob''s Jobs'!A:P", "Sheet1").sheet == "Bob's Jobs"

    def test_parse_default_sheet(self):
        assert A1Range.parse("B2:C3", "Sheet1").sheet == "Sheet1"

    def test_parse_invalid(self):
        with pytest.raises(SheetsAPIError):
            A1Range.parse("Sheet2!??", "Sheet1")


class TestInMemorySheetStore:
    """Test range reads and writes."""

    @pytest.mark.asyncio
    async def test_get_values_trims_trailing_cells(self, store):
        assert await store.get_values("Sheet2!A:P") == [
            ["Job Number", "Customer"],
            ["ROPR1", "Acme"],
        ]

    @pytest.mark.asyncio
    async def test_get_single_column(self, store):
        assert await store.get_values("Sheet2!A:A") == [["Job Number"], ["ROPR1"]]

    @pytest.mark.asyncio
    async def test_unknown_sheet(self, store):
        with pytest.raises(SheetsAPIError):
            await store.get_values("Missing!A:A")

    @pytest.mark.asyncio
    async def test_append_after_last_row(self, store):
        result = await store.append_values("Sheet2!A:P", [["ROPR2", "Beta", 3]])

        assert result["updates"]["updatedRange"] == "Sheet2!A3:C3"
        assert result["updates"]["updatedRows"] == 1
        assert await store.get_values("Sheet2!A:A") == [
            ["Job Number"],
            ["ROPR1"],
            ["ROPR2"],
        ]
        assert store.sheets["Sheet2"][2] == ["ROPR2", "Beta", "3"]

    @pytest.mark.asyncio
    async def test_update_single_cell(self, store):
        await store.update_values("Sheet2!D2", [["Completed"]])

        assert store.sheets["Sheet2"][1] == ["ROPR1", "Acme", "", "Completed"]
        assert store.sheets["Sheet2"][0] == ["Job Number", "Customer"]
