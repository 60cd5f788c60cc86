"""
Unit tests for the sheet field-to-column mapping.
"""

import pytest

from job_tracker.application.services.sheet_layout import (
    FIELD_TO_COLUMN,
    LAST_COLUMN,
    cell_range,
    column_for_field,
    column_range,
    header_row,
    quote_sheet_name,
    row_to_record,
    table_range,
)
from job_tracker.domain.exceptions.validation_error import UnknownFieldError


class TestFieldToColumn:
    """Test the static field to column table."""

    def test_full_mapping(self):
        assert FIELD_TO_COLUMN == {
            "jobNumber": "A",
            "customerName": "B",
            "jobName": "C",
            "jobLocation": "D",
            "jobSource": "E",
            "salesPerson": "F",
            "jobSize": "G",
            "quantity": "H",
            "jobCategory": "I",
            "jobBookedDate": "J",
            "jobStatus": "K",
            "deliveryDate": "L",
            "jobPrice": "M",
            "totalPrice": "N",
            "deliveryDetails": "O",
            "remark": "P",
        }
        assert LAST_COLUMN == "P"

    def test_column_for_known_field(self):
        assert column_for_field("jobStatus") == "K"

    @pytest.mark.parametrize("field", ["", "status", "JobStatus", "sno"])
    def test_column_for_unknown_field(self, field):
        with pytest.raises(UnknownFieldError) as exc_info:
            column_for_field(field)
        assert str(exc_info.value) == "Invalid field name"


class TestRanges:
    """Test A1 range construction."""

    def test_cell_range(self):
        assert cell_range("Sheet2", "jobStatus", 7) == "Sheet2!K7"

    def test_cell_range_rejects_row_zero(self):
        with pytest.raises(ValueError):
            cell_range("Sheet2", "jobStatus", 0)

    def test_column_and_table_ranges(self):
        assert column_range("Sheet2", "A") == "Sheet2!A:A"
        assert table_range("Sheet2") == "Sheet2!A:P"

    def test_quotes_sheet_names_with_spaces(self):
        assert quote_sheet_name("Job Log") == "'Job Log'"
        assert quote_sheet_name("Bob's Jobs") == "'Bob''s Jobs'"
        assert table_range("Job Log") == "'Job Log'!A:P"


class TestRowMapping:
    """Test raw row to record mapping."""

    def test_short_rows_are_padded(self):
        record = row_to_record(["ROPR1", "Acme"])
        assert record["jobNumber"] == "ROPR1"
        assert record["customerName"] == "Acme"
        assert record["remark"] == ""
        assert len(record) == 16

    def test_serial_number_first(self):
        record = row_to_record(["ROPR1"], sno=3)
        assert list(record)[0] == "sno"
        assert record["sno"] == "3"

    def test_header_titles(self):
        titles = header_row()
        assert titles[0] == "Job Number"
        assert titles[10] == "Job Status"
        assert len(titles) == 16
