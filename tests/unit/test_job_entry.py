"""
Unit tests for the JobEntry entity.
"""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from job_tracker.domain.entities.job_entry import SHEET_FIELDS, JobEntry
from job_tracker.domain.exceptions.validation_error import (
    InvalidFieldValueError,
    RequiredFieldError,
)
from job_tracker.domain.value_objects.job_status import JobStatus


class TestJobEntry:
    """Test JobEntry validation and row conversion."""

    def test_total_price_is_derived(self, sample_entry):
        assert sample_entry.total_price == Decimal("210.00")

    def test_client_total_is_replaced(self, sample_entry):
        entry = dataclasses.replace(sample_entry, total_price=Decimal("1.00"))
        assert entry.total_price == Decimal("210.00")

    def test_status_string_is_parsed(self, sample_entry):
        entry = dataclasses.replace(sample_entry, job_status="completed")
        assert entry.job_status is JobStatus.COMPLETED

    def test_to_row_column_order(self, sample_entry):
        row = sample_entry.to_row()
        assert len(row) == len(SHEET_FIELDS) == 16
        assert row[0] == "ROPR1003"
        assert row[9] == "2024-06-03"
        assert row[10] == "Pending"
        assert row[11] == "2024-06-12"
        assert row[12] == "200.00"
        assert row[13] == "210.00"
        assert row[14] == "Install on site"
        assert row[15] == ""

    def test_to_dict_uses_wire_names(self, sample_entry):
        data = sample_entry.to_dict()
        assert data["jobNumber"] == "ROPR1003"
        assert data["totalPrice"] == "210.00"

    def test_text_fields_are_stripped(self, sample_entry):
        entry = dataclasses.replace(sample_entry, customer_name="  Blue Bakery  ")
        assert entry.customer_name == "Blue Bakery"

    @pytest.mark.parametrize(
        "attr, wire_name",
        [
            ("customer_name", "customerName"),
            ("job_location", "jobLocation"),
            ("quantity", "quantity"),
            ("delivery_details", "deliveryDetails"),
        ],
    )
    def test_required_text_fields(self, sample_entry, attr, wire_name):
        with pytest.raises(RequiredFieldError) as exc_info:
            dataclasses.replace(sample_entry, **{attr: "   "})
        assert exc_info.value.field_name == wire_name

    def test_required_dates(self, sample_entry):
        with pytest.raises(RequiredFieldError):
            dataclasses.replace(sample_entry, delivery_date=None)

    def test_invalid_status(self, sample_entry):
        with pytest.raises(InvalidFieldValueError):
            dataclasses.replace(sample_entry, job_status="Lost")

    def test_invalid_price(self, sample_entry):
        with pytest.raises(InvalidFieldValueError):
            dataclasses.replace(sample_entry, job_price="free")

    def test_remark_is_optional(self, sample_entry):
        entry = dataclasses.replace(sample_entry, remark=None)
        assert entry.remark == ""
        assert entry.to_row()[15] == ""

    def test_booked_date_is_iso(self, sample_entry):
        entry = dataclasses.replace(sample_entry, job_booked_date=date(2025, 1, 9))
        assert entry.to_row()[9] == "2025-01-09"
