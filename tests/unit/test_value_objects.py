"""
Unit tests for value objects.
"""

import dataclasses

import pytest

from job_tracker.domain.exceptions.validation_error import (
    InvalidFieldValueError,
    RequiredFieldError,
)
from job_tracker.domain.value_objects.job_number import JobNumber
from job_tracker.domain.value_objects.job_status import JobStatus


class TestJobStatus:
    """Test JobStatus value object."""

    def test_enum_values(self):
        """Test that all expected enum values exist."""
        expected_values = [
            "Pending",
            "Waiting for Approval",
            "In Progress",
            "Completed",
            "Delivered",
        ]
        assert [status.value for status in JobStatus] == expected_values

    def test_parse_exact(self):
        assert JobStatus.parse("In Progress") is JobStatus.IN_PROGRESS

    def test_parse_ignores_case_and_whitespace(self):
        assert JobStatus.parse("  waiting for approval ") is JobStatus.WAITING_FOR_APPROVAL

    def test_parse_passes_members_through(self):
        assert JobStatus.parse(JobStatus.DELIVERED) is JobStatus.DELIVERED

    def test_parse_unknown_status(self):
        with pytest.raises(InvalidFieldValueError) as exc_info:
            JobStatus.parse("Cancelled")
        assert exc_info.value.field_name == "jobStatus"


class TestJobNumber:
    """Test JobNumber value object."""

    def test_compose_with_prefix(self):
        job_number = JobNumber.compose("1001", "ROPR")
        assert job_number.value == "ROPR1001"
        assert str(job_number) == "ROPR1001"

    def test_compose_normalizes_prefix_case(self):
        assert JobNumber.compose("77", "digfi").value == "DIGFI77"

    def test_compose_keeps_existing_prefix(self):
        job_number = JobNumber.compose("DIGFI2001", "ROPR")
        assert job_number.prefix == "DIGFI"
        assert job_number.value == "DIGFI2001"

    def test_compose_strips_whitespace(self):
        assert JobNumber.compose("  42 ", "ROPR").value == "ROPR42"

    def test_compose_rejects_unknown_prefix(self):
        with pytest.raises(InvalidFieldValueError):
            JobNumber.compose("1001", "XYZ")

    def test_compose_custom_prefixes(self):
        job_number = JobNumber.compose("5", "ABC", allowed_prefixes=["ABC"])
        assert job_number.value == "ABC5"

    def test_compose_requires_number(self):
        with pytest.raises(RequiredFieldError):
            JobNumber.compose("   ", "ROPR")

    @pytest.mark.parametrize("raw", ["ROPR", "digfi", " DIGFI "])
    def test_compose_rejects_bare_prefix(self, raw):
        with pytest.raises(InvalidFieldValueError) as exc_info:
            JobNumber.compose(raw, "ROPR")
        assert exc_info.value.field_name == "jobNumber"

    def test_immutability(self):
        job_number = JobNumber(prefix="ROPR", number="1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            job_number.number = "2"
