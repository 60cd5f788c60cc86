"""
Job status value object.
"""

from enum import Enum

from job_tracker.domain.exceptions.validation_error import InvalidFieldValueError


class JobStatus(str, Enum):
    """Job lifecycle status as written to the sheet."""

    PENDING = "Pending"
    WAITING_FOR_APPROVAL = "Waiting for Approval"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DELIVERED = "Delivered"

    @classmethod
    def parse(cls, value: str) -> "JobStatus":
        """Parse a status string, ignoring case and surrounding whitespace."""
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        raise InvalidFieldValueError(
            "jobStatus",
            f"must be one of: {', '.join(s.value for s in cls)}",
        )
