"""Update job entry use case."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from job_tracker.application.interfaces.repositories import (
    JobEntryRepositoryInterface,
)
from job_tracker.application.services.sheet_layout import column_for_field
from job_tracker.config.logging import get_logger
from job_tracker.domain.exceptions.not_found_error import JobNotFoundError
from job_tracker.domain.exceptions.validation_error import (
    DuplicateJobNumberError,
    InvalidFieldValueError,
    MissingUpdateFieldsError,
    RequiredFieldError,
)
from job_tracker.domain.services.pricing import format_price
from job_tracker.domain.value_objects.job_status import JobStatus

logger = get_logger(__name__)

PRICE_FIELDS = {"jobPrice", "totalPrice"}
DATE_FIELDS = {"jobBookedDate", "deliveryDate"}
OPTIONAL_FIELDS = {"remark"}


@dataclass
class UpdateJobEntryRequest:
    """Request for a single-field update."""

    job_number: Optional[str]
    field: Optional[str]
    value: Any


@dataclass
class UpdateJobEntryResult:
    """Result of a single-field update."""

    job_number: str
    field: str
    value: str
    row_number: int


def normalize_field_value(field: str, value: Any) -> str:
    """Validate a value for a field and return the text written to the cell."""
    if value is None:
        raise MissingUpdateFieldsError()

    text = value.isoformat() if isinstance(value, date) else str(value).strip()

    if field == "jobStatus":
        return JobStatus.parse(text).value
    if field in PRICE_FIELDS:
        return format_price(text, field_name=field)
    if field in DATE_FIELDS:
        try:
            return date.fromisoformat(text).isoformat()
        except ValueError:
            raise InvalidFieldValueError(field, "must be a date in YYYY-MM-DD format")
    if not text and field not in OPTIONAL_FIELDS:
        raise RequiredFieldError(field)
    return text


class UpdateJobEntryUseCase:
    """Use case for updating one field of an existing job entry."""

    def __init__(self, job_entry_repo: JobEntryRepositoryInterface):
        self.job_entry_repo = job_entry_repo

    async def execute(self, request: UpdateJobEntryRequest) -> UpdateJobEntryResult:
        if not request.job_number or not request.field or request.value is None:
            raise MissingUpdateFieldsError()

        column_for_field(request.field)
        value = normalize_field_value(request.field, request.value)

        row_number = await self.job_entry_repo.find_row_number(request.job_number)
        if row_number is None:
            logger.warning("Job number not found", job_number=request.job_number)
            raise JobNotFoundError(request.job_number)

        if (
            request.field == "jobNumber"
            and value != request.job_number
            and await self.job_entry_repo.job_number_exists(value)
        ):
            raise DuplicateJobNumberError(value)

        await self.job_entry_repo.update_field(row_number, request.field, value)

        logger.info(
            "Job entry updated",
            job_number=request.job_number,
            field=request.field,
            row_number=row_number,
        )

        return UpdateJobEntryResult(
            job_number=request.job_number,
            field=request.field,
            value=value,
            row_number=row_number,
        )
