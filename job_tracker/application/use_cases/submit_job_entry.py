"""Submit job entry use case."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence, Union

from job_tracker.application.interfaces.repositories import (
    JobEntryRepositoryInterface,
)
from job_tracker.config.logging import get_logger
from job_tracker.domain.entities.job_entry import JobEntry
from job_tracker.domain.exceptions.validation_error import DuplicateJobNumberError
from job_tracker.domain.value_objects.job_number import DEFAULT_PREFIXES, JobNumber

logger = get_logger(__name__)


@dataclass
class SubmitJobEntryRequest:
    """Request for submitting a job entry."""

    job_number: str
    customer_name: str
    job_name: str
    job_location: str
    job_source: str
    sales_person: str
    job_size: str
    quantity: str
    job_category: str
    job_booked_date: date
    job_status: str
    delivery_date: date
    job_price: Union[str, Decimal]
    delivery_details: str
    remark: Optional[str] = None
    job_prefix: Optional[str] = None


@dataclass
class SubmitJobEntryResult:
    """Result of a job entry submission."""

    entry: JobEntry
    store_response: Dict[str, Any]


class SubmitJobEntryUseCase:
    """Use case for appending a new job entry with a unique job number."""

    def __init__(
        self,
        job_entry_repo: JobEntryRepositoryInterface,
        default_prefix: str = DEFAULT_PREFIXES[0],
        allowed_prefixes: Sequence[str] = DEFAULT_PREFIXES,
    ):
        self.job_entry_repo = job_entry_repo
        self.default_prefix = default_prefix
        self.allowed_prefixes = allowed_prefixes

    async def execute(self, request: SubmitJobEntryRequest) -> SubmitJobEntryResult:
        job_number = JobNumber.compose(
            request.job_number,
            request.job_prefix or self.default_prefix,
            self.allowed_prefixes,
        )

        entry = JobEntry(
            job_number=job_number,
            customer_name=request.customer_name,
            job_name=request.job_name,
            job_location=request.job_location,
            job_source=request.job_source,
            sales_person=request.sales_person,
            job_size=request.job_size,
            quantity=request.quantity,
            job_category=request.job_category,
            job_booked_date=request.job_booked_date,
            job_status=request.job_status,
            delivery_date=request.delivery_date,
            job_price=request.job_price,
            delivery_details=request.delivery_details,
            remark=request.remark or "",
        )

        # Check-then-append; concurrent submissions are not serialised
        if await self.job_entry_repo.job_number_exists(job_number.value):
            logger.warning("Duplicate job number rejected", job_number=job_number.value)
            raise DuplicateJobNumberError(job_number.value)

        store_response = await self.job_entry_repo.append(entry)

        logger.info(
            "Job entry submitted",
            job_number=job_number.value,
            status=entry.job_status.value,
            total_price=str(entry.total_price),
        )

        return SubmitJobEntryResult(entry=entry, store_response=store_response)
