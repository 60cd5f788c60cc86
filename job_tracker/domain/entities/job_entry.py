"""Job entry domain entity."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from job_tracker.domain.services.pricing import (
    calculate_total_price,
    format_price,
    parse_price,
)
from job_tracker.domain.exceptions.validation_error import RequiredFieldError
from job_tracker.domain.value_objects.job_number import JobNumber
from job_tracker.domain.value_objects.job_status import JobStatus

# Wire names in sheet column order (A..P)
SHEET_FIELDS: List[str] = [
    "jobNumber",
    "customerName",
    "jobName",
    "jobLocation",
    "jobSource",
    "salesPerson",
    "jobSize",
    "quantity",
    "jobCategory",
    "jobBookedDate",
    "jobStatus",
    "deliveryDate",
    "jobPrice",
    "totalPrice",
    "deliveryDetails",
    "remark",
]

_REQUIRED_TEXT = {
    "customer_name": "customerName",
    "job_name": "jobName",
    "job_location": "jobLocation",
    "job_source": "jobSource",
    "sales_person": "salesPerson",
    "job_size": "jobSize",
    "quantity": "quantity",
    "job_category": "jobCategory",
    "delivery_details": "deliveryDetails",
}


@dataclass
class JobEntry:
    """One tracked production job, stored as a single sheet row."""

    job_number: JobNumber
    customer_name: str
    job_name: str
    job_location: str
    job_source: str
    sales_person: str
    job_size: str
    quantity: str
    job_category: str
    job_booked_date: date
    job_status: JobStatus
    delivery_date: date
    job_price: Decimal
    delivery_details: str
    remark: str = ""
    total_price: Optional[Decimal] = field(default=None)

    def __post_init__(self):
        """Validate entry data and derive the total price."""
        for attr, wire_name in _REQUIRED_TEXT.items():
            value = getattr(self, attr)
            if value is None or not str(value).strip():
                raise RequiredFieldError(wire_name)
            setattr(self, attr, str(value).strip())

        if not self.job_booked_date:
            raise RequiredFieldError("jobBookedDate")
        if not self.delivery_date:
            raise RequiredFieldError("deliveryDate")

        self.job_status = JobStatus.parse(self.job_status)
        self.job_price = parse_price(self.job_price)
        # Always derived from job_price
        self.total_price = calculate_total_price(self.job_price)
        self.remark = (self.remark or "").strip()

    def to_row(self) -> List[str]:
        """Convert entry to sheet cell values in column order."""
        return [
            self.job_number.value,
            self.customer_name,
            self.job_name,
            self.job_location,
            self.job_source,
            self.sales_person,
            self.job_size,
            self.quantity,
            self.job_category,
            self.job_booked_date.isoformat(),
            self.job_status.value,
            self.delivery_date.isoformat(),
            format_price(self.job_price),
            format_price(self.total_price),
            self.delivery_details,
            self.remark,
        ]

    def to_dict(self) -> dict:
        """Convert entry to its wire representation."""
        return dict(zip(SHEET_FIELDS, self.to_row()))
