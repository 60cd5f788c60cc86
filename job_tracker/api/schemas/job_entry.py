"""
Job entry API schemas.
"""

from datetime import date
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import BaseResponse


class JobEntryCreateRequest(BaseModel):
    """Job entry submission, keyed by the form's field names."""

    model_config = ConfigDict(populate_by_name=True)

    job_number: str = Field(..., alias="jobNumber", min_length=1)
    job_prefix: Optional[str] = Field(
        None, alias="jobPrefix", description="Job number prefix, e.g. ROPR or DIGFI"
    )
    customer_name: str = Field(..., alias="customerName", min_length=1)
    job_name: str = Field(..., alias="jobName", min_length=1)
    job_location: str = Field(..., alias="jobLocation", min_length=1)
    job_source: str = Field(..., alias="jobSource", min_length=1)
    sales_person: str = Field(..., alias="salesPerson", min_length=1)
    job_size: str = Field(..., alias="jobSize", min_length=1)
    quantity: str = Field(..., min_length=1)
    job_category: str = Field(..., alias="jobCategory", min_length=1)
    job_booked_date: date = Field(..., alias="jobBookedDate")
    job_status: str = Field(..., alias="jobStatus", min_length=1)
    delivery_date: date = Field(..., alias="deliveryDate")
    job_price: str = Field(..., alias="jobPrice", min_length=1)
    total_price: Optional[str] = Field(
        None, alias="totalPrice", description="Ignored; recomputed from jobPrice"
    )
    delivery_details: str = Field(..., alias="deliveryDetails", min_length=1)
    remark: Optional[str] = None

    @field_validator(
        "job_number", "quantity", "job_size", "job_price", "total_price", mode="before"
    )
    @classmethod
    def coerce_numbers(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class JobEntryUpdateRequest(BaseModel):
    """Single-field update request."""

    job_number: Optional[str] = Field(None, alias="jobNumber")
    field: Optional[str] = None
    value: Optional[Union[str, int, float]] = None

    model_config = ConfigDict(populate_by_name=True)


class JobEntrySubmitResponse(BaseResponse):
    """Submission response."""

    data: Dict[str, Any]


class JobEntryListResponse(BaseResponse):
    """Parsed job entries."""

    data: List[Dict[str, str]]
    count: int
