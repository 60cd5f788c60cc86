"""Job entry submission endpoints."""

from fastapi import APIRouter

from job_tracker.api.dependencies import SubmitJobEntryDep
from job_tracker.api.middleware.error_handler import OperationFailedError
from job_tracker.api.schemas.common import StatusResponse
from job_tracker.api.schemas.job_entry import (
    JobEntryCreateRequest,
    JobEntrySubmitResponse,
)
from job_tracker.application.use_cases.submit_job_entry import SubmitJobEntryRequest
from job_tracker.domain.exceptions.validation_error import ValidationError

router = APIRouter(prefix="/submit", tags=["submit"])


@router.get("", response_model=StatusResponse)
async def submit_status():
    """Report that the submission endpoint is up."""
    return StatusResponse(status="ok", message="Form submission API is working")


@router.post("", response_model=JobEntrySubmitResponse)
async def submit_job_entry(body: JobEntryCreateRequest, use_case: SubmitJobEntryDep):
    """Append a job entry after checking its job number is unused."""
    request = SubmitJobEntryRequest(
        job_number=body.job_number,
        job_prefix=body.job_prefix,
        customer_name=body.customer_name,
        job_name=body.job_name,
        job_location=body.job_location,
        job_source=body.job_source,
        sales_person=body.sales_person,
        job_size=body.job_size,
        quantity=body.quantity,
        job_category=body.job_category,
        job_booked_date=body.job_booked_date,
        job_status=body.job_status,
        delivery_date=body.delivery_date,
        job_price=body.job_price,
        delivery_details=body.delivery_details,
        remark=body.remark,
    )

    try:
        result = await use_case.execute(request)
    except ValidationError:
        raise
    except Exception as e:
        raise OperationFailedError("Failed to submit job entry", e)

    return JobEntrySubmitResponse(
        success=True,
        message="Job entry submitted successfully!",
        data={
            "entry": result.entry.to_dict(),
            "updates": result.store_response.get("updates"),
        },
    )
