"""Single-field job entry update endpoint."""

from fastapi import APIRouter

from job_tracker.api.dependencies import UpdateJobEntryDep
from job_tracker.api.middleware.error_handler import OperationFailedError
from job_tracker.api.schemas.common import DataResponse
from job_tracker.api.schemas.job_entry import JobEntryUpdateRequest
from job_tracker.application.use_cases.update_job_entry import UpdateJobEntryRequest
from job_tracker.domain.exceptions.not_found_error import JobNotFoundError
from job_tracker.domain.exceptions.validation_error import ValidationError

router = APIRouter(prefix="/update-entry", tags=["update-entry"])


@router.post("", response_model=DataResponse)
async def update_entry(body: JobEntryUpdateRequest, use_case: UpdateJobEntryDep):
    """Update one field of the row holding the given job number."""
    try:
        result = await use_case.execute(
            UpdateJobEntryRequest(
                job_number=body.job_number, field=body.field, value=body.value
            )
        )
    except (ValidationError, JobNotFoundError):
        raise
    except Exception as e:
        raise OperationFailedError("Failed to update entry", e)

    return DataResponse(
        success=True,
        message="Entry updated successfully!",
        data={"jobNumber": result.job_number, "field": result.field, "value": result.value},
    )
