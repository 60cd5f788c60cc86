"""Parsed job entry listing endpoint."""

from typing import Optional

from fastapi import APIRouter, Query

from job_tracker.api.dependencies import ListJobEntriesDep
from job_tracker.api.middleware.error_handler import OperationFailedError
from job_tracker.api.schemas.job_entry import JobEntryListResponse
from job_tracker.domain.exceptions.validation_error import ValidationError

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobEntryListResponse)
async def list_jobs(
    use_case: ListJobEntriesDep,
    status: Optional[str] = Query(None, description="Job status, or 'all'"),
):
    """List job entries with serial numbers, optionally filtered by status."""
    try:
        entries = await use_case.execute(status=status)
    except ValidationError:
        raise
    except Exception as e:
        raise OperationFailedError("Failed to list job entries", e)

    return JobEntryListResponse(success=True, data=entries, count=len(entries))
