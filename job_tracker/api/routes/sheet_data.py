"""Raw sheet data endpoint."""

from fastapi import APIRouter

from job_tracker.api.dependencies import ListJobEntriesDep
from job_tracker.api.middleware.error_handler import OperationFailedError
from job_tracker.api.schemas.common import DataResponse

router = APIRouter(prefix="/sheet-data", tags=["sheet-data"])


@router.get("", response_model=DataResponse, response_model_exclude_none=True)
async def get_sheet_data(use_case: ListJobEntriesDep):
    """Return every row of the job sheet, header row first."""
    try:
        rows = await use_case.raw_rows()
    except Exception as e:
        raise OperationFailedError("Failed to fetch sheet data", e)

    return DataResponse(success=True, data=rows)
