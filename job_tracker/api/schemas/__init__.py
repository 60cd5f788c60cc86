"""
API schemas package.
"""

from .common import BaseResponse, DataResponse, ErrorResponse, StatusResponse
from .job_entry import (
    JobEntryCreateRequest,
    JobEntryListResponse,
    JobEntrySubmitResponse,
    JobEntryUpdateRequest,
)

__all__ = [
    "BaseResponse",
    "DataResponse",
    "ErrorResponse",
    "JobEntryCreateRequest",
    "JobEntryListResponse",
    "JobEntrySubmitResponse",
    "JobEntryUpdateRequest",
    "StatusResponse",
]
