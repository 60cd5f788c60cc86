"""
Application use cases package.
"""

from .list_job_entries import ListJobEntriesUseCase
from .submit_job_entry import (
    SubmitJobEntryRequest,
    SubmitJobEntryResult,
    SubmitJobEntryUseCase,
)
from .update_job_entry import (
    UpdateJobEntryRequest,
    UpdateJobEntryResult,
    UpdateJobEntryUseCase,
)

__all__ = [
    "ListJobEntriesUseCase",
    "SubmitJobEntryRequest",
    "SubmitJobEntryResult",
    "SubmitJobEntryUseCase",
    "UpdateJobEntryRequest",
    "UpdateJobEntryResult",
    "UpdateJobEntryUseCase",
]
