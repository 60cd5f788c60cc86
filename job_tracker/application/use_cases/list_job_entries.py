"""List job entries use case."""

from typing import Dict, List, Optional

from job_tracker.application.interfaces.repositories import (
    JobEntryRepositoryInterface,
)
from job_tracker.config.logging import get_logger
from job_tracker.domain.value_objects.job_status import JobStatus

logger = get_logger(__name__)


class ListJobEntriesUseCase:
    """Use case for reading job entries back from the sheet."""

    def __init__(self, job_entry_repo: JobEntryRepositoryInterface):
        self.job_entry_repo = job_entry_repo

    async def raw_rows(self) -> List[List[str]]:
        """Return the sheet table as stored, header row first."""
        rows = await self.job_entry_repo.get_rows()
        logger.info("Sheet data fetched", rows=len(rows))
        return rows

    async def execute(self, status: Optional[str] = None) -> List[Dict[str, str]]:
        """Return entry records numbered from 1, optionally filtered by status."""
        status_filter = None
        if status and status.lower() != "all":
            status_filter = JobStatus.parse(status)

        entries = await self.job_entry_repo.list_entries(status=status_filter)
        logger.info(
            "Job entries listed",
            count=len(entries),
            status=status_filter.value if status_filter else "all",
        )
        return entries
