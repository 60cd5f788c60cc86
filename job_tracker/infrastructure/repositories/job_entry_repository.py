"""
Sheet-backed job entry repository.
"""

from typing import Any, Dict, List, Optional

from job_tracker.application.interfaces.repositories import (
    JobEntryRepositoryInterface,
)
from job_tracker.application.interfaces.sheets import SheetStoreInterface
from job_tracker.application.services.sheet_layout import (
    HEADER_ROWS,
    JOB_NUMBER_COLUMN,
    cell_range,
    column_range,
    row_to_record,
    table_range,
)
from job_tracker.config.logging import get_logger
from job_tracker.domain.entities.job_entry import JobEntry
from job_tracker.domain.value_objects.job_status import JobStatus

logger = get_logger(__name__)


class SheetJobEntryRepository(JobEntryRepositoryInterface):
    """Job entries stored one per row in a spreadsheet tab."""

    def __init__(self, store: SheetStoreInterface, sheet_name: str):
        self.store = store
        self.sheet_name = sheet_name

    async def get_rows(self) -> List[List[str]]:
        return await self.store.get_values(table_range(self.sheet_name))

    async def list_entries(
        self, status: Optional[JobStatus] = None
    ) -> List[Dict[str, str]]:
        rows = (await self.get_rows())[HEADER_ROWS:]
        records = [row_to_record(row, sno=index + 1) for index, row in enumerate(rows)]

        if status is not None:
            records = [
                r for r in records if r["jobStatus"].strip().lower() == status.value.lower()
            ]
        return records

    async def _job_numbers(self) -> List[List[str]]:
        return await self.store.get_values(
            column_range(self.sheet_name, JOB_NUMBER_COLUMN)
        )

    async def job_number_exists(self, job_number: str) -> bool:
        """Linear scan of the job number column, header skipped."""
        values = await self._job_numbers()
        return any(row and row[0] == job_number for row in values[HEADER_ROWS:])

    async def find_row_number(self, job_number: str) -> Optional[int]:
        values = await self._job_numbers()
        for index, row in enumerate(values):
            if index < HEADER_ROWS:
                continue
            if row and row[0] == job_number:
                return index + 1
        return None

    async def append(self, entry: JobEntry) -> Dict[str, Any]:
        result = await self.store.append_values(
            table_range(self.sheet_name), [entry.to_row()]
        )
        logger.info(
            "Job entry appended",
            job_number=entry.job_number.value,
            sheet=self.sheet_name,
        )
        return result

    async def update_field(
        self, row_number: int, field_name: str, value: Any
    ) -> Dict[str, Any]:
        range_ = cell_range(self.sheet_name, field_name, row_number)
        result = await self.store.update_values(range_, [[value]])
        logger.info("Job entry field updated", range=range_, field=field_name)
        return result
