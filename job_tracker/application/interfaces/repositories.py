"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from job_tracker.domain.entities.job_entry import JobEntry
from job_tracker.domain.value_objects.job_status import JobStatus


class JobEntryRepositoryInterface(ABC):
    """Job entry repository interface."""

    @abstractmethod
    async def get_rows(self) -> List[List[str]]:
        """Get the raw table, header row included."""
        pass

    @abstractmethod
    async def list_entries(
        self, status: Optional[JobStatus] = None
    ) -> List[Dict[str, str]]:
        """List entry records, optionally filtered by status."""
        pass

    @abstractmethod
    async def job_number_exists(self, job_number: str) -> bool:
        """Check if a job number is already recorded."""
        pass

    @abstractmethod
    async def find_row_number(self, job_number: str) -> Optional[int]:
        """Find the 1-based sheet row holding a job number."""
        pass

    @abstractmethod
    async def append(self, entry: JobEntry) -> Dict[str, Any]:
        """Append a new entry row."""
        pass

    @abstractmethod
    async def update_field(
        self, row_number: int, field_name: str, value: Any
    ) -> Dict[str, Any]:
        """Update one field of an existing row."""
        pass
