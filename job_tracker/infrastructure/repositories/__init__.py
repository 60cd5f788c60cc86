"""
Repository implementations.
"""

from .job_entry_repository import SheetJobEntryRepository

__all__ = [
    "SheetJobEntryRepository",
]
