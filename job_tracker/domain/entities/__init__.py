"""
Domain entities package.
"""

from .job_entry import SHEET_FIELDS, JobEntry

__all__ = [
    "JobEntry",
    "SHEET_FIELDS",
]
