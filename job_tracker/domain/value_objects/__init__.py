"""
Domain value objects package.
"""

from .job_number import JobNumber
from .job_status import JobStatus

__all__ = [
    "JobNumber",
    "JobStatus",
]
