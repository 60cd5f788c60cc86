"""
Lookup-related domain exceptions.
"""


class JobNotFoundError(Exception):
    """Raised when no sheet row carries the requested job number."""

    def __init__(self, job_number: str):
        self.job_number = job_number
        super().__init__("Job number not found")
