"""
Domain exceptions package.
"""

from .not_found_error import JobNotFoundError
from .sheets_error import (
    SheetsAPIError,
    SheetsAuthenticationError,
    SheetsConfigurationError,
    SheetsError,
)
from .validation_error import (
    DuplicateJobNumberError,
    InvalidFieldValueError,
    MissingUpdateFieldsError,
    RequiredFieldError,
    UnknownFieldError,
    ValidationError,
)

__all__ = [
    "DuplicateJobNumberError",
    "InvalidFieldValueError",
    "JobNotFoundError",
    "MissingUpdateFieldsError",
    "RequiredFieldError",
    "SheetsAPIError",
    "SheetsAuthenticationError",
    "SheetsConfigurationError",
    "SheetsError",
    "UnknownFieldError",
    "ValidationError",
]
