"""
API middleware package.
"""

from .error_handler import ErrorHandlerMiddleware, OperationFailedError
from .logging import LoggingMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",
    "OperationFailedError",
]
