"""
Spreadsheet store implementations.
"""

from .auth import ServiceAccountAuth
from .client import GoogleSheetsClient
from .factory import create_sheet_store
from .memory import InMemorySheetStore

__all__ = [
    "GoogleSheetsClient",
    "InMemorySheetStore",
    "ServiceAccountAuth",
    "create_sheet_store",
]
