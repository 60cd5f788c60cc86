"""
Application interfaces package.
"""

from .repositories import JobEntryRepositoryInterface
from .sheets import SheetStoreInterface

__all__ = [
    "JobEntryRepositoryInterface",
    "SheetStoreInterface",
]
