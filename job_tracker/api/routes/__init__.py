"""
API routes package.
"""

from .health import router as health_router
from .jobs import router as jobs_router
from .sheet_data import router as sheet_data_router
from .submit import router as submit_router
from .update_entry import router as update_entry_router

__all__ = [
    "health_router",
    "jobs_router",
    "sheet_data_router",
    "submit_router",
    "update_entry_router",
]
