"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status

from job_tracker.api.dependencies import SettingsDep, SheetStoreDep
from job_tracker.application.services.sheet_layout import cell_range
from job_tracker.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/")
async def health_check(app_settings: SettingsDep) -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "version": app_settings.APP_VERSION,
        "timestamp": _timestamp(),
    }


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check."""
    return {"status": "alive", "timestamp": _timestamp()}


@router.get("/ready")
async def readiness_check(
    store: SheetStoreDep, app_settings: SettingsDep
) -> Dict[str, Any]:
    """Readiness check: the header cell of the sheet must be readable."""
    try:
        await store.get_values(cell_range(app_settings.GOOGLE_SHEET_NAME, "jobNumber", 1))
    except Exception as e:
        logger.error("Readiness check failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Readiness check failed: {str(e)}",
        )

    return {"status": "ready", "timestamp": _timestamp()}
