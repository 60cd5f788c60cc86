"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from job_tracker.api.middleware.error_handler import ErrorHandlerMiddleware
from job_tracker.api.middleware.logging import LoggingMiddleware
from job_tracker.api.routes import health, jobs, sheet_data, submit, update_entry
from job_tracker.application.interfaces.sheets import SheetStoreInterface
from job_tracker.config.logging import get_logger, log_environment_setup
from job_tracker.config.settings import Settings, settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Application startup", environment=app.state.settings.ENVIRONMENT)
    log_environment_setup(app.state.settings)

    yield

    store = getattr(app.state, "sheet_store", None)
    if store is not None:
        try:
            await store.close()
        except Exception as e:
            logger.error("Error closing sheet store", error=str(e))
    logger.info("Application shutdown")


def create_app(
    app_settings: Optional[Settings] = None,
    sheet_store: Optional[SheetStoreInterface] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="Job tracking form backed by a Google spreadsheet",
        openapi_url=f"{app_settings.API_PREFIX}/openapi.json" if app_settings.DEBUG else None,
        docs_url=f"{app_settings.API_PREFIX}/docs" if app_settings.DEBUG else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    # Created lazily on first request when not supplied
    app.state.sheet_store = sheet_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    app.include_router(health.router, prefix=app_settings.API_PREFIX, tags=["health"])
    app.include_router(sheet_data.router, prefix=app_settings.API_PREFIX)
    app.include_router(submit.router, prefix=app_settings.API_PREFIX)
    app.include_router(update_entry.router, prefix=app_settings.API_PREFIX)
    app.include_router(jobs.router, prefix=app_settings.API_PREFIX)

    return app
