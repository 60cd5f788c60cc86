"""
Logging configuration for the application.
"""

import logging
import sys

import structlog

from job_tracker.config.settings import Settings, settings


def configure_logging() -> None:
    """Configure structured logging."""

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
            if settings.ENVIRONMENT == "production"
            else structlog.dev.ConsoleRenderer(colors=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    # Quiet the HTTP client; request logging happens in the sheets client
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def log_environment_setup(app_settings: Settings = None) -> None:
    """Log which Google Sheets settings are present, never their values."""
    app_settings = app_settings or settings
    logger = get_logger(__name__)
    logger.info(
        "Environment check",
        sheet_id_configured=bool(app_settings.GOOGLE_SHEET_ID),
        client_email_configured=bool(app_settings.GOOGLE_CLIENT_EMAIL),
        private_key_configured=bool(app_settings.GOOGLE_PRIVATE_KEY),
        sheet_name=app_settings.GOOGLE_SHEET_NAME,
        mock_sheets=app_settings.MOCK_SHEETS,
    )


def get_logger(name: str = None) -> structlog.BoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name)
