"""
Factory for creating sheet store instances.
"""

from job_tracker.application.interfaces.sheets import SheetStoreInterface
from job_tracker.application.services.sheet_layout import header_row
from job_tracker.config.logging import get_logger
from job_tracker.config.settings import Settings
from job_tracker.domain.exceptions.sheets_error import SheetsConfigurationError
from job_tracker.infrastructure.sheets.auth import SHEETS_SCOPES, ServiceAccountAuth
from job_tracker.infrastructure.sheets.client import GoogleSheetsClient
from job_tracker.infrastructure.sheets.memory import InMemorySheetStore

logger = get_logger(__name__)


def create_sheet_store(settings: Settings) -> SheetStoreInterface:
    """Create the sheet store selected by configuration."""
    if settings.MOCK_SHEETS:
        logger.info("Using in-memory sheet store", sheet=settings.GOOGLE_SHEET_NAME)
        return InMemorySheetStore(
            sheets={settings.GOOGLE_SHEET_NAME: [header_row()]},
            default_sheet=settings.GOOGLE_SHEET_NAME,
        )

    if not settings.GOOGLE_SHEET_ID:
        raise SheetsConfigurationError("Google Sheet ID is not configured")

    auth = ServiceAccountAuth(
        client_email=settings.GOOGLE_CLIENT_EMAIL,
        private_key=settings.GOOGLE_PRIVATE_KEY,
        token_uri=settings.GOOGLE_TOKEN_URI,
        scopes=SHEETS_SCOPES,
        timeout=settings.SHEETS_REQUEST_TIMEOUT,
    )

    logger.info("Using Google Sheets store", sheet=settings.GOOGLE_SHEET_NAME)
    return GoogleSheetsClient(
        spreadsheet_id=settings.GOOGLE_SHEET_ID,
        auth=auth,
        base_url=settings.SHEETS_BASE_URL,
        timeout=settings.SHEETS_REQUEST_TIMEOUT,
    )
