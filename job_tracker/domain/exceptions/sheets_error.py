"""
Spreadsheet backend exceptions.
"""


class SheetsError(Exception):
    """Base exception for spreadsheet backend errors."""

    pass


class SheetsConfigurationError(SheetsError):
    """Raised when the spreadsheet backend is not configured."""

    pass


class SheetsAuthenticationError(SheetsError):
    """Raised when a service account token cannot be obtained."""

    pass


class SheetsAPIError(SheetsError):
    """Raised when the Sheets API returns an error."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Sheets API error ({status_code}): {message}")
