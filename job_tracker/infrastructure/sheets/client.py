"""
Google Sheets v4 values API client.
"""

import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
import structlog

from job_tracker.application.interfaces.sheets import SheetStoreInterface
from job_tracker.domain.exceptions.sheets_error import SheetsAPIError
from job_tracker.infrastructure.sheets.auth import ServiceAccountAuth

logger = structlog.get_logger()

VALUE_INPUT_OPTION = "USER_ENTERED"


class GoogleSheetsClient(SheetStoreInterface):
    """Google Sheets client bound to one spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: str,
        auth: ServiceAccountAuth,
        base_url: str = "https://sheets.googleapis.com/v4",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.auth = auth
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _values_url(self, range_: str, suffix: str = "") -> str:
        return (
            f"{self.base_url}/spreadsheets/{self.spreadsheet_id}"
            f"/values/{quote(range_, safe='')}{suffix}"
        )

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            )
        return self._client

    async def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        headers = await self.auth.get_auth_headers()
        start_time = time.time()

        try:
            response = await self._get_client().request(
                method, url, params=params, json=body, headers=headers
            )
        except httpx.TimeoutException:
            logger.error("Sheets request timeout", method=method, url=url)
            raise SheetsAPIError(408, "Sheets request timeout")
        except httpx.RequestError as e:
            logger.error("Sheets request failed", method=method, url=url, error=str(e))
            raise SheetsAPIError(0, f"Sheets network error: {e}")

        response_time = (time.time() - start_time) * 1000
        logger.debug(
            "Sheets request completed",
            method=method,
            url=url,
            status_code=response.status_code,
            response_time_ms=response_time,
        )

        if response.status_code >= 400:
            raise SheetsAPIError(response.status_code, self._error_message(response))

        return response.json() if response.content else {}

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return response.text

    async def get_values(self, range_: str) -> List[List[str]]:
        """Read values of a range; empty ranges return no rows."""
        data = await self._request("GET", self._values_url(range_))
        return data.get("values", [])

    async def append_values(
        self, range_: str, rows: List[List[Any]]
    ) -> Dict[str, Any]:
        """Append rows to the table found in the range."""
        return await self._request(
            "POST",
            self._values_url(range_, ":append"),
            params={
                "valueInputOption": VALUE_INPUT_OPTION,
                "insertDataOption": "INSERT_ROWS",
            },
            body={"majorDimension": "ROWS", "values": rows},
        )

    async def update_values(
        self, range_: str, rows: List[List[Any]]
    ) -> Dict[str, Any]:
        """Overwrite the cells of a range."""
        return await self._request(
            "PUT",
            self._values_url(range_),
            params={"valueInputOption": VALUE_INPUT_OPTION},
            body={"range": range_, "majorDimension": "ROWS", "values": rows},
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
