"""
Google service account authentication.
"""

import time
from typing import List, Optional

import httpx
import jwt
import structlog

from job_tracker.domain.exceptions.sheets_error import (
    SheetsAuthenticationError,
    SheetsConfigurationError,
)

logger = structlog.get_logger()

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"
ASSERTION_LIFETIME = 3600


def normalize_private_key(private_key: Optional[str]) -> str:
    """Strip surrounding quotes and turn literal ``\\n`` into line breaks."""
    if not private_key:
        raise SheetsConfigurationError("GOOGLE_PRIVATE_KEY is not configured")

    key = private_key.strip()
    if len(key) >= 2 and key[0] == key[-1] and key[0] in "\"'":
        key = key[1:-1]
    return key.replace("\\n", "\n")


class ServiceAccountAuth:
    """OAuth2 JWT-bearer authentication for a Google service account."""

    def __init__(
        self,
        client_email: str,
        private_key: str,
        token_uri: str,
        scopes: Optional[List[str]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not client_email:
            raise SheetsConfigurationError("GOOGLE_CLIENT_EMAIL is not configured")

        self.client_email = client_email
        self.private_key = normalize_private_key(private_key)
        self.token_uri = token_uri
        self.scopes = scopes or SHEETS_SCOPES
        self.timeout = timeout
        self.transport = transport
        self.access_token: Optional[str] = None
        self.token_expires_at: Optional[float] = None

    async def get_access_token(self) -> str:
        """Get valid access token, refreshing if necessary."""
        if self._is_token_valid():
            return self.access_token

        await self._refresh_token()
        return self.access_token

    async def get_auth_headers(self) -> dict:
        """Get headers with a current access token."""
        token = await self.get_access_token()
        return {"Authorization": f"Bearer {token}"}

    def _is_token_valid(self) -> bool:
        """Check if current token is still valid."""
        if not self.access_token or not self.token_expires_at:
            return False

        # Add 5 minute buffer before expiration
        buffer_time = 300
        return time.time() < (self.token_expires_at - buffer_time)

    def _build_assertion(self) -> str:
        now = int(time.time())
        claims = {
            "iss": self.client_email,
            "scope": " ".join(self.scopes),
            "aud": self.token_uri,
            "iat": now,
            "exp": now + ASSERTION_LIFETIME,
        }
        try:
            return jwt.encode(claims, self.private_key, algorithm="RS256")
        except (ValueError, TypeError, jwt.PyJWTError) as e:
            raise SheetsAuthenticationError(f"Invalid service account key: {e}")

    async def _refresh_token(self) -> None:
        """Exchange a signed assertion for an access token."""
        assertion = self._build_assertion()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.token_uri,
                    data={"grant_type": JWT_BEARER_GRANT, "assertion": assertion},
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.TimeoutException:
            raise SheetsAuthenticationError("Authentication request timeout")
        except httpx.RequestError as e:
            raise SheetsAuthenticationError(f"Authentication network error: {e}")

        if response.status_code != 200:
            logger.error(
                "Service account authentication failed",
                status_code=response.status_code,
            )
            raise SheetsAuthenticationError(
                f"Authentication failed ({response.status_code}): {response.text}"
            )

        token_data = response.json()
        self.access_token = token_data["access_token"]
        self.token_expires_at = time.time() + token_data.get("expires_in", 3600)

        logger.info(
            "Google access token refreshed",
            client_email=self.client_email,
            expires_in=token_data.get("expires_in"),
        )
