"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Job Tracker Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api"
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # Google Sheets
    GOOGLE_SHEET_ID: Optional[str] = None
    GOOGLE_SHEET_NAME: str = "Sheet2"
    GOOGLE_CLIENT_EMAIL: Optional[str] = None
    GOOGLE_PRIVATE_KEY: Optional[str] = None
    GOOGLE_TOKEN_URI: str = "https://oauth2.googleapis.com/token"
    SHEETS_BASE_URL: str = "https://sheets.googleapis.com/v4"
    SHEETS_REQUEST_TIMEOUT: int = 30

    # Job numbers
    DEFAULT_JOB_PREFIX: str = "ROPR"
    JOB_NUMBER_PREFIXES: Union[str, List[str]] = "ROPR,DIGFI"

    # Development
    MOCK_SHEETS: bool = False

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("JOB_NUMBER_PREFIXES", mode="before")
    @classmethod
    def assemble_job_prefixes(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            v = v.split(",")
        prefixes = [p.strip().upper() for p in v if p and p.strip()]
        if not prefixes:
            raise ValueError("At least one job number prefix is required")
        return prefixes

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
