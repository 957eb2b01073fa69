"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
Values are read from environment variables and an optional .env file, and can
be overridden by command-line options (see ``sda_mcp.cli``).
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.sudandigitalarchive.com/sda-api"

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class ClientConfig(BaseModel):
    """Connection settings for the archive API.

    Frozen: one instance is built at startup and shared read-only by every
    tool invocation.
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1, description="Archive API base URL")
    api_key: str = Field(..., min_length=1, repr=False, description="Value sent in the x-api-key header")
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds. None disables the timeout entirely.",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def normalized_base_url(self) -> str:
        return self.base_url.rstrip("/")


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are bound from environment variables and the .env file.
    Constructor keyword arguments (by field name) take precedence, which is
    how command-line options are applied.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Archive API
    # =====================================================================
    api_key: Optional[str] = Field(
        default=None,
        description="API key for the Sudan Digital Archive",
        alias="API_KEY",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Sudan Digital Archive API",
        alias="SDA_BASE_URL",
    )
    http_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="HTTP connect/read timeout in seconds (unset = no timeout)",
        alias="SDA_HTTP_TIMEOUT",
    )

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SDA_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="SDA_LOG_FORMAT",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file that receives DEBUG-level logs",
        alias="SDA_LOG_FILE",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def client(self) -> ClientConfig:
        """Get the archive client configuration.

        Raises:
            pydantic.ValidationError: If no API key has been configured.
        """
        return ClientConfig(base_url=self.base_url, api_key=self.api_key, timeout=self.http_timeout)
