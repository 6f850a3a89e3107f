"""Mini README: Centralised configuration for Maintenance Maker.

Structure:
    * MaintenanceMakerSettings - Pydantic settings model for runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read the service host/port, the locale and
    currency used for formatting, and the defaults applied to a fresh report.
    Values can be overridden with ``MAINTENANCE_MAKER_*`` environment variables
    or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from babel import Locale, UnknownLocaleError
from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .export import DEFAULT_FILENAME, DEFAULT_WORKSHEET_NAME
from .logging_utils import resolve_level
from .session import DEFAULT_REPORT_TITLE


class MaintenanceMakerSettings(BaseSettings):
    """Runtime configuration for the maintenance report tool."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web form to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web form is served on.",
        ge=1,
        le=65535,
    )
    currency_locale: str = Field(
        "en_IN",
        description="Locale used for currency grouping and symbols.",
    )
    currency_code: str = Field(
        "INR",
        description="ISO 4217 code of the single currency amounts are recorded in.",
        min_length=3,
        max_length=3,
    )
    date_locale: str = Field(
        "en_GB",
        description="Locale used to render payment deadlines (DD Month YYYY).",
    )
    month_locale: str = Field(
        "en_US",
        description="Locale used for the short month names in period labels.",
    )
    default_report_title: str = Field(
        DEFAULT_REPORT_TITLE,
        description="Title a new report starts with; editable from the form.",
    )
    worksheet_name: str = Field(
        DEFAULT_WORKSHEET_NAME,
        description="Worksheet name hinted to spreadsheet applications on import.",
    )
    export_filename: str = Field(
        DEFAULT_FILENAME,
        description="File name offered when the report is downloaded.",
    )

    class Config:
        env_prefix = "MAINTENANCE_MAKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("currency_locale", "date_locale", "month_locale")
    def _known_locale(cls, value: str) -> str:
        """Reject locale identifiers Babel has no data for."""

        try:
            Locale.parse(value)
        except (ValueError, UnknownLocaleError) as error:
            raise ValueError(f"Unknown locale: {value}") from error
        return value

    @validator("log_level")
    def _known_log_level(cls, value: str) -> str:
        """Reject level names the logging module does not define."""

        resolve_level(value)
        return value.strip().upper()

    @validator("currency_code")
    def _upper_currency(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> MaintenanceMakerSettings:
    """Return cached settings so every module shares one configuration."""

    return MaintenanceMakerSettings()
