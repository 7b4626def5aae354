"""
Configuration management for PriceWatch Admin.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early by the Streamlit entry point
(admin_app/app.py) so .env is loaded before any other code reads the environment.

On hosted deployments .env usually does not exist; load_dotenv() is safe to call
and will no-op. Platform environment variables always take precedence.

Environment Variables:
- BACKEND_URL: Optional, backend base URL (defaults to http://localhost:8080)
- API_TIMEOUT_SECONDS: Optional, per-request timeout (defaults to 15)
- UPLOAD_TIMEOUT_SECONDS: Optional, timeout for manual report uploads (defaults to 60)
- NOMINATIM_URL: Optional, geocoding base URL (defaults to the public OSM instance)
- GEOCODING_COUNTRY_CODES: Optional, comma-separated country filter (defaults to "ph")
- GEOCODING_USER_AGENT: Optional, User-Agent sent to Nominatim
- MARKET_REFRESH_SECONDS: Optional, market table polling interval (defaults to 30)
- DEFAULT_PAGE_SIZE: Optional, server page size for tables (defaults to 10)
- EVENT_LOG_FILE: Optional, path of the admin audit log (defaults to admin_events.log)
- OAUTH_CALLBACK_URL: Optional, URL the backend redirects to after Google sign-in
- LOG_LEVEL: Optional, console log level (defaults to INFO)
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Project root: pricewatch/config.py -> pricewatch/ -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers configured by setup_logging()
_APP_LOGGER_NAMES = ("pricewatch", "admin_app", "utils", "ui")


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables win
    (override=False), so platform configuration is never clobbered.
    """
    env_path = PROJECT_ROOT / ".env"
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Invalid integer for %s=%r, using %d", name, raw, default)
        return default


class BackendConfig:
    """Configuration for the price-monitoring backend API."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the backend base URL.

        Returns:
            URL string with trailing slash removed (default: http://localhost:8080)
        """
        return os.getenv("BACKEND_URL", "http://localhost:8080").rstrip("/")

    @staticmethod
    def get_timeout() -> int:
        """Timeout in seconds for regular API calls (default: 15)."""
        return _get_int("API_TIMEOUT_SECONDS", 15)

    @staticmethod
    def get_upload_timeout() -> int:
        """Timeout in seconds for multipart uploads (default: 60)."""
        return _get_int("UPLOAD_TIMEOUT_SECONDS", 60)


class GeocodingConfig:
    """Configuration for the Nominatim location search used by the market editor."""

    @staticmethod
    def get_base_url() -> str:
        return os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org").rstrip("/")

    @staticmethod
    def get_country_codes() -> str:
        return os.getenv("GEOCODING_COUNTRY_CODES", "ph")

    @staticmethod
    def get_user_agent() -> str:
        return os.getenv("GEOCODING_USER_AGENT", "pricewatch-admin/0.1")

    @staticmethod
    def get_result_limit() -> int:
        return _get_int("GEOCODING_RESULT_LIMIT", 5)


class DashboardConfig:
    """Configuration for dashboard behavior (refresh, paging, audit log, OAuth)."""

    @staticmethod
    def get_market_refresh_seconds() -> int:
        """Polling interval for the market table (default: 30 seconds)."""
        return _get_int("MARKET_REFRESH_SECONDS", 30)

    @staticmethod
    def get_default_page_size() -> int:
        return _get_int("DEFAULT_PAGE_SIZE", 10)

    @staticmethod
    def get_event_log_file() -> Path:
        """
        Get the path of the admin audit log.

        Relative paths are resolved against the project root.
        """
        path = Path(os.getenv("EVENT_LOG_FILE", "admin_events.log"))
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    @staticmethod
    def get_oauth_callback_url() -> Optional[str]:
        return os.getenv("OAUTH_CALLBACK_URL")


class LoggingConfig:
    """Configuration for application logging."""

    @staticmethod
    def get_level() -> int:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()
        level = logging.getLevelName(level_name)
        return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    """
    Attach a console handler to the application loggers.

    Idempotent: Streamlit reruns the entry script on every interaction, so
    loggers that already have handlers are left untouched.
    """
    level = LoggingConfig.get_level()
    formatter = logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)

    for name in _APP_LOGGER_NAMES:
        app_logger = logging.getLogger(name)
        app_logger.setLevel(level)
        if app_logger.handlers:
            continue
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)
        app_logger.propagate = False
