"""
Centralized configuration module for application-wide settings.

All settings are read from environment variables. A local ``.env`` file is
loaded only when ``DATABASE_URL`` is not already defined by the environment,
so container and CI settings always win.
"""

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from puppy_care.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

if not os.getenv("DATABASE_URL"):
    load_dotenv()

REPOSITORY_BACKENDS = ("memory", "sql")

# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'Europe/Lisbon', 'UTC')
            Default: 'UTC'
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


# Global timezone instance - initialized once at import time
APP_TZ = get_app_timezone()


def log_timezone_config():
    """Log the active timezone configuration at startup."""
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )


# ===========================
# Application Settings
# ===========================


def _env_flag(name: str, default: str = "false") -> bool:
    """Truthy values: "true", "1", "yes" (case-insensitive)."""
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    """Snapshot of the environment-driven settings."""

    database_url: str = "sqlite:///./puppy_care.db"
    repository_backend: str = "memory"
    log_level: str = "INFO"
    log_json: bool = False
    log_to_file: bool = False
    sql_echo: bool = False
    debug: bool = False

    def __post_init__(self):
        if self.repository_backend not in REPOSITORY_BACKENDS:
            raise ConfigurationError(
                f"Unsupported REPOSITORY_BACKEND '{self.repository_backend}'",
                invalid_keys=["REPOSITORY_BACKEND"],
            )


def get_settings() -> Settings:
    """
    Build a Settings snapshot from the current environment.

    Environment Variables:
        DATABASE_URL: SQLAlchemy URL (default: local sqlite file)
        REPOSITORY_BACKEND: 'memory' or 'sql' (default: 'memory')
        LOG_LEVEL: logging level name (default: 'INFO')
        LOG_JSON: emit JSON logs on the console (default: false)
        LOG_TO_FILE: also write rotating log files (default: false)
        SQL_ECHO: log SQL statements with timing (default: false)
        FLASK_DEBUG: expose exception messages in 500 responses
    """
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./puppy_care.db"),
        repository_backend=os.getenv("REPOSITORY_BACKEND", "memory").strip().lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_json=_env_flag("LOG_JSON"),
        log_to_file=_env_flag("LOG_TO_FILE"),
        sql_echo=_env_flag("SQL_ECHO"),
        debug=_env_flag("FLASK_DEBUG"),
    )
