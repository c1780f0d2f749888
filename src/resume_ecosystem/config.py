"""Runtime configuration read from environment variables.

Values can be supplied through the process environment or a ``.env`` file in
the working directory:

- APP_ENV: ``development`` exposes internal error details in API responses
- LOG_LEVEL: logging level name (default INFO)
- HOST / PORT: bind address for the development server (default 0.0.0.0:5000)
- DB_URL: database URL, read by ``resume_ecosystem.data.db``
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_app_env() -> str:
    """Return the deployment environment name, lowercased."""
    return os.getenv("APP_ENV", "production").strip().lower()


def is_development() -> bool:
    """Return True when running in the development environment."""
    return get_app_env() == "development"


def get_log_level() -> int:
    """Return the configured logging level, falling back to INFO for unknown names."""
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_port() -> int:
    try:
        return int(os.getenv("PORT", "5000"))
    except ValueError:
        return 5000


def configure_logging() -> None:
    """Configure root logging once for the application process."""
    logging.basicConfig(level=get_log_level(), format=_LOG_FORMAT)
