"""Environment configuration and validation."""

import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

from ..constants import (
    DEFAULT_BROWSER,
    DEFAULT_WAIT_SECS,
    PAGE_LOAD_TIMEOUT_SECS,
    SUPPORTED_BROWSERS,
)

import logging
logger = logging.getLogger(__name__)


_TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable."""
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


def _env_str(name: str) -> Optional[str]:
    return (os.getenv(name) or "").strip() or None


def _env_seconds(name: str, default: float) -> float:
    """Read a duration in seconds, falling back to ``default`` on bad input."""
    raw = _env_str(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}s")
        return default


def validate_browser(browser: Optional[str]) -> str:
    """Normalize a browser name, raising EnvironmentError if it cannot be launched."""
    name = (browser or DEFAULT_BROWSER).lower()
    if name not in SUPPORTED_BROWSERS:
        raise EnvironmentError(
            f"SELENEASY_BROWSER must be one of {', '.join(SUPPORTED_BROWSERS)}, got {name!r}."
        )
    return name


def get_env_config(load_env_file: bool = True) -> dict:
    """
    Read environment variables into a configuration dict.

    A ``.env`` file in the working directory is loaded first (existing
    environment variables win). The browser name is only validated when a
    driver is launched, so wrapping an existing driver never fails on it.

    Optional:   SELENEASY_BROWSER           firefox (default) or chrome
                SELENEASY_HEADLESS          1/true/yes to run without a window
                SELENEASY_BINARY_PATH       browser executable override
                SELENEASY_DRIVER_LOG_PATH   geckodriver/chromedriver log file
                SELENEASY_DEFAULT_WAIT      explicit-wait timeout in seconds
                SELENEASY_PAGE_LOAD_TIMEOUT open_with_timeout default in seconds
    """
    if load_env_file:
        load_dotenv(find_dotenv(filename=".env", usecwd=True))

    return {
        "browser": (_env_str("SELENEASY_BROWSER") or DEFAULT_BROWSER).lower(),
        "headless": env_flag("SELENEASY_HEADLESS"),
        "binary_path": _env_str("SELENEASY_BINARY_PATH"),
        "driver_log_path": _env_str("SELENEASY_DRIVER_LOG_PATH"),
        "default_wait": _env_seconds("SELENEASY_DEFAULT_WAIT", DEFAULT_WAIT_SECS),
        "page_load_timeout": _env_seconds("SELENEASY_PAGE_LOAD_TIMEOUT", PAGE_LOAD_TIMEOUT_SECS),
    }
