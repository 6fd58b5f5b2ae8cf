"""Diagnostics and debugging information utility functions."""

import sys
import platform
from typing import Optional

import psutil
import selenium
from selenium.webdriver.remote.webdriver import WebDriver


def _service_pid(driver: WebDriver) -> Optional[int]:
    service = getattr(driver, "service", None)
    process = getattr(service, "process", None)
    pid = getattr(process, "pid", None)
    return pid if isinstance(pid, int) else None


def collect_diagnostics(
    driver: Optional[WebDriver] = None,
    exc: Optional[Exception] = None,
    config: Optional[dict] = None
) -> str:
    """
    Collect diagnostic information about the browser, driver, and environment.

    Args:
        driver: Selenium WebDriver instance (can be None)
        exc: Exception that occurred (can be None)
        config: Configuration dictionary from get_env_config() (can be None)

    Returns:
        str: Formatted diagnostic information
    """
    config = config or {}

    parts = [
        f"OS                : {platform.system()} {platform.release()}",
        f"Python            : {sys.version.split()[0]}",
        f"Selenium          : {getattr(selenium, '__version__', '?')}",
        f"Browser           : {config.get('browser', '<unknown>')}",
        f"Headless          : {bool(config.get('headless'))}",
        f"Binary path       : {config.get('binary_path') or '<default>'}",
        f"Driver initialized: {driver is not None}",
    ]

    if driver is not None:
        parts.append(f"Driver type       : {type(driver).__name__}")
        try:
            parts.append(f"Current URL       : {driver.current_url}")
        except Exception:
            parts.append("Current URL       : <unavailable>")

        cap = getattr(driver, "capabilities", None) or {}
        if not isinstance(cap, dict):
            cap = {}
        parts.append(f"Browser version   : {cap.get('browserVersion') or '<unknown>'}")
        drv_ver = (
            cap.get("moz:geckodriverVersion")
            or (cap.get("chrome") or {}).get("chromedriverVersion")
            or "<unknown>"
        )
        parts.append(f"Driver version    : {drv_ver}")

        pid = _service_pid(driver)
        if pid is not None:
            parts.append(f"Driver process    : pid={pid} alive={psutil.pid_exists(pid)}")
        else:
            parts.append("Driver process    : <remote or unknown>")

    if exc:
        parts += [
            "---- ERROR ----",
            f"Error type        : {type(exc).__name__}",
            f"Error message     : {exc}",
        ]

    return "\n".join(parts)


__all__ = ['collect_diagnostics']
