"""WebDriver creation and shutdown handling."""

import atexit
from typing import Optional

from selenium import webdriver
from selenium.webdriver.remote.webdriver import WebDriver

from ..config.environment import validate_browser

import logging
logger = logging.getLogger(__name__)


def _build_options(browser: str, config: dict, capabilities: Optional[dict] = None):
    if browser == "chrome":
        from selenium.webdriver.chrome.options import Options
        options = Options()
        if config.get("headless"):
            options.add_argument("--headless=new")
    else:
        from selenium.webdriver.firefox.options import Options
        options = Options()
        if config.get("headless"):
            options.add_argument("-headless")

    binary_path = config.get("binary_path")
    if binary_path:
        options.binary_location = binary_path

    # Selenium 4 dropped desired_capabilities; capabilities ride on the options
    for key, value in (capabilities or {}).items():
        options.set_capability(key, value)

    return options


def _build_service(browser: str, config: dict):
    if browser == "chrome":
        from selenium.webdriver.chrome.service import Service
    else:
        from selenium.webdriver.firefox.service import Service

    log_file = config.get("driver_log_path")
    if not log_file:
        return Service()

    return Service(log_output=log_file)


def create_webdriver(config: dict, capabilities: Optional[dict] = None) -> WebDriver:
    """
    Launch a new local browser session.

    Args:
        config: Configuration dictionary from get_env_config()
        capabilities: Extra W3C capabilities applied through the browser options

    Returns:
        A Firefox (default) or Chrome WebDriver

    Raises:
        EnvironmentError: if the configured browser is not supported
    """
    browser = validate_browser(config.get("browser"))
    options = _build_options(browser, config, capabilities)
    service = _build_service(browser, config)

    logger.info(f"Starting {browser} driver (headless={bool(config.get('headless'))})")
    if browser == "chrome":
        return webdriver.Chrome(service=service, options=options)
    return webdriver.Firefox(service=service, options=options)


def quit_driver(driver: WebDriver) -> bool:
    """Quit the driver, logging instead of raising on failure."""
    try:
        driver.quit()
        return True
    except Exception as e:
        logger.warning(f"Error shutting down the driver: {e}", exc_info=True)
        return False


def _quit_on_exit(driver: WebDriver) -> None:
    try:
        driver.quit()
    except Exception as e:
        # Interpreter is going away; the session may already be gone
        logger.debug(f"Driver quit at exit failed (non-critical): {e}")


def register_shutdown_hook(driver: WebDriver) -> None:
    """Quit the driver when the interpreter exits."""
    atexit.register(_quit_on_exit, driver)


__all__ = [
    "create_webdriver",
    "quit_driver",
    "register_shutdown_hook",
]
