"""JavaScript execution and scrolling."""

from typing import Any

from selenium.webdriver.remote.webdriver import WebDriver

from ..constants import SCROLL_TOP_SCRIPT, SCROLL_BOTTOM_SCRIPT


def execute_javascript(driver: WebDriver, script: str, *args) -> Any:
    """Execute JavaScript in the current page and return its result."""
    return driver.execute_script(script, *args)


def scroll_to_top(driver: WebDriver) -> None:
    execute_javascript(driver, SCROLL_TOP_SCRIPT)


def scroll_to_bottom(driver: WebDriver) -> None:
    execute_javascript(driver, SCROLL_BOTTOM_SCRIPT)


__all__ = [
    'execute_javascript',
    'scroll_to_top',
    'scroll_to_bottom',
]
