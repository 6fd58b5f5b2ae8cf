"""Explicit waits on the driver session."""

from typing import Any, Callable, Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC

from .selectors import Selector, to_locator


def wait_for_condition(driver: WebDriver, condition: Callable[[WebDriver], Any], timeout: float) -> Any:
    """
    Poll ``condition`` against the driver until it returns a truthy value.

    Raises:
        TimeoutException: if the condition is not met within ``timeout`` seconds
    """
    return WebDriverWait(driver, timeout).until(condition)


def wait_visible(
    driver: WebDriver,
    selector: Selector,
    timeout: float,
    selector_type: Optional[str] = None,
) -> WebElement:
    """Wait for an element to be visible and return it."""
    locator = to_locator(selector, selector_type)
    return wait_for_condition(driver, EC.visibility_of_element_located(locator), timeout)


def wait_clickable(
    driver: WebDriver,
    selector: Selector,
    click: bool,
    timeout: float,
    selector_type: Optional[str] = None,
) -> WebElement:
    """Wait for an element to be clickable, click it if asked, and return it."""
    locator = to_locator(selector, selector_type)
    element = wait_for_condition(driver, EC.element_to_be_clickable(locator), timeout)

    if click:
        element.click()

    return element


__all__ = [
    'wait_for_condition',
    'wait_visible',
    'wait_clickable',
]
