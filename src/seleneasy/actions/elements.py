"""Element finding and mouse/keyboard interaction."""

import time
from typing import Optional, Union

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC

from .selectors import Selector, to_locator
from .waits import wait_for_condition

import logging
logger = logging.getLogger(__name__)


def positionate_and_click(
    driver: WebDriver,
    target: Union[WebElement, Selector],
    timeout: float,
    selector_type: Optional[str] = None,
) -> WebElement:
    """
    Move the mouse onto an element and click it, the way a user would.

    ``target`` may be an element or a selector; selectors are first waited on
    until visible. If the pointer cannot be moved there (e.g. the element is
    out of bounds) the element is clicked directly instead.
    """
    if isinstance(target, (str, tuple)):
        locator = to_locator(target, selector_type)
        element = wait_for_condition(driver, EC.visibility_of_element_located(locator), timeout)
    else:
        element = target

    mouse_actions = ActionChains(driver)
    try:
        mouse_actions.move_to_element(element).perform()
        mouse_actions.click(element).perform()
    except WebDriverException as e:
        logger.debug(f"Element not reachable by mouse, clicking directly: {e}")
        element.click()

    return element


def find_first(driver: WebDriver, *selectors: Selector) -> Optional[WebElement]:
    """Return the first element matched by the first selector that matches anything."""
    for selector in selectors:
        elements = driver.find_elements(*to_locator(selector))
        if elements:
            return elements[0]

    return None


def send_keys_delay(element: WebElement, message: str, delay: float) -> None:
    """Type ``message`` one character at a time, pausing ``delay`` seconds between keys."""
    for c in message:
        element.send_keys(c)
        time.sleep(delay)


def press_escape(driver: WebDriver) -> None:
    """Send ESC to the page body."""
    try:
        driver.find_element(By.TAG_NAME, "body").send_keys(Keys.ESCAPE)
    except WebDriverException as e:
        logger.warning(f"Could not send ESC to page body: {e}")


__all__ = [
    'positionate_and_click',
    'find_first',
    'send_keys_delay',
    'press_escape',
]
