"""Navigation and page source retrieval."""

import threading
from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver

import logging
logger = logging.getLogger(__name__)


def open_url(driver: WebDriver, url: str) -> None:
    """Navigate the browser to ``url``."""
    logger.info(f"Navigating to [{url}]")
    driver.get(url)


def open_with_timeout(driver: WebDriver, url: str, timeout: float) -> bool:
    """
    Navigate to ``url``, giving up on waiting after ``timeout`` seconds.

    The navigation runs on a daemon worker thread named after the URL. When
    the join times out the page is left loading in the browser; the
    underlying ``get`` call is not cancelled.

    Returns:
        True if navigation finished within the timeout, False otherwise
    """
    logger.info(f"Navigating to [{url}] with timeout of [{timeout}s]")

    def _load():
        try:
            driver.get(threading.current_thread().name)
        except Exception as e:
            logger.debug(f"Navigation to {url} failed in watchdog thread: {e}")

    thread = threading.Thread(target=_load, name=url, daemon=True)
    thread.start()
    thread.join(timeout)

    if thread.is_alive():
        logger.warning(f"Timeout on loading page {url}")
        return False
    return True


def refresh(driver: WebDriver) -> None:
    driver.refresh()


def get_page_source(driver: WebDriver, url: Optional[str] = None) -> str:
    """Return the DOM of the current page, navigating to ``url`` first if given."""
    if url is not None:
        logger.info(f"Getting DOM of URL: [{url}]")
        open_url(driver, url)
    return driver.page_source


def get_url(driver: WebDriver) -> str:
    return driver.current_url


__all__ = [
    'open_url',
    'open_with_timeout',
    'refresh',
    'get_page_source',
    'get_url',
]
