"""
Seleneasy facade.

Usage:
    from seleneasy import Seleneasy
    from selenium.webdriver.support import expected_conditions as EC

    with Seleneasy() as browser:
        doc = browser.get_document("https://github.com/brunocvcunha")
        print(doc.select_one("span.vcard-fullname").get_text(strip=True))
        browser.wait_clickable("a[rel='next']", click=True)
        browser.wait_for_condition(EC.url_contains("page=2"))
"""

from typing import Any, Callable, List, Optional, Union

from bs4 import BeautifulSoup
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .actions import elements, navigation, screenshots, scripts, waits
from .actions.selectors import Selector
from .browser.driver import create_webdriver, quit_driver, register_shutdown_hook
from .config.environment import get_env_config
from .constants import PAGE_LOAD_TIMEOUT_SECS
from .cookies import CookieRecord, PathLike, load_cookies, save_cookies
from .utils.diagnostics import collect_diagnostics
from .utils.html_utils import parse_document


class Seleneasy:
    """
    Convenience layer on top of a Selenium WebDriver.

    Attributes:
        driver: The wrapped WebDriver
        default_wait_in_seconds: Timeout used by the wait helpers when none is given
        config: Configuration dictionary (see get_env_config)
    """

    def __init__(
        self,
        driver: Optional[WebDriver] = None,
        capabilities: Optional[dict] = None,
        default_wait_in_seconds: Optional[float] = None,
        config: Optional[dict] = None,
    ):
        self.config = config if config is not None else get_env_config()
        self.driver = driver
        if default_wait_in_seconds is None:
            default_wait_in_seconds = self.config.get("default_wait", 10)
        self.default_wait_in_seconds = default_wait_in_seconds

        self.setup(capabilities)

    def setup(self, capabilities: Optional[dict] = None) -> None:
        """Create a local browser if no driver was supplied."""
        if self.driver is None:
            self.driver = create_webdriver(self.config, capabilities)
            register_shutdown_hook(self.driver)

    def __enter__(self) -> "Seleneasy":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _timeout(self, timeout: Optional[float]) -> float:
        return self.default_wait_in_seconds if timeout is None else timeout

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def open(self, url: str) -> None:
        navigation.open_url(self.driver, url)

    def open_with_timeout(self, url: str, timeout: Optional[float] = None) -> bool:
        """Navigate to ``url`` waiting at most ``timeout`` seconds. Returns False on timeout."""
        if timeout is None:
            timeout = self.config.get("page_load_timeout", PAGE_LOAD_TIMEOUT_SECS)
        return navigation.open_with_timeout(self.driver, url, timeout)

    def refresh(self) -> None:
        navigation.refresh(self.driver)

    def get_page_source(self, url: Optional[str] = None) -> str:
        return navigation.get_page_source(self.driver, url)

    def get_document(self, url: Optional[str] = None) -> BeautifulSoup:
        """Parsed DOM of ``url`` (or of the current page)."""
        return parse_document(self.get_page_source(url))

    def get_url(self) -> str:
        return navigation.get_url(self.driver)

    # ------------------------------------------------------------------
    # Screenshots
    # ------------------------------------------------------------------

    def take_screenshot(self, dest: Optional[PathLike] = None):
        return screenshots.take_screenshot(self.driver, dest)

    def get_screenshot(self):
        return screenshots.take_screenshot(self.driver)

    def get_screenshot_bytes(self) -> bytes:
        return screenshots.get_screenshot_bytes(self.driver)

    # ------------------------------------------------------------------
    # JavaScript
    # ------------------------------------------------------------------

    def execute_javascript(self, script: str, *args) -> Any:
        return scripts.execute_javascript(self.driver, script, *args)

    def scroll_to_top(self) -> None:
        scripts.scroll_to_top(self.driver)

    def scroll_to_bottom(self) -> None:
        scripts.scroll_to_bottom(self.driver)

    # ------------------------------------------------------------------
    # Waits
    # ------------------------------------------------------------------

    def wait_visible(
        self,
        selector: Selector,
        timeout: Optional[float] = None,
        selector_type: Optional[str] = None,
    ) -> WebElement:
        return waits.wait_visible(self.driver, selector, self._timeout(timeout), selector_type)

    def wait_for_condition(self, condition: Callable[[WebDriver], Any], timeout: Optional[float] = None) -> Any:
        return waits.wait_for_condition(self.driver, condition, self._timeout(timeout))

    def wait_clickable(
        self,
        selector: Selector,
        click: bool = False,
        timeout: Optional[float] = None,
        selector_type: Optional[str] = None,
    ) -> WebElement:
        return waits.wait_clickable(self.driver, selector, click, self._timeout(timeout), selector_type)

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def positionate_and_click(
        self,
        target: Union[WebElement, Selector],
        selector_type: Optional[str] = None,
    ) -> WebElement:
        return elements.positionate_and_click(
            self.driver, target, self.default_wait_in_seconds, selector_type
        )

    def find_first(self, *selectors: Selector) -> Optional[WebElement]:
        return elements.find_first(self.driver, *selectors)

    def send_keys_delay(self, element: WebElement, message: str, delay: float) -> None:
        elements.send_keys_delay(element, message, delay)

    def esc(self) -> None:
        elements.press_escape(self.driver)

    # ------------------------------------------------------------------
    # Cookies
    # ------------------------------------------------------------------

    def save_cookies(self, path: PathLike, append: bool = True) -> List[CookieRecord]:
        return save_cookies(self.driver, path, append)

    def load_cookies(self, path: PathLike, domain: Optional[str] = None) -> int:
        return load_cookies(self.driver, path, domain)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def diagnostics(self, exc: Optional[Exception] = None) -> str:
        return collect_diagnostics(self.driver, exc, self.config)

    def shutdown(self) -> None:
        """Quit the browser; failures are logged, never raised."""
        quit_driver(self.driver)


__all__ = ["Seleneasy"]
