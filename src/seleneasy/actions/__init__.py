"""Driver-level helpers used by the Seleneasy facade."""

from .selectors import get_by_selector, to_locator
from .navigation import open_url, open_with_timeout, refresh, get_page_source, get_url
from .waits import wait_for_condition, wait_visible, wait_clickable
from .elements import positionate_and_click, find_first, send_keys_delay, press_escape
from .scripts import execute_javascript, scroll_to_top, scroll_to_bottom
from .screenshots import take_screenshot, get_screenshot_bytes

__all__ = [
    "get_by_selector",
    "to_locator",
    "open_url",
    "open_with_timeout",
    "refresh",
    "get_page_source",
    "get_url",
    "wait_for_condition",
    "wait_visible",
    "wait_clickable",
    "positionate_and_click",
    "find_first",
    "send_keys_delay",
    "press_escape",
    "execute_javascript",
    "scroll_to_top",
    "scroll_to_bottom",
    "take_screenshot",
    "get_screenshot_bytes",
]
