"""Selector parsing into Selenium locators."""

from typing import Optional, Tuple, Union

from selenium.webdriver.common.by import By


Locator = Tuple[str, str]
Selector = Union[str, Locator]


def get_by_selector(selector_type: str):
    return {
        'css': By.CSS_SELECTOR,
        'xpath': By.XPATH,
        'id': By.ID,
        'name': By.NAME,
        'tag': By.TAG_NAME,
        'class': By.CLASS_NAME,
        'link_text': By.LINK_TEXT,
        'partial_link_text': By.PARTIAL_LINK_TEXT
    }.get(selector_type.lower())


def to_locator(selector: Selector, selector_type: Optional[str] = None) -> Locator:
    """
    Normalize a selector into a ``(By.<strategy>, value)`` tuple.

    Tuples pass through untouched. Strings use ``selector_type`` when given,
    otherwise anything starting with ``/`` or ``(`` is XPath and the rest is CSS.
    """
    if isinstance(selector, tuple):
        if len(selector) != 2:
            raise ValueError(f"Locator tuples must be (by, value), got {selector!r}")
        return selector

    if not isinstance(selector, str) or not selector.strip():
        raise ValueError(f"Selector must be a non-empty string or a locator tuple, got {selector!r}")

    # Auto-detect selector type
    if selector_type is None:
        if selector.startswith('/') or selector.startswith('('):
            selector_type = "xpath"
        else:
            selector_type = "css"

    by = get_by_selector(selector_type)
    if not by:
        raise ValueError(f"Unsupported selector type: {selector_type}")
    return (by, selector)


__all__ = [
    'Locator',
    'Selector',
    'get_by_selector',
    'to_locator',
]
