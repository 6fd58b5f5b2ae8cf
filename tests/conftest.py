import pytest
from unittest.mock import Mock

from seleneasy import Seleneasy


def make_element(displayed=True, enabled=True):
    el = Mock()
    el.is_displayed.return_value = displayed
    el.is_enabled.return_value = enabled
    return el


@pytest.fixture
def driver():
    """A stand-in WebDriver; nothing talks to a real browser."""
    d = Mock()
    d.current_url = "https://example.com/"
    d.page_source = "<html><body><h1 class='title'>Hello</h1></body></html>"
    return d


@pytest.fixture
def browser(driver):
    return Seleneasy(driver=driver, config={"browser": "firefox", "default_wait": 1})
