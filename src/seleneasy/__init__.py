"""
Seleneasy: a convenience layer on top of Selenium WebDriver.

It adds navigation helpers (including a page-load watchdog), explicit-wait
helpers for visibility and clickability, DOM retrieval parsed with
BeautifulSoup, screenshots, JavaScript helpers, mouse/keyboard helpers and
cookie persistence to disk.

Browser control is always delegated to Selenium; the driver can be supplied
by the caller or launched from SELENEASY_* environment configuration.
"""

from .core import Seleneasy
from .cookies import CookieRecord, load_cookies, save_cookies
from .config.environment import get_env_config
from .utils.html_utils import parse_document

__all__ = [
    "Seleneasy",
    "CookieRecord",
    "load_cookies",
    "save_cookies",
    "get_env_config",
    "parse_document",
]
