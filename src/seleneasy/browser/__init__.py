"""WebDriver creation and teardown."""

from .driver import (
    create_webdriver,
    register_shutdown_hook,
    quit_driver,
)

__all__ = [
    "create_webdriver",
    "register_shutdown_hook",
    "quit_driver",
]
