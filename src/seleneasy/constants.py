"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

# ============================================================================
# Wait Configuration
# ============================================================================

DEFAULT_WAIT_SECS = 10
"""Default explicit-wait timeout in seconds."""

PAGE_LOAD_TIMEOUT_SECS = 30
"""Default watchdog timeout for open_with_timeout, in seconds."""


# ============================================================================
# Browser Configuration
# ============================================================================

SUPPORTED_BROWSERS = ("firefox", "chrome")
"""Browsers that create_webdriver knows how to launch."""

DEFAULT_BROWSER = "firefox"


# ============================================================================
# Scripts
# ============================================================================

SCROLL_TOP_SCRIPT = "window.scrollTo(0, 0);return true"
SCROLL_BOTTOM_SCRIPT = "window.scrollTo(0, document.body.scrollHeight);return true"


# ============================================================================
# Files
# ============================================================================

SCREENSHOT_SUFFIX = ".png"
SCREENSHOT_PREFIX = "seleneasy_"


__all__ = [
    "DEFAULT_WAIT_SECS",
    "PAGE_LOAD_TIMEOUT_SECS",
    "SUPPORTED_BROWSERS",
    "DEFAULT_BROWSER",
    "SCROLL_TOP_SCRIPT",
    "SCROLL_BOTTOM_SCRIPT",
    "SCREENSHOT_SUFFIX",
    "SCREENSHOT_PREFIX",
]
