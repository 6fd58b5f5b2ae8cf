"""Screenshot capture."""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from selenium.webdriver.remote.webdriver import WebDriver

from ..constants import SCREENSHOT_PREFIX, SCREENSHOT_SUFFIX


def take_screenshot(driver: WebDriver, dest: Optional[Union[str, os.PathLike]] = None) -> Path:
    """
    Save a PNG screenshot of the current page.

    Args:
        driver: Selenium WebDriver instance
        dest: Destination file. When omitted a new temporary file is created.

    Returns:
        Path of the written screenshot

    Raises:
        OSError: if the screenshot could not be written
    """
    if dest is None:
        fd, name = tempfile.mkstemp(prefix=SCREENSHOT_PREFIX, suffix=SCREENSHOT_SUFFIX)
        os.close(fd)
        path = Path(name)
    else:
        path = Path(dest)
        path.parent.mkdir(parents=True, exist_ok=True)

    # get_screenshot_as_file reports IO failures by returning False
    if not driver.get_screenshot_as_file(str(path)):
        raise OSError(f"Could not write screenshot to {path}")
    return path


def get_screenshot_bytes(driver: WebDriver) -> bytes:
    return driver.get_screenshot_as_png()


__all__ = [
    'take_screenshot',
    'get_screenshot_bytes',
]
