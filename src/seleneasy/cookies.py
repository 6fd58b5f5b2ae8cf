"""
Cookie persistence.

Cookies are stored as a JSON array of Selenium-shaped cookie dicts:

    [{"name": "sid", "value": "...", "domain": ".example.com", "path": "/",
      "expiry": 1767225600, "secure": true, "httpOnly": true}]

The file is only meant to be read back by ``load_cookies``.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from selenium.common.exceptions import (
    InvalidCookieDomainException,
    UnableToSetCookieException,
)
from selenium.webdriver.remote.webdriver import WebDriver

import logging
logger = logging.getLogger(__name__)


PathLike = Union[str, os.PathLike]


@dataclass
class CookieRecord:
    """One cookie as held by the browser's cookie store."""

    name: str
    value: str
    domain: Optional[str] = None
    path: Optional[str] = None
    expiry: Optional[int] = None
    secure: bool = False
    http_only: bool = False
    same_site: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CookieRecord":
        """Build a record from a Selenium cookie dict."""
        expiry = data.get("expiry")
        return cls(
            name=data["name"],
            value=data["value"],
            domain=data.get("domain"),
            path=data.get("path"),
            expiry=int(expiry) if expiry is not None else None,
            secure=bool(data.get("secure", False)),
            http_only=bool(data.get("httpOnly", False)),
            same_site=data.get("sameSite"),
        )

    def to_dict(self) -> dict:
        """Selenium cookie dict, omitting unset fields."""
        d = {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "expiry": self.expiry,
            "secure": self.secure,
            "httpOnly": self.http_only,
            "sameSite": self.same_site,
        }
        return {k: v for k, v in d.items() if v is not None}

    def with_domain(self, domain: str) -> "CookieRecord":
        return CookieRecord(
            name=self.name,
            value=self.value,
            domain=domain,
            path=self.path,
            expiry=self.expiry,
            secure=self.secure,
            http_only=self.http_only,
            same_site=self.same_site,
        )

    @property
    def key(self) -> Tuple[str, Optional[str], Optional[str]]:
        return (self.name, self.domain, self.path)

    def __str__(self) -> str:
        return f"{self.name}={self.value}; domain={self.domain}; path={self.path}"


def read_cookie_file(path: PathLike) -> List[CookieRecord]:
    """
    Read cookie records from ``path``.

    A missing file yields an empty list.

    Raises:
        ValueError: if the file is not a JSON array of cookie objects
    """
    p = Path(path)
    if not p.exists():
        return []

    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError("expected a JSON array")
        return [CookieRecord.from_dict(item) for item in data]
    except (ValueError, KeyError, TypeError) as e:
        raise ValueError(f"Malformed cookie file {p}: {e}") from e


def write_cookie_file(path: PathLike, cookies: Iterable[CookieRecord]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump([c.to_dict() for c in cookies], f, indent=2)


def merge_cookies(*groups: Iterable[CookieRecord]) -> List[CookieRecord]:
    """
    Merge cookie groups in order; later records replace earlier ones with the
    same (name, domain, path). First-seen position is kept.
    """
    merged: Dict[Tuple[str, Optional[str], Optional[str]], CookieRecord] = {}
    for group in groups:
        for cookie in group:
            merged[cookie.key] = cookie
    return list(merged.values())


def save_cookies(driver: WebDriver, path: PathLike, append: bool = True) -> List[CookieRecord]:
    """
    Save the browser's cookies to ``path``.

    Args:
        driver: Selenium WebDriver instance
        path: Cookie file
        append: Keep cookies already stored in the file, updating duplicates

    Returns:
        The records written
    """
    logger.info(f"Saving cookies: {Path(path).resolve()}")

    current = [CookieRecord.from_dict(c) for c in driver.get_cookies()]
    if append:
        cookies_to_save = merge_cookies(read_cookie_file(path), current)
    else:
        cookies_to_save = current

    write_cookie_file(path, cookies_to_save)
    return cookies_to_save


def _fallback_domain_applies(cookie: CookieRecord, domain: Optional[str]) -> bool:
    return bool(
        domain
        and cookie.domain
        and cookie.domain.startswith(".")
        and cookie.domain in domain
    )


def load_cookies(driver: WebDriver, path: PathLike, domain: Optional[str] = None) -> int:
    """
    Inject the cookies stored in ``path`` into the browser session.

    The browser only accepts cookies for the domain it is currently on. When
    the browser rejects a cookie's domain and ``domain`` is given, a cookie
    recorded for a parent domain (leading dot, contained in ``domain``) is
    re-issued scoped to ``domain``. Any other rejected cookie is dropped with
    a warning.

    Args:
        driver: Selenium WebDriver instance
        path: Cookie file written by save_cookies
        domain: Domain to import cross-subdomain cookies into

    Returns:
        Number of cookies added to the browser
    """
    added = 0
    for cookie in read_cookie_file(path):
        logger.info(f"Loading cookie: {cookie}")

        try:
            driver.add_cookie(cookie.to_dict())
            added += 1
        except UnableToSetCookieException as e:
            logger.warning(f"Skipping invalid cookie {cookie.name}: {e}")
        except InvalidCookieDomainException as e:
            if _fallback_domain_applies(cookie, domain):
                logger.info(f"Re-issuing cookie {cookie.name} from {cookie.domain} for {domain}")
                driver.add_cookie(cookie.with_domain(domain).to_dict())
                added += 1
            else:
                logger.warning(f"Dropping cookie {cookie.name} for domain {cookie.domain}: {e}")

    return added


__all__ = [
    "CookieRecord",
    "read_cookie_file",
    "write_cookie_file",
    "merge_cookies",
    "save_cookies",
    "load_cookies",
]
