"""Utility helpers: HTML parsing and diagnostics."""

from .html_utils import parse_document
from .diagnostics import collect_diagnostics

__all__ = [
    "parse_document",
    "collect_diagnostics",
]
