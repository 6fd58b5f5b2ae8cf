"""HTML parsing utilities."""

from bs4 import BeautifulSoup


DEFAULT_PARSER = "html.parser"


def parse_document(html_content: str, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """
    Parse a serialized DOM into a BeautifulSoup document.

    Args:
        html_content: Raw HTML string, typically ``driver.page_source``
        parser: BeautifulSoup tree builder ("html.parser", "lxml", ...)

    Returns:
        Parsed document supporting ``select()`` / ``find()`` queries
    """
    return BeautifulSoup(html_content or "", parser)


__all__ = [
    'DEFAULT_PARSER',
    'parse_document',
]
