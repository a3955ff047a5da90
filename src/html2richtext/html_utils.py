"""Shared HTML utilities for building and walking the parsed DOM."""

from __future__ import annotations

import re
from typing import Iterator

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_DOCUMENT_SHELL = "<!DOCTYPE html><html><body>{}</body></html>"
# ASCII whitespace only; a non-breaking space is content.
HTML_WHITESPACE = " \t\n\r\f\v"
_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")


def wrap_in_document(markup: str) -> str:
    """Wrap a fragment in a minimal document so parsers keep it in ``<body>``."""
    return _DOCUMENT_SHELL.format(markup)


def find_document_root(soup: BeautifulSoup) -> Tag:
    """Return the ``<body>`` element, or the soup itself when there is none."""
    if soup.body:
        return soup.body
    return soup


def build_document_root(markup: str) -> Tag:
    """Parse sanitized markup and return the element holding its content."""
    soup = BeautifulSoup(wrap_in_document(markup), "lxml")
    return find_document_root(soup)


def is_text_node(node: PageElement) -> bool:
    """True for character data; comments, doctypes and CDATA do not count."""
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def is_element(node: PageElement) -> bool:
    return isinstance(node, Tag)


def element_children(node: Tag) -> Iterator[Tag]:
    """Yield the direct element children of ``node``."""
    for child in node.children:
        if isinstance(child, Tag):
            yield child


def collapse_whitespace(text: str) -> str:
    """Collapse every run of whitespace to a single space."""
    return _WHITESPACE_RE.sub(" ", text)


def strip_whitespace(text: str) -> str:
    return text.strip(HTML_WHITESPACE)
