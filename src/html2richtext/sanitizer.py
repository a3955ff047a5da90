"""Reduce HTML to the allow-listed subset understood by the converter."""

from __future__ import annotations

import logging

from html2richtext.config import (
    ALLOWED_ATTRIBUTES,
    ALLOWED_PROTOCOLS,
    ALLOWED_TAGS,
    FORBIDDEN_CONTENT_TAGS,
    VOID_TAGS,
)
from html2richtext.exceptions import InvalidHtmlError
from html2richtext.html_utils import find_document_root, wrap_in_document

try:
    import bleach
    from bs4 import BeautifulSoup
    from bs4.element import Comment
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "bleach and BeautifulSoup4 are required for sanitization "
        "(pip install bleach beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def sanitize_html(html: str) -> str:
    """Return the sanitized inner-body markup of an HTML fragment.

    Scripts, styles and comments are removed together with their content and
    void elements such as ``<br>`` become a space, then bleach strips every
    tag and attribute outside the allow-list while keeping the text of
    stripped elements. Link hrefs with a scheme outside ``ALLOWED_PROTOCOLS``
    are dropped.

    Raises:
        InvalidHtmlError: If the markup cannot be sanitized.
    """
    try:
        body_markup = _strip_unwanted_elements(html)
        cleaned = bleach.clean(
            body_markup,
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
            strip_comments=True,
        )
    except Exception as exc:
        raise InvalidHtmlError(f"Failed to sanitize HTML: {exc}") from exc

    cleaned = cleaned.strip()
    logger.debug("Sanitized %d characters down to %d", len(html), len(cleaned))
    return cleaned


def _strip_unwanted_elements(html: str) -> str:
    soup = BeautifulSoup(wrap_in_document(html), "lxml")
    for tag in soup.find_all(list(FORBIDDEN_CONTENT_TAGS)):
        tag.decompose()
    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
    root = find_document_root(soup)
    # Words on either side of a line break or image must not run together.
    for tag in root.find_all(list(VOID_TAGS)):
        tag.replace_with(" ")
    return root.decode_contents()
