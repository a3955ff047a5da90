"""Cheap structural checks run before any HTML parsing."""

from __future__ import annotations

import logging
import re

from html2richtext.config import VOID_TAGS
from html2richtext.exceptions import ConversionError, InvalidHtmlError

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_RE = re.compile(r"<(/)?([a-zA-Z0-9]+)[^>]*>")
_INVALID_TAG_START_RE = re.compile(r"<[^a-zA-Z/!]")
# ``<a`` followed by whitespace, ``/`` or ``>`` so ``<abbr>`` and friends are not anchors.
_ANCHOR_WITHOUT_HREF_RE = re.compile(r"<a(?=[\s/>])(?![^>]*\bhref\s*=)[^>]*>", re.IGNORECASE)


def strip_comments(html: str) -> str:
    """Remove HTML comments, including ones spanning several lines."""
    return _COMMENT_RE.sub("", html)


def validate_html(html: str) -> str:
    """Reject obviously malformed HTML and return it with comments removed.

    This is a regex scan, not a parser: it catches unbalanced brackets,
    mismatched tags, bogus tag names and anchors without ``href`` so the more
    expensive sanitize/parse stages only see plausible markup.

    Raises:
        InvalidHtmlError: If the input is empty or structurally malformed.
        ConversionError: If an anchor tag lacks an ``href`` attribute.
    """
    if not html:
        raise InvalidHtmlError("HTML content cannot be empty")

    html = strip_comments(html)

    if html.count("<") != html.count(">"):
        raise InvalidHtmlError("Malformed HTML: Unmatched angle brackets")

    _check_tag_balance(html)

    if _INVALID_TAG_START_RE.search(html):
        raise InvalidHtmlError("Malformed HTML: Invalid tag syntax")

    if _ANCHOR_WITHOUT_HREF_RE.search(html):
        raise ConversionError("Link element missing href attribute")

    logger.debug("Validated %d characters of HTML", len(html))
    return html


def _check_tag_balance(html: str) -> None:
    stack: list[str] = []
    for match in _TAG_RE.finditer(html):
        is_closing = match.group(1) == "/"
        tag = match.group(2).lower()

        if not is_closing:
            if tag in VOID_TAGS or match.group(0).endswith("/>"):
                continue
            stack.append(tag)
            continue

        if not stack or stack.pop() != tag:
            raise InvalidHtmlError("Malformed HTML: Unclosed or mismatched tags")

    if stack:
        raise InvalidHtmlError("Malformed HTML: Unclosed tags")
