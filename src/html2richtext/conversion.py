"""Conversion pipeline for HTML -> rich text JSON."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from html2richtext.assembler import assemble_body
from html2richtext.config import (
    HTML2RICHTEXT_ENSURE_ASCII,
    HTML2RICHTEXT_JSON_INDENT,
)
from html2richtext.exceptions import ConversionError, Html2RichTextError
from html2richtext.html_utils import build_document_root
from html2richtext.sanitizer import sanitize_html
from html2richtext.schemas import Document
from html2richtext.serializer import serialize_document
from html2richtext.validator import validate_html

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    """Options for JSON output.

    Attributes:
        ensure_ascii: If True, escape non-ASCII characters as ``\\uXXXX``.
        indent: Indentation for pretty-printed output; compact when None.
    """

    ensure_ascii: bool = HTML2RICHTEXT_ENSURE_ASCII
    indent: int | None = HTML2RICHTEXT_JSON_INDENT


def convert_to_document(html: str) -> Document:
    """Validate, sanitize, parse and convert HTML into a document model.

    Raises:
        InvalidHtmlError: If the HTML is empty, malformed or unsanitizable.
        ConversionError: If the DOM cannot be converted.
    """
    html = validate_html(html)
    sanitized = sanitize_html(html)

    try:
        body = build_document_root(sanitized)
        return assemble_body(body)
    except Html2RichTextError:
        raise
    except Exception as exc:
        raise ConversionError(f"Failed to convert HTML: {exc}") from exc


def convert(html: str, *, options: ConversionOptions | None = None) -> str:
    """Convert an HTML fragment into rich text JSON.

    Args:
        html: The HTML fragment to convert.
        options: Output options. Uses defaults if None.

    Returns:
        The document as JSON text.

    Raises:
        InvalidHtmlError: If the HTML is empty, malformed or unsanitizable.
        ConversionError: If the DOM cannot be converted.
        JsonEncodingError: If the document cannot be encoded as JSON.
    """
    opts = options or ConversionOptions()
    document = convert_to_document(html)
    logger.debug("Converted %d characters of HTML", len(html))
    return serialize_document(
        document, ensure_ascii=opts.ensure_ascii, indent=opts.indent
    )
