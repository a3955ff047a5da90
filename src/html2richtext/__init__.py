"""html2richtext: convert HTML fragments into rich text JSON documents."""

from html2richtext.conversion import ConversionOptions, convert, convert_to_document
from html2richtext.exceptions import (
    ConversionError,
    Html2RichTextError,
    InvalidHtmlError,
    JsonEncodingError,
)
from html2richtext.schemas import (
    Document,
    HeadingNode,
    LinkNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    TextNode,
)

__all__ = [
    "ConversionError",
    "ConversionOptions",
    "Document",
    "HeadingNode",
    "Html2RichTextError",
    "InvalidHtmlError",
    "JsonEncodingError",
    "LinkNode",
    "ListItemNode",
    "ListNode",
    "ParagraphNode",
    "TextNode",
    "convert",
    "convert_to_document",
]
