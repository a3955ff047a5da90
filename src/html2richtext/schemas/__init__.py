"""Shared schemas for html2richtext."""

from html2richtext.schemas.document import Document
from html2richtext.schemas.nodes import (
    BLOCK_TYPES,
    INLINE_TYPES,
    BlockNode,
    HeadingNode,
    InlineNode,
    LinkNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    RichNode,
    TextNode,
    with_marks,
)

__all__ = [
    "BLOCK_TYPES",
    "INLINE_TYPES",
    "BlockNode",
    "Document",
    "HeadingNode",
    "InlineNode",
    "LinkNode",
    "ListItemNode",
    "ListNode",
    "ParagraphNode",
    "RichNode",
    "TextNode",
    "with_marks",
]
