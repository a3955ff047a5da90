"""Convert parsed HTML nodes into rich text nodes."""

from __future__ import annotations

import logging
from typing import Sequence, Union

from bs4.element import PageElement, Tag

from html2richtext.config import HEADING_TAGS
from html2richtext.exceptions import ConversionError, Html2RichTextError
from html2richtext.html_utils import (
    HTML_WHITESPACE,
    collapse_whitespace,
    element_children,
    is_element,
    is_text_node,
    strip_whitespace,
)
from html2richtext.schemas import (
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

logger = logging.getLogger(__name__)

_LIST_TAGS = {"ul", "ol"}
_BOLD_TAGS = {"strong", "b"}
_ITALIC_TAGS = {"em", "i"}

ConvertedResult = Union[RichNode, list[RichNode], None]


def convert_element(node: PageElement) -> ConvertedResult:
    """Convert a single DOM node.

    Returns a node, ``None`` when nothing survives, or a list of nodes when
    the element is a mark (bold/italic) or an unsupported wrapper whose
    content is spliced into the parent.
    """
    if is_text_node(node):
        text = collapse_whitespace(str(node))
        if not strip_whitespace(text):
            return None
        return TextNode(value=text)

    if not is_element(node):
        return None

    name = (node.name or "").lower()

    if name in HEADING_TAGS:
        children = _inline_children(convert_node(node))
        if not children:
            return None
        return HeadingNode(level=int(name[1]), children=children)

    if name in _LIST_TAGS:
        return _convert_list(node, ordered=name == "ol")

    if name == "li":
        return _convert_list_item(node)

    if name == "a":
        href = node.get("href")
        if not href:
            raise ConversionError("Link element missing href attribute")
        children = _inline_children(convert_node(node))
        if not children:
            return None
        return LinkNode(url=href, title=node.get("title"), children=children)

    if name in _BOLD_TAGS:
        return _apply_marks(convert_node(node), bold=True)

    if name in _ITALIC_TAGS:
        return _apply_marks(convert_node(node), italic=True)

    if name == "p":
        children = _inline_children(convert_node(node))
        if not children:
            return None
        return ParagraphNode(children=children)

    return convert_node(node)


def convert_node(node: PageElement) -> list[RichNode]:
    """Convert the children of ``node`` into a whitespace-normalized sequence."""
    if is_text_node(node):
        converted = convert_element(node)
        return [converted] if converted is not None else []

    if not is_element(node):
        return []

    try:
        results: list[RichNode] = []
        for child in node.children:
            converted = convert_element(child)
            if converted is None:
                continue
            if isinstance(converted, list):
                results.extend(converted)
            else:
                results.append(converted)
        return normalize_siblings(results)
    except Html2RichTextError:
        raise
    except Exception as exc:
        raise ConversionError(f"Failed to convert node: {exc}") from exc


def normalize_siblings(results: Sequence[RichNode]) -> list[RichNode]:
    """Fix up spacing between adjacent converted siblings.

    Whitespace runs collapse, the outer edges of the sequence are trimmed, and
    a space is added wherever two pieces of text (or text and a following
    non-text node) would otherwise run together. Text that ends up empty is
    dropped.
    """
    normalized: list[RichNode] = []
    last_text: int | None = None
    last_index = len(results) - 1

    for index, node in enumerate(results):
        if not isinstance(node, TextNode):
            if last_text is not None:
                _ensure_trailing_space(normalized, last_text)
            normalized.append(node)
            last_text = None
            continue

        value = collapse_whitespace(node.value)
        if index == 0:
            value = value.lstrip(HTML_WHITESPACE)
        if index == last_index:
            value = value.rstrip(HTML_WHITESPACE)
        if not strip_whitespace(value):
            continue

        if last_text is not None and not value.startswith(" "):
            _ensure_trailing_space(normalized, last_text)

        if value != node.value:
            node = node.model_copy(update={"value": value})
        normalized.append(node)
        last_text = len(normalized) - 1

    return normalized


def _ensure_trailing_space(nodes: list[RichNode], index: int) -> None:
    previous = nodes[index]
    if previous.value.endswith(" "):
        return
    nodes[index] = previous.model_copy(
        update={"value": previous.value.rstrip(HTML_WHITESPACE) + " "}
    )


def _convert_list(node: Tag, *, ordered: bool) -> ListNode | None:
    items: list[ListItemNode] = []
    for child in element_children(node):
        if child.name != "li":
            continue
        item = _convert_list_item(child)
        if item is not None:
            items.append(item)
    if not items:
        return None
    return ListNode(list_type="ordered" if ordered else "unordered", children=items)


def _convert_list_item(node: Tag) -> ListItemNode | None:
    children = _inline_children(convert_node(node))
    if not children:
        return None
    return ListItemNode(children=children)


def _apply_marks(
    children: list[RichNode], *, bold: bool = False, italic: bool = False
) -> list[RichNode] | None:
    if not children:
        return None
    return [
        with_marks(child, bold=bold, italic=italic)
        if isinstance(child, TextNode)
        else child
        for child in children
    ]


def _inline_children(children: Sequence[RichNode]) -> list[InlineNode]:
    """Flatten block nodes that ended up where only inline content is allowed.

    A paragraph inside a list item or a nested list keeps its text but loses
    its block structure.
    """
    if all(isinstance(child, (TextNode, LinkNode)) for child in children):
        return list(children)

    flattened: list[RichNode] = []
    for child in children:
        if isinstance(child, (TextNode, LinkNode)):
            flattened.append(child)
        else:
            logger.debug("Flattening %s inside inline content", child.type)
            flattened.extend(_inline_children(child.children))
    return normalize_siblings(flattened)
