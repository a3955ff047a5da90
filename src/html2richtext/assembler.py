"""Group converted top-level results into a rich text document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from bs4.element import Tag

from html2richtext.converter import ConvertedResult, convert_element
from html2richtext.exceptions import ConversionError
from html2richtext.html_utils import (
    collapse_whitespace,
    element_children,
    strip_whitespace,
)
from html2richtext.schemas import (
    BLOCK_TYPES,
    INLINE_TYPES,
    Document,
    ParagraphNode,
    RichNode,
    TextNode,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssemblyState:
    """Blocks emitted so far plus inline nodes waiting for a paragraph."""

    blocks: tuple[RichNode, ...] = ()
    pending: tuple[RichNode, ...] = ()

    def flush(self) -> AssemblyState:
        if not self.pending:
            return self
        paragraph = ParagraphNode(children=list(self.pending))
        return AssemblyState(blocks=(*self.blocks, paragraph))

    def add_block(self, node: RichNode) -> AssemblyState:
        flushed = self.flush()
        return AssemblyState(blocks=(*flushed.blocks, node))

    def add_inline(self, node: RichNode) -> AssemblyState:
        return AssemblyState(blocks=self.blocks, pending=(*self.pending, node))


def assemble(results: Iterable[ConvertedResult]) -> Document:
    """Build a document from the converted top-level results.

    Blocks are appended as they come; runs of inline content are collected
    into paragraphs. A document always has at least one child: when nothing
    survives, a single empty paragraph is emitted.

    Raises:
        ConversionError: If a result is neither block nor inline content.
    """
    state = AssemblyState()
    for result in results:
        state = step(state, result)
    state = state.flush()

    blocks = list(state.blocks)
    if not blocks:
        blocks.append(ParagraphNode(children=[]))
    logger.debug("Assembled document with %d blocks", len(blocks))
    return Document(children=blocks)


def step(state: AssemblyState, result: ConvertedResult) -> AssemblyState:
    """Fold a single converted result into the assembly state."""
    if result is None:
        return state
    if isinstance(result, list):
        for item in result:
            state = step(state, item)
        return state
    node_type = getattr(result, "type", type(result).__name__)
    if node_type in BLOCK_TYPES:
        return state.add_block(result)
    if node_type in INLINE_TYPES:
        return state.add_inline(result)
    raise ConversionError(f"Unsupported element type: {node_type}")


def assemble_body(body: Tag) -> Document:
    """Convert the children of a parsed ``<body>`` into a document.

    A body holding only text becomes one paragraph; otherwise each element
    child is converted and assembled. Loose text between top-level elements
    is not part of any element and is skipped.
    """
    elements = list(element_children(body))
    if not elements:
        text = strip_whitespace(collapse_whitespace(body.get_text()))
        if text:
            return assemble([ParagraphNode(children=[TextNode(value=text)])])
        return assemble([])

    return assemble(convert_element(element) for element in elements)
