"""Rich text node models.

Field declaration order is the serialized key order, so ``type`` always comes
first, node-specific fields follow and ``children`` comes last.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

_MARKS = ("bold", "italic")


class TextNode(BaseModel):
    """A run of text, optionally marked bold and/or italic.

    Unset marks are left out of the serialized output. Because the marks are
    declared fields, ``bold`` always precedes ``italic`` no matter which one
    was applied first.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    value: str
    bold: Literal[True] | None = None
    italic: Literal[True] | None = None

    @model_serializer(mode="wrap")
    def _omit_unset_marks(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for mark in _MARKS:
            if data.get(mark) is None:
                data.pop(mark, None)
        return data


class LinkNode(BaseModel):
    """A hyperlink wrapping inline content."""

    model_config = ConfigDict(frozen=True)

    type: Literal["link"] = "link"
    url: str
    title: str | None = None
    children: list[InlineNode] = Field(default_factory=list)


InlineNode = Annotated[Union[TextNode, LinkNode], Field(discriminator="type")]

LinkNode.model_rebuild()


class HeadingNode(BaseModel):
    """A heading of level 1 to 6."""

    model_config = ConfigDict(frozen=True)

    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    children: list[InlineNode] = Field(default_factory=list)


class ParagraphNode(BaseModel):
    """A paragraph of inline content."""

    model_config = ConfigDict(frozen=True)

    type: Literal["paragraph"] = "paragraph"
    children: list[InlineNode] = Field(default_factory=list)


class ListItemNode(BaseModel):
    """A single item of a list."""

    model_config = ConfigDict(frozen=True)

    type: Literal["list-item"] = "list-item"
    children: list[InlineNode] = Field(default_factory=list)


class ListNode(BaseModel):
    """An ordered or unordered list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["list"] = "list"
    list_type: Literal["ordered", "unordered"] = Field(..., alias="listType")
    children: list[ListItemNode] = Field(default_factory=list)


BlockNode = Annotated[
    Union[HeadingNode, ParagraphNode, ListNode], Field(discriminator="type")
]
RichNode = Union[TextNode, LinkNode, HeadingNode, ParagraphNode, ListNode, ListItemNode]

BLOCK_TYPES = frozenset({"heading", "list", "paragraph"})
INLINE_TYPES = frozenset({"text", "link"})


def with_marks(
    node: TextNode, *, bold: bool = False, italic: bool = False
) -> TextNode:
    """Return a copy of ``node`` with the given marks switched on."""
    update: dict[str, Any] = {}
    if bold:
        update["bold"] = True
    if italic:
        update["italic"] = True
    if not update:
        return node
    return node.model_copy(update=update)
