"""Document root model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from html2richtext.schemas.nodes import BlockNode


class Document(BaseModel):
    """Root of a rich text document."""

    model_config = ConfigDict(frozen=True)

    type: Literal["root"] = "root"
    children: list[BlockNode] = Field(default_factory=list)
