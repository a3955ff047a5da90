"""Encode rich text documents as JSON text."""

from __future__ import annotations

import json
import logging

from html2richtext.exceptions import JsonEncodingError
from html2richtext.schemas import Document

logger = logging.getLogger(__name__)

_COMPACT_SEPARATORS = (",", ":")


def document_to_dict(document: Document) -> dict:
    """Dump a document to plain Python data in output key order."""
    return document.model_dump(mode="json", by_alias=True)


def serialize_document(
    document: Document,
    *,
    ensure_ascii: bool = True,
    indent: int | None = None,
) -> str:
    """Serialize a document to JSON and check the result parses back.

    Output is compact unless ``indent`` is given. Forward slashes are never
    escaped.

    Raises:
        JsonEncodingError: If encoding fails or produces invalid JSON.
    """
    try:
        payload = json.dumps(
            document_to_dict(document),
            ensure_ascii=ensure_ascii,
            indent=indent,
            separators=_COMPACT_SEPARATORS if indent is None else None,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise JsonEncodingError(f"Failed to encode document to JSON: {exc}") from exc

    if not is_valid_json(payload):
        raise JsonEncodingError("Generated JSON is invalid")

    logger.debug("Serialized document to %d characters of JSON", len(payload))
    return payload


def is_valid_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True
