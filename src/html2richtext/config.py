"""Local configuration for html2richtext."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_SUFFIX = ".json"
DEFAULT_LOG_LEVEL = "WARNING"

# Tags and attributes that survive sanitization.
HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
ALLOWED_TAGS = frozenset(
    {*HEADING_TAGS, "p", "ul", "ol", "li", "a", "strong", "b", "em", "i"}
)
ALLOWED_ATTRIBUTES = {"a": ["href", "title"]}
# URL schemes accepted in link hrefs; anything else loses its href.
ALLOWED_PROTOCOLS = frozenset(
    {"http", "https", "mailto", "ftp", "nntp", "news", "tel"}
)
# Removed together with their content before the allow-list is applied.
FORBIDDEN_CONTENT_TAGS = ("script", "style")
# Elements that never have a closing tag. They become a single space.
VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, raw)
        return None


HTML2RICHTEXT_ENSURE_ASCII = _env_flag("HTML2RICHTEXT_ENSURE_ASCII", True)
HTML2RICHTEXT_JSON_INDENT = _env_optional_int("HTML2RICHTEXT_JSON_INDENT")
HTML2RICHTEXT_OUTPUT_SUFFIX = os.getenv("HTML2RICHTEXT_OUTPUT_SUFFIX", DEFAULT_OUTPUT_SUFFIX)
HTML2RICHTEXT_LOG_LEVEL = os.getenv("HTML2RICHTEXT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
