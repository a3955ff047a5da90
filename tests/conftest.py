"""Test setup for html2richtext."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from html2richtext.html_utils import build_document_root, element_children  # noqa: E402


@pytest.fixture
def first_element():
    """Parse markup and return its first top-level element."""

    def _first(markup: str):
        return next(element_children(build_document_root(markup)))

    return _first


@pytest.fixture
def src_path() -> Path:
    """Path to the source tree, for subprocess invocations."""
    return SRC
