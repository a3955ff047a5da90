"""Tests for the DOM to rich text tree converter."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup, NavigableString

from html2richtext.converter import convert_element, convert_node, normalize_siblings
from html2richtext.exceptions import ConversionError
from html2richtext.html_utils import build_document_root
from html2richtext.schemas import (
    HeadingNode,
    LinkNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    TextNode,
)


def _values(nodes) -> list[str]:
    return [node.value for node in nodes]


class TestTextNodes:
    """Tests for text node conversion."""

    def test_collapses_internal_whitespace(self) -> None:
        """Whitespace runs inside text become single spaces."""
        assert convert_element(NavigableString("a   b\n\tc")) == TextNode(value="a b c")

    def test_whitespace_only_text_is_dropped(self) -> None:
        """Text that is blank after trimming produces nothing."""
        assert convert_element(NavigableString("  \n\t ")) is None


class TestBlocks:
    """Tests for block element conversion."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_heading_levels(self, first_element, level: int) -> None:
        """The heading level comes from the tag name."""
        result = convert_element(first_element(f"<h{level}>Title</h{level}>"))
        assert result == HeadingNode(level=level, children=[TextNode(value="Title")])

    def test_empty_heading_is_dropped(self, first_element) -> None:
        """A heading with no content is discarded."""
        assert convert_element(first_element("<h2>   </h2>")) is None

    def test_paragraph(self, first_element) -> None:
        """Paragraph text is trimmed and collapsed."""
        result = convert_element(first_element("<p>  Multiple   spaces  </p>"))
        assert result == ParagraphNode(children=[TextNode(value="Multiple spaces")])

    def test_empty_paragraph_is_dropped(self, first_element) -> None:
        """An empty paragraph is discarded."""
        assert convert_element(first_element("<p></p>")) is None

    def test_unordered_list(self, first_element) -> None:
        """ul becomes an unordered list of list items."""
        result = convert_element(first_element("<ul><li>A</li><li>B</li></ul>"))
        assert result == ListNode(
            list_type="unordered",
            children=[
                ListItemNode(children=[TextNode(value="A")]),
                ListItemNode(children=[TextNode(value="B")]),
            ],
        )

    def test_ordered_list(self, first_element) -> None:
        """ol becomes an ordered list."""
        result = convert_element(first_element("<ol><li>One</li></ol>"))
        assert isinstance(result, ListNode)
        assert result.list_type == "ordered"

    def test_list_ignores_whitespace_and_non_items(self, first_element) -> None:
        """Only li elements with content become list items."""
        markup = "<ul>\n  <li>A</li>\n  <li>   </li>\n  <span>stray</span>\n  <li>B</li>\n</ul>"
        result = convert_element(first_element(markup))
        assert [_values(item.children) for item in result.children] == [["A"], ["B"]]

    def test_list_without_items_is_dropped(self, first_element) -> None:
        """A list whose items are all empty is discarded."""
        assert convert_element(first_element("<ul><li></li><li> </li></ul>")) is None

    def test_list_item_outside_list(self) -> None:
        """A bare li converts to a list item node."""
        result = convert_element(BeautifulSoup("<li>loose</li>", "html.parser").li)
        assert result == ListItemNode(children=[TextNode(value="loose")])

    def test_nested_list_is_flattened_into_item(self, first_element) -> None:
        """List items hold inline content only; nested lists keep their text."""
        result = convert_element(first_element("<ul><li>a<ul><li>b</li></ul></li></ul>"))
        assert len(result.children) == 1
        assert _values(result.children[0].children) == ["a ", "b"]

    def test_paragraphs_inside_list_item_are_flattened(self, first_element) -> None:
        """Paragraph text inside an item is spaced apart."""
        result = convert_element(first_element("<ul><li><p>x</p><p>y</p></li></ul>"))
        assert _values(result.children[0].children) == ["x ", "y"]


class TestLinks:
    """Tests for anchor conversion."""

    def test_link_without_title(self, first_element) -> None:
        """A missing title is None."""
        result = convert_element(first_element('<a href="https://example.com">Example</a>'))
        assert result == LinkNode(
            url="https://example.com", title=None, children=[TextNode(value="Example")]
        )

    def test_link_with_title(self, first_element) -> None:
        """The title attribute is carried over."""
        result = convert_element(
            first_element('<a href="/page" title="A page">Go</a>')
        )
        assert result.url == "/page"
        assert result.title == "A page"

    def test_link_without_href_raises(self, first_element) -> None:
        """An anchor reaching the converter without href is a conversion error."""
        with pytest.raises(ConversionError, match="missing href"):
            convert_element(first_element("<a>Example</a>"))

    def test_nested_link_without_href_raises(self, first_element) -> None:
        """The missing href error is not swallowed by enclosing elements."""
        with pytest.raises(ConversionError, match="Link element missing href attribute"):
            convert_element(first_element("<p>x <span><a>y</a></span></p>"))

    def test_empty_link_is_dropped(self, first_element) -> None:
        """A link with no content is discarded."""
        assert convert_element(first_element('<a href="https://example.com"> </a>')) is None


class TestMarks:
    """Tests for bold and italic marks."""

    def test_bold_returns_children(self, first_element) -> None:
        """Bold tags return marked text rather than a wrapping node."""
        for tag in ("strong", "b"):
            result = convert_element(first_element(f"<{tag}>bold</{tag}>"))
            assert result == [TextNode(value="bold", bold=True)]

    def test_italic_returns_children(self, first_element) -> None:
        """Italic tags return marked text."""
        for tag in ("em", "i"):
            result = convert_element(first_element(f"<{tag}>it</{tag}>"))
            assert result == [TextNode(value="it", italic=True)]

    def test_mark_order_is_independent_of_nesting(self, first_element) -> None:
        """bold always serializes before italic."""
        outer_bold = convert_element(first_element("<strong><em>T</em></strong>"))
        outer_italic = convert_element(first_element("<em><strong>T</strong></em>"))
        assert outer_bold == outer_italic
        assert list(outer_bold[0].model_dump()) == ["type", "value", "bold", "italic"]
        assert list(outer_italic[0].model_dump()) == ["type", "value", "bold", "italic"]

    def test_empty_mark_is_dropped(self, first_element) -> None:
        """A mark around blank text produces nothing."""
        assert convert_element(first_element("<b>  </b>")) is None

    def test_mark_leaves_links_untouched(self, first_element) -> None:
        """Only direct text children are marked."""
        result = convert_element(
            first_element('<b>see <a href="https://example.com">here</a></b>')
        )
        assert result[0] == TextNode(value="see ", bold=True)
        assert isinstance(result[1], LinkNode)
        assert result[1].children == [TextNode(value="here")]


class TestUnsupportedElements:
    """Tests for transparent unwrapping."""

    def test_unsupported_tag_is_unwrapped(self, first_element) -> None:
        """A span yields its converted content."""
        assert convert_element(first_element("<span>inner</span>")) == [
            TextNode(value="inner")
        ]

    def test_unwrapped_content_merges_with_siblings(self, first_element) -> None:
        """Unwrapped text is spaced like ordinary sibling text."""
        result = convert_element(first_element("<p>This is<span>unsupported</span>text</p>"))
        assert _values(result.children) == ["This is ", "unsupported ", "text"]

    def test_unsupported_block_wrapper_keeps_blocks(self, first_element) -> None:
        """A div around paragraphs returns the paragraphs."""
        result = convert_element(first_element("<div><p>a</p><p>b</p></div>"))
        assert [node.type for node in result] == ["paragraph", "paragraph"]


class TestConvertNode:
    """Tests for convert_node and sibling whitespace rules."""

    def test_space_inserted_between_adjacent_text(self, first_element) -> None:
        """Words from neighbouring elements do not merge."""
        result = convert_node(first_element("<p>Hello<b>World</b></p>"))
        assert result == [TextNode(value="Hello "), TextNode(value="World", bold=True)]

    def test_existing_spaces_are_not_doubled(self, first_element) -> None:
        """Text already separated by a space is left alone."""
        result = convert_node(first_element("<p>This is <strong>bold</strong> text</p>"))
        assert _values(result) == ["This is ", "bold", " text"]

    def test_space_added_before_link(self, first_element) -> None:
        """Text right before a link gets a trailing space."""
        result = convert_node(
            first_element('<p>Visit<a href="https://example.com">site</a>.</p>')
        )
        assert result[0] == TextNode(value="Visit ")
        assert isinstance(result[1], LinkNode)
        assert result[2] == TextNode(value=".")

    def test_text_node_argument(self) -> None:
        """A text node converts to a single-element list."""
        text = next(iter(build_document_root("plain").children))
        assert convert_node(text) == [TextNode(value="plain")]

    def test_wraps_unexpected_failures(self, first_element, monkeypatch) -> None:
        """Foreign exceptions become ConversionError."""

        def _boom(results):
            raise RuntimeError("kaput")

        monkeypatch.setattr("html2richtext.converter.normalize_siblings", _boom)
        with pytest.raises(ConversionError, match="Failed to convert node: kaput"):
            convert_node(first_element("<p>x</p>"))


class TestNormalizeSiblings:
    """Tests for normalize_siblings function."""

    def test_trims_outer_edges(self) -> None:
        """The first and last text lose outer whitespace."""
        result = normalize_siblings([TextNode(value="  a "), TextNode(value=" b  ")])
        assert _values(result) == ["a ", " b"]

    def test_drops_blank_text(self) -> None:
        """Text that trims to nothing disappears, even when marked."""
        result = normalize_siblings(
            [TextNode(value="a"), TextNode(value="   ", bold=True), TextNode(value="b")]
        )
        assert result == [TextNode(value="a "), TextNode(value="b")]

    def test_does_not_mutate_input(self) -> None:
        """Updated values are copies."""
        first = TextNode(value="a")
        normalize_siblings([first, TextNode(value="b")])
        assert first.value == "a"

    def test_keeps_marks_when_adding_space(self) -> None:
        """Spacing fixes preserve marks."""
        result = normalize_siblings(
            [TextNode(value="x", italic=True), TextNode(value="y", bold=True)]
        )
        assert result[0] == TextNode(value="x ", italic=True)

    def test_empty_sequence(self) -> None:
        """Nothing in, nothing out."""
        assert normalize_siblings([]) == []
