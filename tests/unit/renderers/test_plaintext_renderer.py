#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_plaintext_renderer.py
"""Unit tests for PlainTextRenderer.

Tests cover:
- Newlines after paragraphs and headings
- List item prefixes
- Newline collapsing
- Nodes that contribute no text

"""

import pytest

from lexdoc.ast import (
    Block,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Quote,
    Root,
    Text,
    UnknownNode,
)
from lexdoc.exceptions import InvalidOptionsError
from lexdoc.options import HtmlRendererOptions, PlainTextOptions
from lexdoc.renderers.plaintext import PlainTextRenderer


def render(*children, **options):
    """Render top-level nodes to plain text."""
    renderer = PlainTextRenderer(PlainTextOptions(**options))
    return renderer.render_to_string(Root(children=list(children)))


@pytest.mark.unit
class TestPlainTextRendering:
    """Tests for plain text extraction."""

    def test_empty_document(self):
        """Test that an empty document gives an empty string."""
        assert render() == ""

    def test_heading_and_paragraph(self):
        """Test that headings and paragraphs end with a newline."""
        result = render(
            Heading(level=1, children=[Text(text="Title")]),
            Paragraph(children=[Text(text="Body "), Text(text="bold", bold=True)]),
        )
        assert result == "Title\nBody bold\n"

    def test_text_is_not_escaped(self):
        """Test that plain text keeps special characters."""
        assert render(Paragraph(children=[Text(text="a < b & c")])) == "a < b & c\n"

    def test_list_items(self):
        """Test the bullet prefix on list items."""
        node = List(children=[ListItem(children=[Text(text="One")]), ListItem(children=[Text(text="Two")])])
        assert render(node) == "• One• Two"

    def test_list_items_with_paragraphs(self):
        """Test list items that wrap their text in paragraphs."""
        node = List(
            children=[
                ListItem(children=[Paragraph(children=[Text(text="One")])]),
                ListItem(children=[Paragraph(children=[Text(text="Two")])]),
            ]
        )
        assert render(node) == "• One\n• Two\n"

    def test_custom_prefix(self):
        """Test the list_item_prefix option."""
        node = List(children=[ListItem(children=[Paragraph(children=[Text(text="One")])])])
        assert render(node, list_item_prefix="- ") == "- One\n"

    def test_newlines_collapsed(self):
        """Test that runs of newlines collapse to one."""
        result = render(
            Paragraph(children=[Text(text="a")]),
            Paragraph(),
            Paragraph(children=[Text(text="b\n\n\nc")]),
        )
        assert result == "a\nb\nc\n"

    def test_newlines_kept_without_collapsing(self):
        """Test the collapse_newlines option."""
        assert render(Paragraph(), Paragraph(), collapse_newlines=False) == "\n\n"

    def test_line_break(self):
        """Test that line breaks become newlines."""
        assert render(Quote(children=[Text(text="a"), LineBreak(), Text(text="b")])) == "a\nb"

    def test_container_nodes_pass_through(self):
        """Test links, quotes, code and block children."""
        result = render(
            Paragraph(children=[Text(text="See "), Link(url="/", children=[Text(text="docs")])]),
            CodeBlock(children=[Text(text="x = 1")]),
            Block(block_type="cta", children=[Paragraph(children=[Text(text="Go")])]),
            UnknownNode(type="mystery-widget", children=[Text(text="hi")]),
        )
        assert result == "See docs\nx = 1Go\nhi"

    def test_silent_nodes(self):
        """Test nodes that contribute no text."""
        result = render(
            Image(src="a.png", alt="Alt text"),
            HorizontalRule(),
            UnknownNode(type="upload"),
            Block(block_type="banner", content=Root(children=[Paragraph(children=[Text(text="x")])])),
        )
        assert result == ""

    def test_wrong_options_type(self):
        """Test that HTML options are rejected."""
        with pytest.raises(InvalidOptionsError):
            PlainTextRenderer(HtmlRendererOptions())

    def test_depth_guard(self):
        """Test that nodes deeper than max_depth are skipped."""
        node = Paragraph(children=[Paragraph(children=[Text(text="deep")])])
        assert render(node, max_depth=2) == "\n"
