#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_builder.py
"""Unit tests for DocumentBuilder.

Tests cover:
- Building every modelled node type from editor mappings
- Mark flags and the integer format bitmask
- Heading level parsing and clamping
- List, link, image and block attribute coercion
- Unknown nodes and the depth cap

"""

import logging

import pytest
from utils import element, nested_paragraphs, text_node

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
from lexdoc.ast.builder import DocumentBuilder
from lexdoc.ast.canonical import canonicalize
from lexdoc.constants import ROOT_SCALAR_KEYS


def build(raw):
    """Build a single node at depth 1."""
    return DocumentBuilder().build_node(raw, 1)


@pytest.mark.unit
class TestTextNodes:
    """Tests for text and tab nodes."""

    def test_plain_text(self):
        """Test a text node without marks."""
        node = build(text_node("Hello"))
        assert isinstance(node, Text)
        assert node.text == "Hello"
        assert not any([node.bold, node.italic, node.underline, node.strikethrough, node.code])

    def test_boolean_marks(self):
        """Test marks given as boolean flags."""
        node = build(text_node("x", bold=True, italic=True, code=True))
        assert node.bold and node.italic and node.code
        assert not node.underline and not node.strikethrough

    @pytest.mark.parametrize(
        "fmt,mark",
        [(1, "bold"), (2, "italic"), (4, "strikethrough"), (8, "underline"), (16, "code")],
    )
    def test_format_bits(self, fmt, mark):
        """Test each bit of the editor format bitmask."""
        node = build(text_node("x", format=fmt))
        assert getattr(node, mark) is True

    def test_combined_format_bits(self):
        """Test a bitmask with several marks."""
        node = build(text_node("x", format=1 | 2 | 8))
        assert (node.bold, node.italic, node.underline, node.strikethrough, node.code) == (
            True,
            True,
            True,
            False,
            False,
        )

    def test_flags_and_bits_combine(self):
        """Test that a mark is set by either the flag or the bit."""
        node = build(text_node("x", format=1, italic=True, bold=False))
        assert node.bold and node.italic

    def test_non_integer_format_is_ignored(self):
        """Test that string or boolean formats set no marks."""
        assert not build(text_node("x", format="bold")).bold
        assert not build(text_node("x", format=True)).bold

    def test_editor_keys_kept_in_metadata(self):
        """Test that unmodelled text keys are kept."""
        node = build(text_node("x", format=1))
        assert node.metadata == {"detail": 0, "mode": "normal", "style": ""}

    @pytest.mark.parametrize("raw,expected", [(42, "42"), (1.5, "1.5"), (True, "true"), (None, ""), ({}, "")])
    def test_text_coercion(self, raw, expected):
        """Test that non-string text values are coerced."""
        assert build({"type": "text", "text": raw}).text == expected

    def test_tab(self):
        """Test that tab nodes become tab text."""
        node = build({"type": "tab", "detail": 2, "format": 0, "mode": "normal", "style": "", "version": 1})
        assert isinstance(node, Text)
        assert node.text == "\t"

    def test_tab_with_text(self):
        """Test that a tab node keeps explicit text."""
        assert build({"type": "tab", "text": "    "}).text == "    "


@pytest.mark.unit
class TestHeadings:
    """Tests for heading level parsing."""

    @pytest.mark.parametrize(
        "attrs,level",
        [
            ({"tag": "h3"}, 3),
            ({"tag": "H2"}, 2),
            ({"tag": "4"}, 4),
            ({"tag": "h9"}, 6),
            ({"tag": "h0"}, 1),
            ({"level": 5}, 5),
            ({"level": 12}, 6),
            ({"level": -3}, 1),
            ({"level": "h2"}, 2),
            ({"tag": "title", "level": 3}, 3),
            ({"tag": "h2", "level": 5}, 2),
        ],
    )
    def test_levels(self, attrs, level):
        """Test levels from tag and level fields, clamped to 1..6."""
        node = build(element("heading", text_node("T"), **attrs))
        assert isinstance(node, Heading)
        assert node.level == level

    @pytest.mark.parametrize("attrs", [{}, {"tag": "title"}, {"level": 0}, {"level": True}, {"tag": ""}])
    def test_missing_level(self, attrs):
        """Test headings without a usable level."""
        assert build(element("heading", **attrs)).level is None

    def test_children(self):
        """Test that heading children are built."""
        node = build(element("heading", text_node("Title"), tag="h1"))
        assert node.children == [Text(text="Title", metadata={"detail": 0, "mode": "normal", "style": ""})]


@pytest.mark.unit
class TestLists:
    """Tests for list and list item nodes."""

    @pytest.mark.parametrize(
        "attrs",
        [{"listType": "number"}, {"listType": "ordered"}, {"tag": "ol"}, {"ordered": True}, {"ordered": "number"}],
    )
    def test_ordered(self, attrs):
        """Test the representations of an ordered list."""
        node = build(element("list", **attrs))
        assert isinstance(node, List)
        assert node.ordered is True

    @pytest.mark.parametrize("attrs", [{}, {"listType": "bullet"}, {"tag": "ul"}, {"ordered": "yes"}])
    def test_unordered(self, attrs):
        """Test lists that are not ordered."""
        assert build(element("list", **attrs)).ordered is False

    def test_checklist(self):
        """Test a check list and its items."""
        node = build(
            element(
                "list",
                element("listitem", text_node("Done"), checked=True),
                element("listitem", text_node("Todo"), checked=False),
                listType="check",
                tag="ul",
            )
        )
        assert node.checklist is True
        assert node.ordered is False
        assert [item.checked for item in node.children] == [True, False]

    def test_non_boolean_checked(self):
        """Test that only booleans are kept as the checked flag."""
        node = build(element("listitem", checked="yes", value=1))
        assert isinstance(node, ListItem)
        assert node.checked is None
        assert node.metadata == {"value": 1}


@pytest.mark.unit
class TestLinks:
    """Tests for link and autolink nodes."""

    def test_top_level_url(self):
        """Test a link with url and newTab at the top level."""
        node = build(element("link", text_node("x"), url="https://example.com", newTab=True))
        assert isinstance(node, Link)
        assert node.url == "https://example.com"
        assert node.new_tab is True

    def test_fields_url(self):
        """Test a link whose url and newTab live in fields."""
        node = build(element("link", fields={"url": "/about", "newTab": True, "linkType": "custom"}))
        assert node.url == "/about"
        assert node.new_tab is True
        assert node.metadata["fields"]["linkType"] == "custom"

    def test_top_level_new_tab_wins(self):
        """Test that a top-level newTab overrides the one in fields."""
        node = build(element("link", newTab=False, fields={"url": "/a", "newTab": True}))
        assert node.new_tab is False

    def test_missing_url(self):
        """Test that a link without url keeps None."""
        node = build(element("link", text_node("x")))
        assert node.url is None
        assert node.new_tab is False

    def test_autolink(self):
        """Test that autolink nodes are links."""
        node = build(element("autolink", text_node("example.com"), url="https://example.com"))
        assert isinstance(node, Link)
        assert node.url == "https://example.com"


@pytest.mark.unit
class TestLeafNodes:
    """Tests for images, rules and line breaks."""

    def test_image(self):
        """Test an image with all attributes."""
        node = build({"type": "image", "src": "a.png", "alt": "Logo", "width": 120, "height": "40"})
        assert node == Image(src="a.png", alt="Logo", width=120, height="40")

    def test_image_alt_text(self):
        """Test the editor's altText key."""
        assert build({"type": "image", "src": "a.png", "altText": "Logo"}).alt == "Logo"

    @pytest.mark.parametrize("width", [0, "", True, None, [100]])
    def test_image_dimension_dropped(self, width):
        """Test that unusable dimensions are dropped."""
        assert build({"type": "image", "src": "a.png", "width": width}).width is None

    def test_image_defaults(self):
        """Test an image without attributes."""
        assert build({"type": "image"}) == Image()

    def test_horizontal_rule(self):
        """Test a horizontal rule keeps its editor keys."""
        node = build({"type": "horizontalrule", "version": 1})
        assert node == HorizontalRule(metadata={"version": 1})

    def test_line_break(self):
        """Test a line break."""
        assert isinstance(build({"type": "linebreak"}), LineBreak)


@pytest.mark.unit
class TestElements:
    """Tests for paragraphs, quotes and code elements."""

    def test_paragraph(self):
        """Test a paragraph with editor keys."""
        node = build(element("paragraph", text_node("x"), direction="ltr", indent=0))
        assert isinstance(node, Paragraph)
        assert node.metadata == {"direction": "ltr", "indent": 0}

    def test_quote(self):
        """Test a quote."""
        assert isinstance(build(element("quote", text_node("x"))), Quote)

    def test_code(self):
        """Test a code element with a language."""
        node = build(element("code", text_node("print(1)"), language="python"))
        assert isinstance(node, CodeBlock)
        assert node.language == "python"

    def test_code_without_language(self):
        """Test that an empty language is None."""
        assert build(element("code", language="")).language is None

    def test_non_mapping_children_are_skipped(self):
        """Test that strings and nulls in children are skipped."""
        node = build(element("paragraph", "stray", None, text_node("kept"), 5))
        assert [child.text for child in node.children] == ["kept"]

    def test_non_list_children(self):
        """Test that a non-array children value gives no children."""
        assert build({"type": "paragraph", "children": "oops"}).children == []


@pytest.mark.unit
class TestBlocks:
    """Tests for custom block nodes."""

    def test_block_type_from_fields(self):
        """Test a block whose type lives in fields."""
        node = build({"type": "block", "fields": {"blockType": "code", "code": "x = 1", "language": "python"}})
        assert isinstance(node, Block)
        assert node.block_type == "code"
        assert node.get("code") == "x = 1"

    def test_top_level_block_type_wins(self):
        """Test that a top-level blockType is preferred."""
        node = build({"type": "block", "blockType": "banner", "fields": {"blockType": "media"}})
        assert node.block_type == "banner"

    def test_empty_block_type_falls_back(self):
        """Test that an empty top-level blockType is skipped."""
        node = build({"type": "block", "blockType": "", "fields": {"blockType": "media"}})
        assert node.block_type == "media"

    def test_top_level_payload_wins(self):
        """Test payload lookup prefers top-level keys."""
        node = build({"type": "block", "backgroundColor": "#fff", "fields": {"backgroundColor": "#000"}})
        assert node.get("backgroundColor") == "#fff"
        assert node.get("missing", "default") == "default"

    def test_document_content(self):
        """Test that document content is normalized into a Root."""
        content = {"root": {"children": [element("paragraph", text_node("Inside"))]}}
        node = build({"type": "block", "blockType": "banner", "content": content})
        assert isinstance(node.content, Root)
        assert isinstance(node.content.children[0], Paragraph)
        assert "content" not in node.metadata

    def test_legacy_document_content_in_fields(self):
        """Test document content in any supported shape, found in fields."""
        node = build({"type": "block", "fields": {"blockType": "banner", "content": {"nodes": [element("quote")]}}})
        assert isinstance(node.content.children[0], Quote)

    def test_non_document_content_is_kept(self):
        """Test that plain content stays in the payload."""
        node = build({"type": "block", "content": "Just text"})
        assert node.content is None
        assert node.get("content") == "Just text"

    def test_block_children(self):
        """Test that block children are built."""
        node = build(element("block", text_node("Go"), blockType="cta"))
        assert [child.text for child in node.children] == ["Go"]

    def test_non_mapping_fields(self):
        """Test that a null fields value gives an empty payload."""
        node = build({"type": "block", "fields": None})
        assert node.fields == {}
        assert node.block_type == ""


@pytest.mark.unit
class TestUnknownNodes:
    """Tests for unmodelled node types."""

    def test_unknown_with_children(self):
        """Test an unknown node with children."""
        node = build(element("mystery-widget", text_node("hi"), color="red"))
        assert isinstance(node, UnknownNode)
        assert node.type == "mystery-widget"
        assert [child.text for child in node.children] == ["hi"]
        assert node.metadata == {"color": "red"}

    def test_unknown_without_children(self):
        """Test that children stay None when the source has no array."""
        node = build({"type": "upload", "value": "abc"})
        assert node.children is None

    def test_unknown_with_empty_children(self):
        """Test that an empty children array is kept as a list."""
        assert build({"type": "upload", "children": []}).children == []

    @pytest.mark.parametrize("raw", [{}, {"type": 5}, {"type": None, "text": "x"}])
    def test_missing_type(self, raw):
        """Test that nodes without a string type are unknown."""
        node = build(raw)
        assert isinstance(node, UnknownNode)
        assert node.type == ""


@pytest.mark.unit
class TestRootAndDepth:
    """Tests for root fields and the depth cap."""

    def test_root_fields(self):
        """Test root scalar coercion and metadata."""
        builder = DocumentBuilder()
        root = builder.build_root(
            {"type": "root", "children": [], "direction": 5, "format": "left", "indent": "2", "version": 1.0, "x": 1},
            0,
        )
        assert root.direction is None
        assert root.format == "left"
        assert root.indent == 2
        assert root.version == 1
        assert root.metadata == {"x": 1}

    def test_root_scalar_keys_are_consumed(self):
        """Test that every root scalar key is read into a field, not metadata."""
        raw = {"type": "root", "children": [], "textStyle": "x"}
        raw.update({key: None for key in ROOT_SCALAR_KEYS})
        root = DocumentBuilder().build_root(raw, 0)
        assert root.metadata == {"textStyle": "x"}

        canonical = canonicalize({"root": {"children": []}})["root"]
        assert set(ROOT_SCALAR_KEYS) <= set(canonical)

    def test_build_state_keeps_siblings(self):
        """Test that sibling keys of root become extra."""
        state = DocumentBuilder().build_state({"root": {"children": []}, "lastSaved": 1})
        assert state.extra == {"lastSaved": 1}

    def test_depth_cap(self, caplog):
        """Test that nodes past max_depth are dropped with one warning."""
        builder = DocumentBuilder(max_depth=3)
        with caplog.at_level(logging.WARNING, logger="lexdoc"):
            state = builder.build_state(nested_paragraphs(10))

        node = state.root
        for _ in range(3):
            assert len(node.children) == 1
            node = node.children[0]
            assert isinstance(node, Paragraph)
        assert node.children == []

        assert builder.truncated is True
        warnings = [r for r in caplog.records if "nesting exceeds" in r.getMessage()]
        assert len(warnings) == 1

    def test_within_depth_not_truncated(self):
        """Test that shallow documents are not flagged."""
        builder = DocumentBuilder(max_depth=3)
        builder.build_state(nested_paragraphs(2))
        assert builder.truncated is False
