#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/renderers/plaintext.py
"""Plain text rendering from AST.

This module provides the PlainTextRenderer class which extracts the text
of a normalized document, for email previews, search indexing and
similar uses. Formatting is dropped; paragraphs and headings end with a
newline and list items are prefixed with a bullet.

"""

from __future__ import annotations

from lexdoc.ast.nodes import (
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    ListItem,
    Node,
    Paragraph,
    Text,
    UnknownNode,
)
from lexdoc.ast.visitors import NodeVisitor
from lexdoc.options.plaintext import PlainTextOptions
from lexdoc.renderers.base import BaseRenderer, ChildContentMixin, Renderable
from lexdoc.utils.text import collapse_newlines


class PlainTextRenderer(NodeVisitor, ChildContentMixin, BaseRenderer):
    """Render a normalized document to plain text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text rendering options

    Examples
    --------
    Basic usage:

        >>> from lexdoc.ast import Heading, Paragraph, Root, Text
        >>> from lexdoc.renderers.plaintext import PlainTextRenderer
        >>> root = Root(children=[
        ...     Heading(level=1, children=[Text(text="Title")]),
        ...     Paragraph(children=[Text(text="Body")]),
        ... ])
        >>> PlainTextRenderer().render_to_string(root)
        'Title\\nBody\\n'

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "plaintext")
        options = options or PlainTextOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainTextOptions = options
        self._output: list[str] = []
        self._reset_depth()

    def render_to_string(self, doc: Renderable) -> str:
        """Render a document to plain text.

        Parameters
        ----------
        doc : EditorState or Node
            Normalized document, its root, or any subtree

        Returns
        -------
        str
            Plain text. With ``collapse_newlines`` every run of newlines is
            reduced to one; a trailing newline is kept.

        """
        root = self._resolve_root(doc)
        self._output = []
        self._reset_depth()

        root.accept(self)
        result = "".join(self._output)

        if self.options.collapse_newlines:
            result = collapse_newlines(result)
        return result

    def generic_visit(self, node: Node) -> None:
        """Render only the children of a node."""
        self._output.append(self._render_children(getattr(node, "children", None)))

    visit_root = generic_visit
    visit_list = generic_visit
    visit_quote = generic_visit
    visit_code_block = generic_visit
    visit_link = generic_visit
    visit_block = generic_visit

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node followed by a newline."""
        self._output.append(self._render_children(node.children) + "\n")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node followed by a newline."""
        self._output.append(self._render_children(node.children) + "\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node behind the list item prefix."""
        self._output.append(self.options.list_item_prefix + self._render_children(node.children))

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render the children of an unmodelled node, or nothing."""
        self._output.append(self._render_children(node.children))

    def visit_text(self, node: Text) -> None:
        """Render a Text node as its raw text."""
        self._output.append(node.text)

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node as a newline."""
        self._output.append("\n")

    def visit_image(self, node: Image) -> None:
        """Images contribute no text."""

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Horizontal rules contribute no text."""


__all__ = ["PlainTextRenderer"]
