#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/nodes.py
"""AST node classes for editor documents.

This module defines the canonical tree that every editor state is normalized
into. Each class corresponds to one node type produced by the rich-text
editor; anything the editor emits that is not modelled here becomes an
``UnknownNode`` so that renderers can pass through its children.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Element nodes (own an ordered ``children`` list):
    - Root, Paragraph, Heading, List, ListItem, Quote, CodeBlock, Link, Block

Leaf nodes:
    - Text, Image, HorizontalRule, LineBreak

Fallback:
    - UnknownNode (children is None when the source node had no children array)

Every node carries a ``metadata`` dict holding the source keys that are not
modelled explicitly (for example the editor's ``detail``, ``mode`` or
``style`` on text nodes). Serialization writes them back so that
re-normalizing a serialized tree yields an equal tree.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from lexdoc.constants import (
    DEFAULT_ROOT_DIRECTION,
    DEFAULT_ROOT_FORMAT,
    DEFAULT_ROOT_INDENT,
    DEFAULT_ROOT_VERSION,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
)


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Unmodelled source attributes of this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Element Nodes
# ============================================================================


@dataclass
class Root(Node):
    """Root node of a document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes of the document
    direction : str or None, default = None
        Text direction recorded by the editor ("ltr", "rtl")
    format : str, default = ""
        Editor alignment/format string
    indent : int, default = 0
        Editor indentation level
    version : int, default = 1
        Editor node version
    metadata : dict, default = empty dict
        Unmodelled root attributes

    """

    children: list[Node] = field(default_factory=list)
    direction: Optional[str] = DEFAULT_ROOT_DIRECTION
    format: str = DEFAULT_ROOT_FORMAT
    indent: int = DEFAULT_ROOT_INDENT
    version: int = DEFAULT_ROOT_VERSION
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        """Node type discriminator, always ``"root"``."""
        return "root"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_root``."""
        return visitor.visit_root(self)


@dataclass
class Paragraph(Node):
    """Paragraph containing inline nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int or None, default = None
        Heading level clamped to 1..6, or None when the source did not say.
        Renderers and the outline extractor apply their own defaults.
    children : list of Node, default = empty list
        Inline nodes of the heading

    """

    level: Optional[int] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)

    def effective_level(self, default: int) -> int:
        """Return the level to emit: ``default`` when unset, clamped to 1..6."""
        level = self.level if self.level is not None else default
        return min(max(level, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL)


@dataclass
class List(Node):
    """List node (ordered, bulleted or checklist).

    Parameters
    ----------
    ordered : bool, default = False
        True for numbered lists
    checklist : bool, default = False
        True for the editor's "check" lists; items may carry a checked flag
    children : list of Node, default = empty list
        Normally ListItem nodes, but any node is accepted

    """

    ordered: bool = False
    checklist: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline content and nested lists
    checked : bool or None, default = None
        Checkbox state for checklist items

    """

    children: list[Node] = field(default_factory=list)
    checked: Optional[bool] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class Quote(Node):
    """Block quote node."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_quote``."""
        return visitor.visit_quote(self)


@dataclass
class CodeBlock(Node):
    """Code element whose children are text nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Text and line break nodes making up the code
    language : str or None, default = None
        Language recorded by the editor

    """

    children: list[Node] = field(default_factory=list)
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass
class Link(Node):
    """Hyperlink wrapping inline nodes.

    Parameters
    ----------
    url : str or None, default = None
        Destination; None when the source had none (rendered as ``#``)
    new_tab : bool, default = False
        Open the link in a new browsing context
    children : list of Node, default = empty list
        Link text nodes

    """

    url: Optional[str] = None
    new_tab: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Block(Node):
    """Custom block node with a polymorphic payload.

    Blocks are how the CMS embeds banners, media and code snippets into
    rich text. The payload shape depends on ``block_type``; unknown block
    types render their children.

    Parameters
    ----------
    block_type : str, default = ""
        Block discriminator ("banner", "media", "code", ...)
    fields : dict, default = empty dict
        Payload nested under the source node's ``fields`` key
    children : list of Node, default = empty list
        Child nodes of the block
    content : Root or None, default = None
        Nested document found in the payload's ``content`` key, normalized
    metadata : dict, default = empty dict
        Top-level payload keys other than the modelled ones

    """

    block_type: str = ""
    fields: dict[str, Any] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    content: Optional[Root] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a payload value, preferring top-level keys over ``fields``.

        Parameters
        ----------
        key : str
            Payload key
        default : Any, default None
            Value returned when neither location has the key

        Returns
        -------
        Any
            The payload value or ``default``

        """
        if key in self.metadata:
            return self.metadata[key]
        return self.fields.get(key, default)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block``."""
        return visitor.visit_block(self)


# ============================================================================
# Leaf Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Text run with independent formatting marks.

    Parameters
    ----------
    text : str, default = ""
        Raw, unescaped text
    bold, italic, underline, strikethrough, code : bool, default = False
        Formatting marks. They are flags, not a hierarchy; the HTML renderer
        nests them in a fixed order.

    """

    text: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    code: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    src : str, default = ""
        Image URL
    alt : str, default = ""
        Alternative text
    width : int, float, str or None, default = None
        Optional width attribute value
    height : int, float, str or None, default = None
        Optional height attribute value

    """

    src: str = ""
    alt: str = ""
    width: Optional[int | float | str] = None
    height: Optional[int | float | str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule (thematic break)."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_horizontal_rule``."""
        return visitor.visit_horizontal_rule(self)


@dataclass
class LineBreak(Node):
    """Hard line break inside a paragraph."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self)


# ============================================================================
# Fallback
# ============================================================================


@dataclass
class UnknownNode(Node):
    """Node whose type is not modelled.

    Renderers output the children when there are any and nothing otherwise,
    which keeps documents written by newer editor versions renderable.

    Parameters
    ----------
    type : str, default = ""
        Source type string ("" when the source had none)
    children : list of Node or None, default = None
        Children, or None when the source node had no children array

    """

    type: str = ""
    children: Optional[list[Node]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unknown``."""
        return visitor.visit_unknown(self)


@dataclass
class EditorState:
    """Normalized editor state returned by ``normalize``.

    Parameters
    ----------
    root : Root
        The canonical document tree
    extra : dict, default = empty dict
        Sibling keys of ``root`` found in the input, kept as-is

    """

    root: Root = field(default_factory=Root)
    extra: dict[str, Any] = field(default_factory=dict)


ELEMENT_NODE_TYPES = (Root, Paragraph, Heading, List, ListItem, Quote, CodeBlock, Link, Block)
LEAF_NODE_TYPES = (Text, Image, HorizontalRule, LineBreak)


def get_node_children(node: Node) -> list[Node]:
    """Get the child nodes of a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes (empty list for leaves and childless unknown nodes)

    Examples
    --------
    >>> paragraph = Paragraph(children=[Text(text="Hello")])
    >>> len(get_node_children(paragraph))
    1

    """
    if isinstance(node, ELEMENT_NODE_TYPES):
        return list(node.children)

    if isinstance(node, UnknownNode) and node.children is not None:
        return list(node.children)

    return []
