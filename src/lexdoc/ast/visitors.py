#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers and extractors subclass ``NodeVisitor`` and implement one
``visit_*`` method per node class. The dispatch is closed: every node class
in ``lexdoc.ast.nodes`` has exactly one visit method, and ``visit_unknown``
is the single arm for editor node types that are not modelled.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from lexdoc.ast.nodes import (
    Block,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Quote,
    Root,
    Text,
    UnknownNode,
    get_node_children,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Examples
    --------
    Visitor that counts text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def generic_visit(self, node):
        ...         for child in get_node_children(node):
        ...             child.accept(self)
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        ...     visit_root = visit_paragraph = visit_heading = generic_visit
        ...     # ... and so on for the remaining node classes

    """

    @abstractmethod
    def visit_root(self, node: Root) -> Any:
        """Visit a Root node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_quote(self, node: Quote) -> Any:
        """Visit a Quote node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    def visit_unknown(self, node: UnknownNode) -> Any:
        """Visit a node whose type is not modelled.

        The default delegates to ``generic_visit``.

        Parameters
        ----------
        node : UnknownNode
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Visit the children of a node.

        Parameters
        ----------
        node : Node
            The node whose children are visited

        Returns
        -------
        list
            Results of visiting each child

        """
        return [child.accept(self) for child in get_node_children(node)]
