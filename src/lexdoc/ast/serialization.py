#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/serialization.py
"""Serialization of typed nodes back to editor-state mappings.

The output uses the editor's own vocabulary (``type``, ``children``,
``listType``, ``tag``, ``url``, ``newTab`` ...) rather than a separate
schema, so a serialized tree is itself a valid editor state and
normalizing it again yields an equal tree.

Examples
--------
Serialize a tree to JSON:

    >>> from lexdoc.ast import Paragraph, Root, Text
    >>> from lexdoc.ast.serialization import ast_to_json
    >>>
    >>> root = Root(children=[Paragraph(children=[Text(text="Hi", bold=True)])])
    >>> print(ast_to_json(root))
    {"type":"root","children":[{"type":"paragraph","children":[{"type":"text","text":"Hi","bold":true}]}],...}

"""

from __future__ import annotations

import json
from typing import Any, Callable

from lexdoc.ast.nodes import (
    Block,
    CodeBlock,
    EditorState,
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
)
from lexdoc.constants import (
    CHECK_LIST_TYPE,
    DEFAULT_MAX_DEPTH,
    NODE_BLOCK,
    NODE_CODE,
    NODE_HEADING,
    NODE_HORIZONTAL_RULE,
    NODE_IMAGE,
    NODE_LINE_BREAK,
    NODE_LINK,
    NODE_LIST,
    NODE_LIST_ITEM,
    NODE_PARAGRAPH,
    NODE_QUOTE,
    NODE_ROOT,
    NODE_TEXT,
)


class _Serializer:
    """Depth-bounded serializer for one call of ``ast_to_dict``.

    Element serializers return their mapping with an empty ``children``
    list and queue the child nodes in ``_pending``; ``serialize`` fills the
    queued lists from an explicit stack, so deep trees do not recurse.

    """

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        self._pending: list[tuple[list[Node], int, list[dict[str, Any]]]] = []

    def serialize(self, node: Node) -> dict[str, Any]:
        result = self.node(node, 0)
        while self._pending:
            children, depth, target = self._pending.pop()
            target.extend(self.node(child, depth) for child in children)
        return result

    def node(self, node: Node, depth: int) -> dict[str, Any]:
        serializer = _SERIALIZATION_DISPATCH.get(type(node))
        if serializer is None:
            raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")
        return serializer(self, node, depth)

    def children(self, children: list[Node], depth: int) -> list[dict[str, Any]]:
        target: list[dict[str, Any]] = []
        if children and depth + 1 <= self.max_depth:
            self._pending.append((children, depth + 1, target))
        return target

    def element(self, node: Any, node_type: str, depth: int) -> dict[str, Any]:
        result: dict[str, Any] = dict(node.metadata)
        result["type"] = node_type
        result["children"] = self.children(node.children, depth)
        return result

    def root(self, node: Root, depth: int) -> dict[str, Any]:
        result = self.element(node, NODE_ROOT, depth)
        result["direction"] = node.direction
        result["format"] = node.format
        result["indent"] = node.indent
        result["version"] = node.version
        return result

    def heading(self, node: Heading, depth: int) -> dict[str, Any]:
        result = self.element(node, NODE_HEADING, depth)
        if node.level is not None:
            result["tag"] = f"h{node.level}"
        return result

    def list_node(self, node: List, depth: int) -> dict[str, Any]:
        result = self.element(node, NODE_LIST, depth)
        if node.checklist:
            result["listType"] = CHECK_LIST_TYPE
        else:
            result["listType"] = "number" if node.ordered else "bullet"
        result["tag"] = "ol" if node.ordered else "ul"
        return result

    def list_item(self, node: ListItem, depth: int) -> dict[str, Any]:
        result = self.element(node, NODE_LIST_ITEM, depth)
        if node.checked is not None:
            result["checked"] = node.checked
        return result

    def code_block(self, node: CodeBlock, depth: int) -> dict[str, Any]:
        result = self.element(node, NODE_CODE, depth)
        if node.language is not None:
            result["language"] = node.language
        return result

    def link(self, node: Link, depth: int) -> dict[str, Any]:
        result = self.element(node, NODE_LINK, depth)
        if node.url is not None:
            result["url"] = node.url
        result["newTab"] = node.new_tab
        return result

    def block(self, node: Block, depth: int) -> dict[str, Any]:
        result = self.element(node, NODE_BLOCK, depth)
        if node.block_type:
            result["blockType"] = node.block_type
        result["fields"] = dict(node.fields)
        if node.content is not None and depth + 1 <= self.max_depth:
            result["content"] = {"root": self.root(node.content, depth + 1)}
        return result

    def text(self, node: Text, depth: int) -> dict[str, Any]:
        result: dict[str, Any] = dict(node.metadata)
        result["type"] = NODE_TEXT
        result["text"] = node.text
        for mark in ("bold", "italic", "underline", "strikethrough", "code"):
            if getattr(node, mark):
                result[mark] = True
        return result

    def image(self, node: Image, depth: int) -> dict[str, Any]:
        result: dict[str, Any] = dict(node.metadata)
        result["type"] = NODE_IMAGE
        result["src"] = node.src
        result["alt"] = node.alt
        if node.width is not None:
            result["width"] = node.width
        if node.height is not None:
            result["height"] = node.height
        return result

    def leaf(self, node: Node, node_type: str) -> dict[str, Any]:
        result: dict[str, Any] = dict(node.metadata)
        result["type"] = node_type
        return result

    def unknown(self, node: UnknownNode, depth: int) -> dict[str, Any]:
        result: dict[str, Any] = dict(node.metadata)
        if node.type:
            result["type"] = node.type
        if node.children is not None:
            result["children"] = self.children(node.children, depth)
        return result


# Dispatch table mapping node classes to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[_Serializer, Any, int], dict[str, Any]]] = {
    Root: _Serializer.root,
    Paragraph: lambda s, n, d: s.element(n, NODE_PARAGRAPH, d),
    Heading: _Serializer.heading,
    List: _Serializer.list_node,
    ListItem: _Serializer.list_item,
    Quote: lambda s, n, d: s.element(n, NODE_QUOTE, d),
    CodeBlock: _Serializer.code_block,
    Link: _Serializer.link,
    Block: _Serializer.block,
    Text: _Serializer.text,
    Image: _Serializer.image,
    HorizontalRule: lambda s, n, d: s.leaf(n, NODE_HORIZONTAL_RULE),
    LineBreak: lambda s, n, d: s.leaf(n, NODE_LINE_BREAK),
    UnknownNode: _Serializer.unknown,
}


def ast_to_dict(node: Node, max_depth: int = DEFAULT_MAX_DEPTH) -> dict[str, Any]:
    """Convert a node to an editor-state style mapping.

    Parameters
    ----------
    node : Node
        The node to convert
    max_depth : int, default 200
        Children nested deeper than this are omitted

    Returns
    -------
    dict
        Mapping using the editor's keys; unmodelled source keys from
        ``metadata`` come first

    Raises
    ------
    ValueError
        If ``node`` is not one of the lexdoc node classes

    Examples
    --------
    >>> from lexdoc.ast import Text
    >>> ast_to_dict(Text(text="Hello", italic=True))
    {'type': 'text', 'text': 'Hello', 'italic': True}

    """
    return _Serializer(max_depth).serialize(node)


def editor_state_to_dict(state: EditorState, max_depth: int = DEFAULT_MAX_DEPTH) -> dict[str, Any]:
    """Convert an ``EditorState`` to a mapping, sibling keys included."""
    result = dict(state.extra)
    result["root"] = ast_to_dict(state.root, max_depth=max_depth)
    return result


def ast_to_json(node: Node | EditorState, indent: int | None = None) -> str:
    """Serialize a node or editor state to a JSON string.

    Parameters
    ----------
    node : Node or EditorState
        What to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text. Non-JSON values found in metadata are written with
        ``str()``.

    """
    data = editor_state_to_dict(node) if isinstance(node, EditorState) else ast_to_dict(node)
    separators = (",", ":") if indent is None else None
    return json.dumps(data, indent=indent, ensure_ascii=False, separators=separators, default=str)


__all__ = ["ast_to_dict", "ast_to_json", "editor_state_to_dict"]
