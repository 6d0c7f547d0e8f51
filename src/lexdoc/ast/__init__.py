#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/__init__.py
"""Typed document tree for rich-text editor states.

The module consists of several components:

- shape: classification of raw values as editor documents
- canonical: the normalization cascade over plain mappings
- builder: construction of typed nodes from canonical mappings
- normalize: the ``normalize`` entry point (canonical + builder)
- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal
- serialization: conversion of typed nodes back to editor mappings
- document_utils: heading outline extraction
- payload: conversion of CMS payload values into documents

Examples
--------
Basic usage:

    >>> from lexdoc.ast import normalize, Paragraph
    >>> state = normalize('{"nodes": [{"type": "paragraph", "children": []}]}')
    >>> isinstance(state.root.children[0], Paragraph)
    True

"""

from lexdoc.ast.builder import DocumentBuilder
from lexdoc.ast.canonical import canonicalize
from lexdoc.ast.document_utils import HeadingEntry, extract_headings
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
    get_node_children,
)
from lexdoc.ast.normalize import normalize
from lexdoc.ast.payload import convert_payload_data
from lexdoc.ast.serialization import ast_to_dict, ast_to_json, editor_state_to_dict
from lexdoc.ast.shape import detect_format, is_document
from lexdoc.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Root",
    "Paragraph",
    "Heading",
    "List",
    "ListItem",
    "Quote",
    "CodeBlock",
    "Link",
    "Block",
    "Text",
    "Image",
    "HorizontalRule",
    "LineBreak",
    "UnknownNode",
    "EditorState",
    "get_node_children",
    # Visitors
    "NodeVisitor",
    # Normalization
    "is_document",
    "detect_format",
    "canonicalize",
    "DocumentBuilder",
    "normalize",
    "convert_payload_data",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "editor_state_to_dict",
    # Outline
    "HeadingEntry",
    "extract_headings",
]
