#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/normalize.py
"""Normalization entry point.

``normalize`` is the composition of ``canonicalize`` (any value to a
canonical editor-state mapping) and ``DocumentBuilder`` (mapping to typed
nodes). Already-typed input is serialized first, so normalizing a
normalized tree yields an equal, freshly built tree.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from lexdoc.ast.builder import DocumentBuilder
from lexdoc.ast.canonical import canonicalize
from lexdoc.ast.nodes import EditorState, Node, Root
from lexdoc.ast.serialization import ast_to_dict, editor_state_to_dict
from lexdoc.options.base import NormalizeOptions

logger = logging.getLogger(__name__)


def _as_raw(value: Any, max_depth: int) -> Any:
    if isinstance(value, EditorState):
        return editor_state_to_dict(value, max_depth=max_depth)
    if isinstance(value, Root):
        return {"root": ast_to_dict(value, max_depth=max_depth)}
    if isinstance(value, Node):
        return {"root": ast_to_dict(Root(children=[value]), max_depth=max_depth)}
    return value


def normalize(value: Any, options: Optional[NormalizeOptions] = None) -> EditorState:
    """Normalize any value into a typed editor state.

    Parameters
    ----------
    value : Any
        Raw editor value (mapping in any supported shape, JSON string,
        plain text, anything else), or an already typed ``EditorState``,
        ``Root`` or node
    options : NormalizeOptions or None, default None
        Normalization options. Defaults are used when None.

    Returns
    -------
    EditorState
        Typed document. Never raises for document content: unrecognized
        values become an empty document or a single paragraph of text.

    Examples
    --------
    >>> state = normalize({"nodes": [{"type": "paragraph", "children": []}]})
    >>> type(state.root.children[0]).__name__
    'Paragraph'
    >>> normalize(None).root.children
    []

    """
    options = options or NormalizeOptions()
    raw = _as_raw(value, options.max_depth)
    canonical = canonicalize(raw, max_depth=options.max_depth)
    builder = DocumentBuilder(max_depth=options.max_depth)
    state = builder.build_state(canonical)
    if builder.truncated:
        logger.debug("Normalized document was truncated at depth %d", options.max_depth)
    return state


__all__ = ["normalize"]
