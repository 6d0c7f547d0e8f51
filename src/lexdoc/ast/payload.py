#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/payload.py
"""Conversion of CMS payload field values into editor documents.

CMS fields do not always hold an editor state. Older content stores a list
of ``blocks``, and imported content may carry ``markdown`` or ``html``
strings. ``convert_payload_data`` maps all of these onto an editor state
so they can be rendered with the same pipeline.

"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from lexdoc.ast.canonical import canonicalize, empty_state, paragraph_state
from lexdoc.ast.nodes import EditorState
from lexdoc.ast.normalize import normalize
from lexdoc.ast.shape import is_document
from lexdoc.constants import NODE_PARAGRAPH, NODE_TEXT
from lexdoc.options.base import NormalizeOptions

logger = logging.getLogger(__name__)


def _is_falsy(value: Any) -> bool:
    """Return True for the values a payload treats as missing.

    Empty containers are not missing: they fall through to the JSON dump.
    """
    if value is None or value is False or (isinstance(value, str) and not value):
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def _text_paragraph(text: Any) -> dict[str, Any]:
    return {"type": NODE_PARAGRAPH, "children": [{"type": NODE_TEXT, "text": text}]}


def _block_to_nodes(block: Any, max_depth: int) -> list[dict[str, Any]]:
    """Turn one entry of a ``blocks`` list into editor nodes."""
    if isinstance(block, str):
        return [_text_paragraph(block)] if block else []

    if not isinstance(block, Mapping):
        return []

    if block.get("text"):
        return [_text_paragraph(block["text"])]

    content = block.get("content")
    if content and isinstance(content, str):
        return [_text_paragraph(content)]
    if is_document(content, max_depth=max_depth):
        return list(canonicalize(content, max_depth=max_depth)["root"]["children"])

    logger.debug("Dropping payload block without text or document content")
    return []


def convert_payload_data(value: Any, options: Optional[NormalizeOptions] = None) -> EditorState:
    """Convert a CMS payload value into a typed editor state.

    Rules, first match wins:

    1. missing values (None, False, "", 0 and NaN) give an empty document
    2. editor documents in any supported shape are normalized
    3. a mapping with a ``blocks`` list becomes one paragraph per text
       block, with nested documents spliced in
    4. strings become a single paragraph
    5. a mapping with ``markdown`` or ``html`` becomes a paragraph of that
       raw string
    6. any other mapping or list becomes a paragraph of its JSON text
    7. anything else gives an empty document

    Parameters
    ----------
    value : Any
        CMS field value
    options : NormalizeOptions or None, default None
        Normalization options

    Returns
    -------
    EditorState
        Typed document

    Examples
    --------
    >>> state = convert_payload_data({"blocks": ["First", {"text": "Second"}]})
    >>> len(state.root.children)
    2

    """
    options = options or NormalizeOptions()

    if _is_falsy(value):
        return normalize(None, options)

    if is_document(value, max_depth=options.max_depth):
        return normalize(value, options)

    if isinstance(value, Mapping) and isinstance(value.get("blocks"), list):
        state = empty_state()
        for block in value["blocks"]:
            state["root"]["children"].extend(_block_to_nodes(block, options.max_depth))
        return normalize(state, options)

    if isinstance(value, str):
        return normalize(paragraph_state(value), options)

    if isinstance(value, Mapping):
        raw_text = value.get("markdown") or value.get("html")
        if raw_text:
            return normalize(paragraph_state(raw_text), options)

    if isinstance(value, (Mapping, list)):
        try:
            dumped = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug("Could not serialize payload value: %s", e)
            return normalize(None, options)
        return normalize(paragraph_state(dumped), options)

    return normalize(None, options)


__all__ = ["convert_payload_data"]
