#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/canonical.py
"""Canonicalization of raw editor values.

``canonicalize`` turns any value into a plain editor-state mapping of the
form ``{"root": {"type": "root", "children": [...], ...}}``. It is the
dict-level half of normalization; ``lexdoc.ast.builder`` turns its result
into typed nodes.

The cascade is an ordered sequence of rules. Wrapper rules peel one layer
off the value and hand the inner value back to the loop; terminal rules
produce the final mapping. Wrappers are tried before terminal forms, and
stringification is the last resort.

"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from lexdoc.ast.shape import is_embedded_document
from lexdoc.constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_ROOT_DIRECTION,
    DEFAULT_ROOT_FORMAT,
    DEFAULT_ROOT_INDENT,
    DEFAULT_ROOT_VERSION,
    NODE_PARAGRAPH,
    NODE_ROOT,
    NODE_TEXT,
    ROOT_SCALAR_KEYS,
)

logger = logging.getLogger(__name__)

_ROOT_DEFAULTS = tuple(
    zip(ROOT_SCALAR_KEYS, (DEFAULT_ROOT_DIRECTION, DEFAULT_ROOT_FORMAT, DEFAULT_ROOT_INDENT, DEFAULT_ROOT_VERSION))
)


def empty_state() -> dict[str, Any]:
    """Return a fresh editor state with an empty root."""
    return {
        "root": {
            "children": [],
            "direction": DEFAULT_ROOT_DIRECTION,
            "format": DEFAULT_ROOT_FORMAT,
            "indent": DEFAULT_ROOT_INDENT,
            "type": NODE_ROOT,
            "version": DEFAULT_ROOT_VERSION,
        }
    }


def paragraph_state(text: str) -> dict[str, Any]:
    """Return an editor state holding ``text`` in a single paragraph.

    Parameters
    ----------
    text : str
        Raw text placed in the only text node

    Returns
    -------
    dict
        Editor state whose root has one paragraph with one text node

    """
    state = empty_state()
    state["root"]["children"].append(
        {
            "children": [
                {
                    "detail": 0,
                    "format": 0,
                    "mode": "normal",
                    "style": "",
                    "text": text,
                    "type": NODE_TEXT,
                    "version": 1,
                }
            ],
            "direction": DEFAULT_ROOT_DIRECTION,
            "format": DEFAULT_ROOT_FORMAT,
            "indent": DEFAULT_ROOT_INDENT,
            "type": NODE_PARAGRAPH,
            "version": 1,
        }
    )
    return state


# ============================================================================
# Wrapper rules: return the inner value to continue with, or None
# ============================================================================


def _unwrap_content(value: Mapping[str, Any]) -> Optional[Any]:
    inner = value.get("content")
    return inner if isinstance(inner, Mapping) else None


def _unwrap_custom(value: Mapping[str, Any]) -> Optional[Any]:
    inner = value.get("custom")
    return inner if is_embedded_document(inner) else None


def _unwrap_text_or_value(value: Mapping[str, Any]) -> Optional[Any]:
    for key in ("text", "value"):
        inner = value.get(key)
        if isinstance(inner, Mapping):
            return inner
    return None


def _unwrap_data(value: Mapping[str, Any]) -> Optional[Any]:
    inner = value.get("data")
    if isinstance(inner, Mapping) and (inner.get("root") or isinstance(inner.get("nodes"), list)):
        return inner
    return None


_WRAPPER_RULES: tuple[Callable[[Mapping[str, Any]], Optional[Any]], ...] = (
    _unwrap_content,
    _unwrap_custom,
    _unwrap_text_or_value,
    _unwrap_data,
)


# ============================================================================
# Terminal rules: return the canonical state, or None
# ============================================================================


def _root_from(source: Mapping[str, Any]) -> dict[str, Any]:
    root = dict(source)
    children = root.get("children")
    root["children"] = list(children) if isinstance(children, list) else []
    root["type"] = NODE_ROOT
    for key, default in _ROOT_DEFAULTS:
        if root.get(key) is None:
            root[key] = default
    return root


def _from_root(value: Mapping[str, Any]) -> Optional[dict[str, Any]]:
    root = value.get("root")
    if not isinstance(root, Mapping):
        return None
    state = dict(value)
    state["root"] = _root_from(root)
    return state


def _from_nodes(value: Mapping[str, Any]) -> Optional[dict[str, Any]]:
    nodes = value.get("nodes")
    if not isinstance(nodes, list):
        return None
    # Legacy scalars fall back to the defaults when falsy, not only when missing
    return {
        "root": {
            "children": list(nodes),
            "direction": value.get("direction") or DEFAULT_ROOT_DIRECTION,
            "format": value.get("format") or DEFAULT_ROOT_FORMAT,
            "indent": value.get("indent") or DEFAULT_ROOT_INDENT,
            "type": NODE_ROOT,
            "version": value.get("version") or DEFAULT_ROOT_VERSION,
        }
    }


def _from_bare_root(value: Mapping[str, Any]) -> Optional[dict[str, Any]]:
    if value.get("type") == NODE_ROOT and isinstance(value.get("children"), list):
        return {"root": _root_from(value)}
    return None


_TERMINAL_RULES: tuple[Callable[[Mapping[str, Any]], Optional[dict[str, Any]]], ...] = (
    _from_root,
    _from_nodes,
    _from_bare_root,
)


def _stringified(value: Any) -> dict[str, Any]:
    try:
        dumped = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Could not serialize unrecognized value, using empty document: %s", e)
        return empty_state()
    logger.debug("Unrecognized value shape, rendering its JSON as text")
    return paragraph_state(dumped)


def _parsed_string(value: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(value)
    except (ValueError, RecursionError):
        return False, None


def canonicalize(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> dict[str, Any]:
    """Convert any value into a canonical editor-state mapping.

    Never raises. The input is not mutated; the returned mapping is new but
    may share untouched descendant nodes with the input.

    Parameters
    ----------
    value : Any
        Raw editor value: a mapping in any supported shape, a JSON string,
        plain text, or anything else
    max_depth : int, default 200
        Maximum number of wrapper layers and JSON re-parses followed. Past
        the limit an empty document is returned and a warning is logged.

    Returns
    -------
    dict
        Editor state whose ``root`` has ``type``, ``children``,
        ``direction``, ``format``, ``indent`` and ``version``

    Examples
    --------
    >>> canonicalize({"nodes": []})["root"]["children"]
    []
    >>> canonicalize("Hello")["root"]["children"][0]["children"][0]["text"]
    'Hello'

    """
    current = value
    for _ in range(max_depth):
        if isinstance(current, str):
            if not current:
                return empty_state()
            ok, parsed = _parsed_string(current)
            if not ok:
                logger.debug("Value is not JSON, treating it as plain text")
                return paragraph_state(current)
            # JSON numbers, booleans and null fall through to an empty root
            current = parsed
            continue

        if isinstance(current, Mapping):
            inner = None
            for unwrap in _WRAPPER_RULES:
                inner = unwrap(current)
                if inner is not None:
                    break
            if inner is not None:
                current = inner
                continue

            for terminal in _TERMINAL_RULES:
                state = terminal(current)
                if state is not None:
                    return state

            return _stringified(current)

        if isinstance(current, list):
            return _stringified(current)

        return empty_state()

    logger.warning("Stopped unwrapping editor value after %d levels; using empty document", max_depth)
    return empty_state()


__all__ = ["canonicalize", "empty_state", "paragraph_state"]
