#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/shape.py
"""Shape detection for raw editor values.

Editor states reach the codec in several shapes: the standard
``{"root": {...}}`` form, a legacy ``{"nodes": [...]}`` form, and the same
documents wrapped in ``content``, ``custom``, ``text`` or ``value`` keys by
different CMS field types. The functions here classify a value without
mutating it. They are advisory: the normalizer handles every shape on its
own and never relies on a positive answer from ``is_document``.

"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from lexdoc.constants import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


def is_version_marker(value: Any) -> bool:
    """Return True for a truthy numeric or string ``version`` value."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, str)) and bool(value)


def has_document_markers(value: Mapping[str, Any]) -> bool:
    """Return True when a mapping carries ``root``, ``nodes`` or ``version`` markers.

    Parameters
    ----------
    value : Mapping
        Candidate editor state

    Returns
    -------
    bool
        True if ``root`` is a mapping, ``nodes`` is a list, or ``version``
        is a truthy number or string

    """
    return (
        isinstance(value.get("root"), Mapping)
        or isinstance(value.get("nodes"), list)
        or is_version_marker(value.get("version"))
    )


def is_embedded_document(value: Any) -> bool:
    """Return True when ``value`` is a ``custom`` payload holding a document.

    The check is looser than ``has_document_markers``: any truthy ``root`` or
    ``nodes`` value counts.

    """
    if not isinstance(value, Mapping):
        return False
    return bool(value.get("root")) or bool(value.get("nodes")) or is_version_marker(value.get("version"))


def _mapping_at(value: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    inner = value.get(key)
    return inner if isinstance(inner, Mapping) else None


def is_document(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """Classify a raw value as an editor document.

    Rules are evaluated in order and the first match wins:

    1. non-mapping values are not documents
    2. a mapping ``content`` is unwrapped
    3. a ``custom`` mapping holding a document makes the value a document
    4. ``root`` / ``nodes`` / ``version`` markers make the value a document
    5. a mapping ``text`` or ``value`` is unwrapped
    6. anything else is not a document

    Parameters
    ----------
    value : Any
        Value to classify
    max_depth : int, default 200
        Maximum number of wrapper levels followed

    Returns
    -------
    bool
        True if the value (or a wrapped value) looks like an editor state

    Examples
    --------
    >>> is_document({"root": {"children": []}})
    True
    >>> is_document({"content": {"nodes": []}})
    True
    >>> is_document("plain text")
    False

    """
    current = value
    for _ in range(max_depth):
        if not isinstance(current, Mapping):
            return False

        inner = _mapping_at(current, "content")
        if inner is not None:
            current = inner
            continue

        if is_embedded_document(current.get("custom")):
            return True

        if has_document_markers(current):
            return True

        inner = _mapping_at(current, "text")
        if inner is None:
            inner = _mapping_at(current, "value")
        if inner is None:
            return False
        current = inner

    logger.warning("Document shape detection stopped after %d wrapper levels", max_depth)
    return False


def detect_format(value: Any) -> str:
    """Describe the shape of a raw value for diagnostics.

    Parameters
    ----------
    value : Any
        Raw editor value

    Returns
    -------
    str
        One of ``"empty"``, ``"json-string"``, ``"string"``, ``"standard"``,
        ``"nodes"``, ``"nested-content-root"``, ``"nested-content-nodes"``,
        ``"custom-field"``, ``"value-field"``, ``"text-field"`` or
        ``"unknown"``

    """
    if value is None or value == "":
        return "empty"

    if isinstance(value, str):
        try:
            json.loads(value)
        except (ValueError, RecursionError):
            return "string"
        return "json-string"

    if not isinstance(value, Mapping):
        return "unknown"

    root = _mapping_at(value, "root")
    if root is not None and root.get("children") is not None:
        return "standard"
    if value.get("nodes"):
        return "nodes"

    content = _mapping_at(value, "content")
    if content is not None:
        if content.get("root"):
            return "nested-content-root"
        if content.get("nodes"):
            return "nested-content-nodes"

    for key, label in (("custom", "custom-field"), ("value", "value-field"), ("text", "text-field")):
        inner = _mapping_at(value, key)
        if inner is not None and inner.get("root"):
            return label

    return "unknown"


__all__ = [
    "detect_format",
    "has_document_markers",
    "is_document",
    "is_embedded_document",
    "is_version_marker",
]
