#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/document_utils.py
"""Document outline utilities.

This module extracts the heading outline of a normalized document, the
data behind tables of contents and in-page navigation.

Examples
--------
    >>> from lexdoc import normalize
    >>> state = normalize({"root": {"children": [
    ...     {"type": "heading", "tag": "h1", "children": [{"type": "text", "text": "Intro"}]},
    ... ]}})
    >>> extract_headings(state)
    [HeadingEntry(id='intro', text='Intro', level=1)]

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from lexdoc.ast.nodes import EditorState, Heading, Node, Text, get_node_children
from lexdoc.constants import DEFAULT_OUTLINE_HEADING_LEVEL
from lexdoc.utils.text import heading_anchor


@dataclass(frozen=True)
class HeadingEntry:
    """One entry of a document outline.

    Parameters
    ----------
    id : str
        Anchor id derived from the text (not unique)
    text : str
        Concatenated text of the heading's direct text children
    level : int
        Heading level, 1 to 6

    """

    id: str
    text: str
    level: int

    def to_dict(self) -> dict[str, Any]:
        """Return ``{"id": ..., "text": ..., "level": ...}``."""
        return {"id": self.id, "text": self.text, "level": self.level}


def heading_text(node: Heading) -> str:
    """Concatenate the text of a heading's direct ``Text`` children.

    Text nested inside links or other elements is not included.
    """
    return "".join(child.text for child in node.children if isinstance(child, Text))


def extract_headings(
    document: Union[EditorState, Node],
    default_level: int = DEFAULT_OUTLINE_HEADING_LEVEL,
) -> list[HeadingEntry]:
    """Collect the headings of a document in document order.

    Parameters
    ----------
    document : EditorState or Node
        Normalized document or any subtree
    default_level : int, default 2
        Level reported for headings that do not carry one

    Returns
    -------
    list of HeadingEntry
        One entry per heading with non-empty text, in pre-order. Headings
        inside list items, quotes and blocks are included; nested documents
        of blocks are not. Duplicate ids are kept.

    """
    start = document.root if isinstance(document, EditorState) else document
    headings: list[HeadingEntry] = []

    # Explicit stack so hand-built trees of any depth are safe
    stack: list[Node] = [start]
    while stack:
        node = stack.pop()
        if isinstance(node, Heading):
            text = heading_text(node)
            if text:
                level = node.effective_level(default_level)
                headings.append(HeadingEntry(id=heading_anchor(text), text=text, level=level))
        stack.extend(reversed(get_node_children(node)))

    return headings


__all__ = ["HeadingEntry", "extract_headings", "heading_text"]
