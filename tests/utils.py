"""Test utilities for the lexdoc test suite.

Builders for editor-state mappings in the shape the rich-text editor
serializes them, so tests read like the stored data they exercise.
"""

from typing import Any


def text_node(text: Any, **marks: Any) -> dict[str, Any]:
    """Build an editor text node."""
    node: dict[str, Any] = {"detail": 0, "format": 0, "mode": "normal", "style": "", "text": text, "type": "text"}
    node.update(marks)
    return node


def element(node_type: str, *children: dict[str, Any], **attrs: Any) -> dict[str, Any]:
    """Build an editor element node with the given children."""
    node: dict[str, Any] = {"type": node_type, "children": list(children)}
    node.update(attrs)
    return node


def paragraph(*children: dict[str, Any]) -> dict[str, Any]:
    """Build a paragraph node."""
    return element("paragraph", *children, direction="ltr", format="", indent=0, version=1)


def editor_state(*children: dict[str, Any]) -> dict[str, Any]:
    """Build a standard ``{"root": ...}`` editor state."""
    return {
        "root": {
            "type": "root",
            "children": list(children),
            "direction": "ltr",
            "format": "",
            "indent": 0,
            "version": 1,
        }
    }


def nested_paragraphs(depth: int) -> dict[str, Any]:
    """Build an editor state with ``depth`` paragraphs nested inside each other."""
    innermost: dict[str, Any] = {"type": "paragraph", "children": [text_node("deep")]}
    node = innermost
    for _ in range(depth - 1):
        node = {"type": "paragraph", "children": [node]}
    return {"root": {"type": "root", "children": [node]}}
