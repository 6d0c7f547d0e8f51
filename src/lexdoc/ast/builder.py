#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/ast/builder.py
"""Typed tree construction from canonical editor states.

``DocumentBuilder`` turns the plain mapping produced by ``canonicalize``
into ``lexdoc.ast.nodes`` dataclasses. Each editor node type has one
builder method, selected through a dispatch table keyed by the node's
``type`` string; types without a builder become ``UnknownNode``.

Source keys a builder does not consume are kept in the node's ``metadata``
so that ``ast_to_dict`` can write them back.

"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, Optional

from lexdoc.ast.canonical import canonicalize
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
from lexdoc.ast.shape import is_document
from lexdoc.constants import (
    CHECK_LIST_TYPE,
    DEFAULT_MAX_DEPTH,
    DEFAULT_ROOT_DIRECTION,
    DEFAULT_ROOT_FORMAT,
    DEFAULT_ROOT_INDENT,
    DEFAULT_ROOT_VERSION,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    NODE_AUTOLINK,
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
    NODE_TAB,
    NODE_TEXT,
    ORDERED_LIST_TYPES,
    ROOT_SCALAR_KEYS,
    TEXT_FORMAT_BOLD,
    TEXT_FORMAT_CODE,
    TEXT_FORMAT_ITALIC,
    TEXT_FORMAT_STRIKETHROUGH,
    TEXT_FORMAT_UNDERLINE,
)

logger = logging.getLogger(__name__)

_HEADING_TAG_PATTERN = re.compile(r"^h?([0-9]+)$", re.IGNORECASE)

_TEXT_MARKS = (
    ("bold", TEXT_FORMAT_BOLD),
    ("italic", TEXT_FORMAT_ITALIC),
    ("underline", TEXT_FORMAT_UNDERLINE),
    ("strikethrough", TEXT_FORMAT_STRIKETHROUGH),
    ("code", TEXT_FORMAT_CODE),
)

# Keys consumed by each builder in addition to "type" and "children"
_ROOT_KEYS = frozenset(ROOT_SCALAR_KEYS)
_TEXT_KEYS = frozenset({"text", "format"} | {name for name, _ in _TEXT_MARKS})
_HEADING_KEYS = frozenset({"tag", "level"})
_LIST_KEYS = frozenset({"listType", "tag", "ordered"})
_LIST_ITEM_KEYS = frozenset({"checked"})
_CODE_KEYS = frozenset({"language"})
_LINK_KEYS = frozenset({"url", "newTab"})
_IMAGE_KEYS = frozenset({"src", "alt", "altText", "width", "height"})
_BLOCK_KEYS = frozenset({"blockType", "fields"})


def _metadata(raw: Mapping[str, Any], consumed: frozenset[str] = frozenset()) -> dict[str, Any]:
    return {key: value for key, value in raw.items() if key not in consumed and key not in ("type", "children")}


def _coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value == value and abs(value) != float("inf"):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _dimension(value: Any) -> Optional[int | float | str]:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)) or not value:
        return None
    return value


def _parse_heading_level(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, int):
        level = value
    elif isinstance(value, str):
        match = _HEADING_TAG_PATTERN.match(value.strip())
        if not match:
            return None
        level = int(match.group(1))
    else:
        return None
    return min(max(level, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL)


def _is_ordered_list(raw: Mapping[str, Any]) -> bool:
    if raw.get("listType") in ORDERED_LIST_TYPES:
        return True
    if raw.get("tag") == "ol":
        return True
    ordered = raw.get("ordered")
    return ordered is True or ordered in ORDERED_LIST_TYPES


class DocumentBuilder:
    """Build typed nodes from a canonical editor state.

    A builder instance is used for a single document: it records whether
    the depth cap truncated anything so the warning is logged only once.

    Parameters
    ----------
    max_depth : int, default 200
        Nodes nested deeper than this are dropped

    Examples
    --------
    >>> builder = DocumentBuilder()
    >>> state = builder.build_state({"root": {"type": "root", "children": []}})
    >>> state.root.children
    []

    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """Initialize the builder with a depth cap."""
        self.max_depth = max_depth
        self.truncated = False
        self._node_builders: dict[str, Callable[[Mapping[str, Any], int], Node]] = {
            NODE_TEXT: self._build_text,
            NODE_TAB: self._build_tab,
            NODE_PARAGRAPH: self._build_paragraph,
            NODE_HEADING: self._build_heading,
            NODE_LIST: self._build_list,
            NODE_LIST_ITEM: self._build_list_item,
            NODE_QUOTE: self._build_quote,
            NODE_CODE: self._build_code,
            NODE_LINK: self._build_link,
            NODE_AUTOLINK: self._build_link,
            NODE_IMAGE: self._build_image,
            NODE_HORIZONTAL_RULE: self._build_horizontal_rule,
            NODE_LINE_BREAK: self._build_line_break,
            NODE_BLOCK: self._build_block,
        }

    def build_state(self, canonical: Mapping[str, Any]) -> EditorState:
        """Build an ``EditorState`` from the output of ``canonicalize``.

        Parameters
        ----------
        canonical : Mapping
            Editor state with a ``root`` mapping

        Returns
        -------
        EditorState
            Typed tree plus the sibling keys of ``root``

        """
        root = self.build_root(canonical.get("root") or {}, 0)
        extra = {key: value for key, value in canonical.items() if key != "root"}
        return EditorState(root=root, extra=extra)

    def build_root(self, raw: Mapping[str, Any], depth: int) -> Root:
        """Build a Root node whose children sit at ``depth + 1``."""
        direction = raw.get("direction")
        fmt = raw.get("format")
        return Root(
            children=self.build_children(raw.get("children"), depth + 1),
            direction=direction if isinstance(direction, str) else DEFAULT_ROOT_DIRECTION,
            format=fmt if isinstance(fmt, str) else DEFAULT_ROOT_FORMAT,
            indent=_as_int(raw.get("indent"), DEFAULT_ROOT_INDENT),
            version=_as_int(raw.get("version"), DEFAULT_ROOT_VERSION),
            metadata=_metadata(raw, _ROOT_KEYS),
        )

    def build_children(self, raw_children: Any, depth: int) -> list[Node]:
        """Build the nodes of a ``children`` array found at ``depth``.

        Parameters
        ----------
        raw_children : Any
            The source ``children`` value; anything but a list yields no nodes
        depth : int
            Depth of the children being built

        Returns
        -------
        list of Node
            Built children, empty when past the depth cap

        """
        if not isinstance(raw_children, list) or not raw_children:
            return []

        if depth > self.max_depth:
            self._note_truncated()
            return []

        nodes: list[Node] = []
        for raw in raw_children:
            if not isinstance(raw, Mapping):
                logger.debug("Skipping non-object child node of type %s", type(raw).__name__)
                continue
            nodes.append(self.build_node(raw, depth))
        return nodes

    def _note_truncated(self) -> None:
        if not self.truncated:
            logger.warning("Document nesting exceeds %d levels; deeper content was dropped", self.max_depth)
            self.truncated = True

    def build_node(self, raw: Mapping[str, Any], depth: int) -> Node:
        """Build one node, dispatching on its ``type`` string."""
        node_type = raw.get("type")
        builder = self._node_builders.get(node_type) if isinstance(node_type, str) else None
        if builder is None:
            return self._build_unknown(raw, depth)
        return builder(raw, depth)

    # ------------------------------------------------------------------
    # Leaf builders
    # ------------------------------------------------------------------

    def _build_text(self, raw: Mapping[str, Any], depth: int, default_text: str = "") -> Text:
        fmt = raw.get("format")
        bits = fmt if isinstance(fmt, int) and not isinstance(fmt, bool) else 0
        marks = {name: bool(raw.get(name)) or bool(bits & bit) for name, bit in _TEXT_MARKS}
        text = raw.get("text")
        return Text(
            text=default_text if text is None else _coerce_text(text),
            metadata=_metadata(raw, _TEXT_KEYS),
            **marks,
        )

    def _build_tab(self, raw: Mapping[str, Any], depth: int) -> Text:
        return self._build_text(raw, depth, default_text="\t")

    def _build_image(self, raw: Mapping[str, Any], depth: int) -> Image:
        alt = raw.get("alt")
        if alt is None:
            alt = raw.get("altText")
        return Image(
            src=_coerce_text(raw.get("src")),
            alt=_coerce_text(alt),
            width=_dimension(raw.get("width")),
            height=_dimension(raw.get("height")),
            metadata=_metadata(raw, _IMAGE_KEYS),
        )

    def _build_horizontal_rule(self, raw: Mapping[str, Any], depth: int) -> HorizontalRule:
        return HorizontalRule(metadata=_metadata(raw))

    def _build_line_break(self, raw: Mapping[str, Any], depth: int) -> LineBreak:
        return LineBreak(metadata=_metadata(raw))

    # ------------------------------------------------------------------
    # Element builders
    # ------------------------------------------------------------------

    def _build_paragraph(self, raw: Mapping[str, Any], depth: int) -> Paragraph:
        return Paragraph(children=self.build_children(raw.get("children"), depth + 1), metadata=_metadata(raw))

    def _build_quote(self, raw: Mapping[str, Any], depth: int) -> Quote:
        return Quote(children=self.build_children(raw.get("children"), depth + 1), metadata=_metadata(raw))

    def _build_heading(self, raw: Mapping[str, Any], depth: int) -> Heading:
        level = _parse_heading_level(raw.get("tag"))
        if level is None:
            level = _parse_heading_level(raw.get("level"))
        return Heading(
            level=level,
            children=self.build_children(raw.get("children"), depth + 1),
            metadata=_metadata(raw, _HEADING_KEYS),
        )

    def _build_list(self, raw: Mapping[str, Any], depth: int) -> List:
        return List(
            ordered=_is_ordered_list(raw),
            checklist=raw.get("listType") == CHECK_LIST_TYPE,
            children=self.build_children(raw.get("children"), depth + 1),
            metadata=_metadata(raw, _LIST_KEYS),
        )

    def _build_list_item(self, raw: Mapping[str, Any], depth: int) -> ListItem:
        checked = raw.get("checked")
        return ListItem(
            children=self.build_children(raw.get("children"), depth + 1),
            checked=checked if isinstance(checked, bool) else None,
            metadata=_metadata(raw, _LIST_ITEM_KEYS),
        )

    def _build_code(self, raw: Mapping[str, Any], depth: int) -> CodeBlock:
        language = raw.get("language")
        return CodeBlock(
            children=self.build_children(raw.get("children"), depth + 1),
            language=language if isinstance(language, str) and language else None,
            metadata=_metadata(raw, _CODE_KEYS),
        )

    def _build_link(self, raw: Mapping[str, Any], depth: int) -> Link:
        fields = raw.get("fields")
        fields = fields if isinstance(fields, Mapping) else {}

        url = raw.get("url") or fields.get("url")
        url_text = _coerce_text(url) if url else ""
        new_tab = raw["newTab"] if "newTab" in raw else fields.get("newTab")

        return Link(
            url=url_text or None,
            new_tab=bool(new_tab),
            children=self.build_children(raw.get("children"), depth + 1),
            metadata=_metadata(raw, _LINK_KEYS),
        )

    def _build_block(self, raw: Mapping[str, Any], depth: int) -> Block:
        fields = raw.get("fields")
        fields = dict(fields) if isinstance(fields, Mapping) else {}

        block_type = ""
        for candidate in (raw.get("blockType"), fields.get("blockType")):
            if isinstance(candidate, str) and candidate:
                block_type = candidate
                break

        consumed = _BLOCK_KEYS
        raw_content = raw["content"] if "content" in raw else fields.get("content")
        content: Optional[Root] = None
        if is_document(raw_content, max_depth=self.max_depth):
            if depth + 1 > self.max_depth:
                self._note_truncated()
            else:
                # Nested documents may use any supported shape
                canonical = canonicalize(raw_content, max_depth=self.max_depth)
                content = self.build_root(canonical["root"], depth + 1)
                consumed = consumed | {"content"}

        return Block(
            block_type=block_type,
            fields=fields,
            children=self.build_children(raw.get("children"), depth + 1),
            content=content,
            metadata=_metadata(raw, consumed),
        )

    def _build_unknown(self, raw: Mapping[str, Any], depth: int) -> UnknownNode:
        node_type = raw.get("type")
        node_type = node_type if isinstance(node_type, str) else ""
        logger.debug("Unknown node type %r, passing through its children", node_type)

        raw_children = raw.get("children")
        children = self.build_children(raw_children, depth + 1) if isinstance(raw_children, list) else None
        return UnknownNode(type=node_type, children=children, metadata=_metadata(raw))


__all__ = ["DocumentBuilder"]
