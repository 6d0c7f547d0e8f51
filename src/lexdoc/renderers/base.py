#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all renderers inherit
from, and the mixin that implements depth-guarded child rendering.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from lexdoc.ast.nodes import EditorState, Node, Root
from lexdoc.exceptions import InvalidOptionsError
from lexdoc.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)

Renderable = Union[EditorState, Node]


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from lexdoc.renderers.base import BaseRenderer
        >>>
        >>> class MyCustomRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render_to_string(self, doc: Renderable) -> str:
        """Render a document to a string.

        Parameters
        ----------
        doc : EditorState or Node
            Normalized document, its root, or any subtree

        Returns
        -------
        str
            Rendered output

        """
        pass

    def render(self, doc: Renderable, output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Render a document and write it to a path or stream.

        Parameters
        ----------
        doc : EditorState or Node
            Document to render
        output : str, Path, IO[str] or IO[bytes]
            Output destination. Binary streams receive UTF-8.

        """
        text = self.render_to_string(doc)
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
            return
        try:
            output.write(text)  # type: ignore[arg-type]
        except TypeError:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]

    @staticmethod
    def _resolve_root(doc: Renderable) -> Root:
        """Return the Root to render for an editor state, root or subtree."""
        if isinstance(doc, EditorState):
            return doc.root
        if isinstance(doc, Root):
            return doc
        return Root(children=[doc])

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class ChildContentMixin:
    """Mixin rendering child nodes to a string with a depth guard.

    The implementing class must have:
    - A ``_output`` attribute (list[str]) for accumulating output
    - An ``options`` attribute with a ``max_depth``
    - Visitor methods that append to ``_output``

    ``_reset_depth`` must be called at the start of each render. Children
    nested deeper than ``options.max_depth`` are skipped and a warning is
    logged once per render.

    """

    _output: list[str]
    options: BaseRendererOptions
    _depth: int
    _depth_exceeded: bool

    def _reset_depth(self) -> None:
        self._depth = 0
        self._depth_exceeded = False

    def _render_children(self, children: list[Node] | None) -> str:
        """Render a list of nodes and return the captured output.

        Parameters
        ----------
        children : list of Node or None
            Nodes to render

        Returns
        -------
        str
            Concatenated output of the children

        """
        if not children:
            return ""

        if self._depth >= self.options.max_depth:
            if not self._depth_exceeded:
                logger.warning("Render depth limit of %d reached; deeper content skipped", self.options.max_depth)
                self._depth_exceeded = True
            return ""

        # Save current output state
        saved_output = self._output
        self._output = []
        self._depth += 1
        try:
            for node in children:
                node.accept(self)
            result = "".join(self._output)
        finally:
            self._depth -= 1
            self._output = saved_output
        return result
