#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/api.py
"""Public conversion functions.

Every function here accepts a raw editor value in any supported shape (or
an already normalized ``EditorState``), normalizes it and hands the typed
tree to a renderer or extractor. Document content never raises; only
invalid options or template problems do, as ``LexdocError`` subclasses.

"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, TypeVar

from lexdoc.ast import document_utils
from lexdoc.ast.document_utils import HeadingEntry
from lexdoc.ast.normalize import normalize
from lexdoc.ast.nodes import EditorState, Node, Root
from lexdoc.ast.payload import convert_payload_data
from lexdoc.ast.shape import detect_format
from lexdoc.constants import DEFAULT_OUTLINE_HEADING_LEVEL
from lexdoc.exceptions import LexdocError, ValidationError
from lexdoc.options.base import BaseRendererOptions, NormalizeOptions
from lexdoc.options.html import HtmlRendererOptions
from lexdoc.options.plaintext import PlainTextOptions
from lexdoc.renderers.html import HtmlRenderer
from lexdoc.renderers.plaintext import PlainTextRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=BaseRendererOptions)


def _normalized(value: Any, normalize_options: Optional[NormalizeOptions]) -> EditorState:
    # Typed trees go straight to the renderers, which bound their own depth
    if isinstance(value, EditorState):
        return value
    if isinstance(value, Root):
        return EditorState(root=value)
    if isinstance(value, Node):
        return EditorState(root=Root(children=[value]))
    logger.debug("Detected editor value format: %s", detect_format(value))
    return normalize(value, normalize_options)


def _renderer_options(options: Optional[OptionsT], options_class: type[OptionsT], **kwargs: Any) -> OptionsT:
    """Merge keyword overrides into renderer options.

    Raises
    ------
    ValidationError
        If a keyword is not a field of ``options_class``

    """
    known = {f.name for f in fields(options_class)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise ValidationError(
            f"Unknown {options_class.__name__} option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=kwargs[unknown[0]],
        )

    if options is None:
        return options_class(**kwargs)
    if kwargs:
        return options.create_updated(**kwargs)
    return options


def render_html(
    value: Any,
    *,
    renderer_options: Optional[HtmlRendererOptions] = None,
    normalize_options: Optional[NormalizeOptions] = None,
    **kwargs: Any,
) -> str:
    """Render an editor value to HTML.

    Parameters
    ----------
    value : Any
        Raw editor value or normalized ``EditorState``
    renderer_options : HtmlRendererOptions, optional
        HTML rendering options
    normalize_options : NormalizeOptions, optional
        Normalization options
    kwargs : Any
        Individual ``HtmlRendererOptions`` fields, overriding
        ``renderer_options``

    Returns
    -------
    str
        HTML fragment (or document, with ``standalone`` or a template).
        An empty or unrecognized value gives ``""``.

    Raises
    ------
    ValidationError
        If an option is invalid
    RenderingError
        If a template cannot be loaded or rendered

    Examples
    --------
    >>> render_html({"nodes": [{"type": "paragraph", "children": [{"type": "text", "text": "Hi", "bold": True}]}]})
    '<p><strong>Hi</strong></p>'

    """
    options = _renderer_options(renderer_options, HtmlRendererOptions, **kwargs)
    state = _normalized(value, normalize_options)
    return HtmlRenderer(options).render_to_string(state)


def rich_text_to_html(value: Any, **kwargs: Any) -> str:
    """Render an editor value to HTML, returning ``""`` on any library error.

    Takes the same arguments as ``render_html``. Errors are logged with
    their traceback instead of being raised, which suits email and page
    templates that must always produce output.

    """
    try:
        return render_html(value, **kwargs)
    except LexdocError:
        logger.exception("Failed to render rich text to HTML")
        return ""


def extract_text(
    value: Any,
    *,
    renderer_options: Optional[PlainTextOptions] = None,
    normalize_options: Optional[NormalizeOptions] = None,
    **kwargs: Any,
) -> str:
    """Extract the plain text of an editor value.

    Parameters
    ----------
    value : Any
        Raw editor value or normalized ``EditorState``
    renderer_options : PlainTextOptions, optional
        Plain text options
    normalize_options : NormalizeOptions, optional
        Normalization options
    kwargs : Any
        Individual ``PlainTextOptions`` fields

    Returns
    -------
    str
        Text with one newline after each paragraph and heading and a
        bullet before each list item

    Examples
    --------
    >>> extract_text('{"root": {"children": [{"type": "paragraph", "children": [{"type": "text", "text": "Hi"}]}]}}')
    'Hi\\n'

    """
    options = _renderer_options(renderer_options, PlainTextOptions, **kwargs)
    state = _normalized(value, normalize_options)
    return PlainTextRenderer(options).render_to_string(state)


def extract_headings(
    value: Any,
    *,
    default_level: int = DEFAULT_OUTLINE_HEADING_LEVEL,
    normalize_options: Optional[NormalizeOptions] = None,
) -> list[HeadingEntry]:
    """Extract the heading outline of an editor value.

    Parameters
    ----------
    value : Any
        Raw editor value or normalized ``EditorState``
    default_level : int, default 2
        Level reported for headings without one
    normalize_options : NormalizeOptions, optional
        Normalization options

    Returns
    -------
    list of HeadingEntry
        Headings with non-empty text, in document order, duplicates kept

    """
    state = _normalized(value, normalize_options)
    return document_utils.extract_headings(state, default_level=default_level)


__all__ = [
    "convert_payload_data",
    "extract_headings",
    "extract_text",
    "normalize",
    "render_html",
    "rich_text_to_html",
]
