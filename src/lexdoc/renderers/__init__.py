#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/lexdoc/renderers/__init__.py
"""Renderers for normalized editor documents.

Available renderers:
- HtmlRenderer: Render to an HTML fragment, standalone page or Jinja2 template
- PlainTextRenderer: Render to plain text

Examples
--------
Render a document to HTML:

    >>> from lexdoc import normalize
    >>> from lexdoc.renderers import HtmlRenderer
    >>> state = normalize("Hello")
    >>> HtmlRenderer().render_to_string(state)
    '<p>Hello</p>'

"""

from lexdoc.renderers.base import BaseRenderer
from lexdoc.renderers.html import HtmlRenderer
from lexdoc.renderers.plaintext import PlainTextRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "PlainTextRenderer"]
