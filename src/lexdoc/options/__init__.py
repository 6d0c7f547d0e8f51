#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for normalization and rendering."""

from lexdoc.options.base import BaseRendererOptions, CloneFrozenMixin, NormalizeOptions
from lexdoc.options.html import HtmlRendererOptions
from lexdoc.options.plaintext import PlainTextOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "NormalizeOptions",
    "PlainTextOptions",
]
