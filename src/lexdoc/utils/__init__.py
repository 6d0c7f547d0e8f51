#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/utils/__init__.py
"""Utility modules for the lexdoc package."""

from lexdoc.utils.html_utils import escape_html, html_attribute
from lexdoc.utils.text import collapse_newlines, heading_anchor

__all__ = [
    "collapse_newlines",
    "escape_html",
    "heading_anchor",
    "html_attribute",
]
