#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/utils/text.py
"""Text processing utilities for extractors.

Functions
---------
heading_anchor : Build the anchor id of a heading from its text
collapse_newlines : Collapse runs of newlines into one

Examples
--------
    >>> from lexdoc.utils.text import heading_anchor
    >>> heading_anchor("Getting Started!")
    'getting-started'

"""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")
_ANCHOR_DISALLOWED = re.compile(r"[^a-z0-9-]")
_NEWLINE_RUN = re.compile(r"\n+")


def heading_anchor(text: str) -> str:
    """Build a heading anchor id.

    The text is lower-cased, each whitespace run becomes a single ``-`` and
    every character outside ``[a-z0-9-]`` is removed. Non-ASCII letters are
    dropped, so a heading written entirely in another script gives ``""``.
    No uniqueness is enforced.

    Parameters
    ----------
    text : str
        Heading text

    Returns
    -------
    str
        Anchor id, possibly empty

    Examples
    --------
    >>> heading_anchor("  API Reference (v2.0) ")
    '-api-reference-v20-'
    >>> heading_anchor("Hello   World")
    'hello-world'

    """
    anchor = _WHITESPACE_RUN.sub("-", text.lower())
    return _ANCHOR_DISALLOWED.sub("", anchor)


def collapse_newlines(text: str) -> str:
    r"""Replace every run of ``\n`` characters with a single ``\n``."""
    return _NEWLINE_RUN.sub("\n", text)
