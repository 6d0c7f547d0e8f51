#  Copyright (c) 2025 Tom Villani, Ph.D.
# lexdoc/options/plaintext.py
"""Configuration options for plain text extraction.

This module defines options for rendering the AST to plain text.
"""

from dataclasses import dataclass, field

from lexdoc.constants import DEFAULT_COLLAPSE_NEWLINES, DEFAULT_LIST_ITEM_PREFIX
from lexdoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    r"""Configuration options for plain text rendering.

    Parameters
    ----------
    list_item_prefix : str, default "• "
        Marker prepended to the text of every list item.
    collapse_newlines : bool, default True
        Collapse runs of newlines in the final output into a single newline.

    """

    list_item_prefix: str = field(
        default=DEFAULT_LIST_ITEM_PREFIX,
        metadata={"help": "Prefix for list items", "type": str},
    )
    collapse_newlines: bool = field(
        default=DEFAULT_COLLAPSE_NEWLINES,
        metadata={
            "help": "Collapse consecutive newlines",
            "cli_name": "no-collapse-newlines",
        },
    )
