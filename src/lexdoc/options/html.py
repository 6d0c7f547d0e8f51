#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines options for rendering editor documents to HTML, either
as a bare fragment for embedding into email layouts or as a standalone or
templated page.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lexdoc.constants import (
    DEFAULT_BANNER_BACKGROUND_COLOR,
    DEFAULT_BANNER_TEXT_COLOR,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_HTML_TITLE,
    DEFAULT_IMAGE_STYLE,
)
from lexdoc.exceptions import ValidationError
from lexdoc.options.base import BaseRendererOptions


# src/lexdoc/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST to HTML.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the fragment in a minimal ``<!DOCTYPE html>`` document.
        Ignored when template_file is set.
    title : str, default "Document"
        Title used by standalone and templated output.
    language : str, default "en"
        Language code for the ``<html lang="...">`` attribute.
    template_file : str or None, default None
        Path to a Jinja2 template. When set, the fragment is rendered through
        the template with ``content``, ``title``, ``language``, ``headings``
        and ``text`` in the context.
    image_style : str, default "max-width: 100%; height: auto;"
        Inline style added to every ``<img>`` for email client compatibility.
    banner_background_color : str, default "#f5f5f5"
        Background colour of banner blocks that do not set one.
    banner_text_color : str, default "#333333"
        Text colour of banner blocks that do not set one.

    Examples
    --------
        >>> from lexdoc.options import HtmlRendererOptions
        >>> options = HtmlRendererOptions(standalone=True, title="Newsletter")

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Generate a complete HTML document"},
    )
    title: str = field(
        default=DEFAULT_HTML_TITLE,
        metadata={"help": "Document title for standalone/templated output", "type": str},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language code", "type": str},
    )
    template_file: str | None = field(
        default=None,
        metadata={"help": "Jinja2 template file to render the fragment into", "type": str, "cli_name": "template"},
    )
    image_style: str = field(
        default=DEFAULT_IMAGE_STYLE,
        metadata={"help": "Inline style for images", "type": str},
    )
    banner_background_color: str = field(
        default=DEFAULT_BANNER_BACKGROUND_COLOR,
        metadata={"help": "Default banner background colour", "type": str},
    )
    banner_text_color: str = field(
        default=DEFAULT_BANNER_TEXT_COLOR,
        metadata={"help": "Default banner text colour", "type": str},
    )

    def __post_init__(self) -> None:
        """Validate dependent field constraints.

        Raises
        ------
        ValidationError
            If the template file path is empty.

        """
        super().__post_init__()

        if self.template_file is not None and not str(self.template_file).strip():
            raise ValidationError(
                "template_file must be a non-empty path when set",
                parameter_name="template_file",
                parameter_value=self.template_file,
            )
