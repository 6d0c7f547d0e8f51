#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lexdoc/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts a normalized
editor document to HTML. The default output is a compact fragment meant
to be embedded into email layouts: no whitespace between tags, inline
styles instead of classes. Standalone documents and Jinja2 templates are
available through ``HtmlRendererOptions``.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from lexdoc.ast.document_utils import extract_headings
from lexdoc.ast.nodes import (
    Block,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Quote,
    Root,
    Text,
    UnknownNode,
)
from lexdoc.ast.visitors import NodeVisitor
from lexdoc.constants import (
    BANNER_STYLE_TEMPLATE,
    BLOCK_BANNER,
    BLOCK_CODE,
    BLOCK_MEDIA,
    CHECKBOX_CHECKED,
    CHECKBOX_UNCHECKED,
    CODE_BLOCK_STYLE,
    DEFAULT_LINK_URL,
    DEFAULT_RENDER_HEADING_LEVEL,
    MEDIA_CAPTION_STYLE,
    MEDIA_WRAPPER_STYLE,
)
from lexdoc.exceptions import RenderingError
from lexdoc.options.html import HtmlRendererOptions
from lexdoc.options.plaintext import PlainTextOptions
from lexdoc.renderers.base import BaseRenderer, ChildContentMixin, Renderable
from lexdoc.renderers.plaintext import PlainTextRenderer
from lexdoc.utils.html_utils import escape_html, html_attribute

logger = logging.getLogger(__name__)


def _payload_text(value: Any) -> str:
    if value is None or isinstance(value, (Mapping, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class HtmlRenderer(NodeVisitor, ChildContentMixin, BaseRenderer):
    """Render a normalized document to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from lexdoc.ast import Paragraph, Root, Text
        >>> from lexdoc.renderers.html import HtmlRenderer
        >>> root = Root(children=[Paragraph(children=[Text(text="Hi", bold=True)])])
        >>> HtmlRenderer().render_to_string(root)
        '<p><strong>Hi</strong></p>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._reset_depth()

    def render_to_string(self, doc: Renderable) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        doc : EditorState or Node
            Normalized document, its root, or any subtree

        Returns
        -------
        str
            HTML fragment, or a complete document when ``standalone`` or
            ``template_file`` is set

        Raises
        ------
        RenderingError
            If the template file cannot be loaded or rendered

        """
        root = self._resolve_root(doc)
        self._output = []
        self._reset_depth()

        root.accept(self)
        content = "".join(self._output)

        if self.options.template_file is not None:
            return self._apply_jinja_template(root, content)

        if self.options.standalone:
            return self._wrap_in_document(content)

        return content

    def _wrap_in_document(self, content: str) -> str:
        """Wrap content in a minimal HTML document.

        Parameters
        ----------
        content : str
            Rendered HTML fragment

        Returns
        -------
        str
            Complete HTML document

        """
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self.options.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(self.options.title)}</title>",
            "</head>",
            "<body>",
            content,
            "</body>",
            "</html>",
        ]
        return "\n".join(parts)

    def _apply_jinja_template(self, root: Root, content: str) -> str:
        """Render the fragment through the configured Jinja2 template.

        The template receives ``content`` (safe markup), ``title``,
        ``language``, ``headings`` (list of dicts) and ``text`` (plain text
        of the document).

        Raises
        ------
        RenderingError
            If the template is missing or fails to render

        """
        assert self.options.template_file is not None  # for type checker
        template_path = Path(self.options.template_file)
        if not template_path.is_file():
            raise RenderingError(
                f"Template file not found: {template_path}",
                template_file=str(template_path),
            )

        # Enable autoescape for security
        env = Environment(
            loader=FileSystemLoader(str(template_path.parent)),
            autoescape=select_autoescape(["html", "htm", "xml", "j2", "jinja"], default_for_string=True),
        )

        text_renderer = PlainTextRenderer(PlainTextOptions(max_depth=self.options.max_depth))
        context = {
            "content": Markup(content),  # Already rendered and escaped by this renderer
            "title": self.options.title,
            "language": self.options.language,
            "headings": [entry.to_dict() for entry in extract_headings(root)],
            "text": text_renderer.render_to_string(root),
        }

        try:
            template = env.get_template(template_path.name)
            return template.render(**context)
        except TemplateError as e:
            raise RenderingError(
                f"Failed to render template {template_path}: {e}",
                template_file=str(template_path),
                original_error=e,
            ) from e

    # ------------------------------------------------------------------
    # Element nodes
    # ------------------------------------------------------------------

    def visit_root(self, node: Root) -> None:
        """Render the children of the document root."""
        self._output.append(self._render_children(node.children))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(f"<p>{self._render_children(node.children)}</p>")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node, level 1 when the source had none."""
        level = node.effective_level(DEFAULT_RENDER_HEADING_LEVEL)
        content = self._render_children(node.children)
        self._output.append(f"<h{level}>{content}</h{level}>")

    def visit_list(self, node: List) -> None:
        """Render a List node as ``<ol>`` or ``<ul>``."""
        tag = "ol" if node.ordered else "ul"
        self._output.append(f"<{tag}>{self._render_children(node.children)}</{tag}>")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Checklist items carry a checkbox character before their content.

        """
        checkbox = ""
        if node.checked is not None:
            checkbox = CHECKBOX_CHECKED if node.checked else CHECKBOX_UNCHECKED
        self._output.append(f"<li>{checkbox}{self._render_children(node.children)}</li>")

    def visit_quote(self, node: Quote) -> None:
        """Render a Quote node."""
        self._output.append(f"<blockquote>{self._render_children(node.children)}</blockquote>")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node; its text children are escaped like any text."""
        self._output.append(f"<pre><code>{self._render_children(node.children)}</code></pre>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_children(node.children)
        href = escape_html(node.url or DEFAULT_LINK_URL)
        target = ' target="_blank" rel="noopener noreferrer"' if node.new_tab else ""
        self._output.append(f'<a href="{href}"{target}>{content}</a>')

    def visit_block(self, node: Block) -> None:
        """Render a custom Block node.

        ``banner``, ``media`` and ``code`` blocks have dedicated markup;
        other block types render their children.

        Parameters
        ----------
        node : Block
            Block to render

        """
        if node.block_type == BLOCK_BANNER:
            self._output.append(self._render_banner(node))
        elif node.block_type == BLOCK_MEDIA:
            self._output.append(self._render_media(node))
        elif node.block_type == BLOCK_CODE:
            self._output.append(self._render_code_snippet(node))
        else:
            self._output.append(self._render_children(node.children))

    def _render_banner(self, node: Block) -> str:
        content = self._render_children(node.content.children) if node.content is not None else ""
        style = BANNER_STYLE_TEMPLATE.format(
            background=_payload_text(node.get("backgroundColor")) or self.options.banner_background_color,
            color=_payload_text(node.get("textColor")) or self.options.banner_text_color,
        )
        return f'<div style="{escape_html(style)}">{content}</div>'

    def _render_media(self, node: Block) -> str:
        media = node.get("media")
        url = _payload_text(media.get("url")) if isinstance(media, Mapping) else ""
        url = url or _payload_text(node.get("url"))
        if not url:
            return ""

        caption = _payload_text(node.get("caption"))
        parts = [
            f'<div style="{MEDIA_WRAPPER_STYLE}">',
            f'<img src="{escape_html(url)}" alt="{escape_html(caption)}" '
            f'style="{escape_html(self.options.image_style)}" />',
        ]
        if caption:
            parts.append(f'<p style="{MEDIA_CAPTION_STYLE}">{escape_html(caption)}</p>')
        parts.append("</div>")
        return "".join(parts)

    def _render_code_snippet(self, node: Block) -> str:
        code = escape_html(_payload_text(node.get("code")))
        language = _payload_text(node.get("language"))
        class_attr = html_attribute("class", f"language-{language}") if language else ""
        return f'<pre style="{CODE_BLOCK_STYLE}"><code{class_attr}>{code}</code></pre>'

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render the children of an unmodelled node, or nothing."""
        self._output.append(self._render_children(node.children))

    # ------------------------------------------------------------------
    # Leaf nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node.

        The text is escaped once, then marks are applied innermost to
        outermost: code, strikethrough, underline, italic, bold.

        Parameters
        ----------
        node : Text
            Text to render

        """
        if not node.text:
            return

        html = escape_html(node.text)
        if node.code:
            html = f"<code>{html}</code>"
        if node.strikethrough:
            html = f"<s>{html}</s>"
        if node.underline:
            html = f"<u>{html}</u>"
        if node.italic:
            html = f"<em>{html}</em>"
        if node.bold:
            html = f"<strong>{html}</strong>"
        self._output.append(html)

    def visit_image(self, node: Image) -> None:
        """Render an Image node with the email-safe inline style."""
        width_attr = html_attribute("width", node.width)
        height_attr = html_attribute("height", node.height)
        self._output.append(
            f'<img src="{escape_html(node.src)}" alt="{escape_html(node.alt)}"{width_attr}{height_attr} '
            f'style="{escape_html(self.options.image_style)}" />'
        )

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._output.append("<hr />")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("<br />")
