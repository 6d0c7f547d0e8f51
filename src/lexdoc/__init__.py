"""lexdoc - normalize and render rich-text editor documents.

lexdoc takes the serialized state of a Lexical-style rich-text editor, in
whatever shape a CMS happens to store it, and turns it into HTML, plain
text or a heading outline.

The pipeline is one-directional: a raw value is normalized into a typed
document tree (``lexdoc.ast``), which renderers (``lexdoc.renderers``)
and extractors consume. Every stage is total: malformed or unrecognized
input degrades to an empty or best-effort result instead of raising.

Supported Input Shapes
----------------------
- ``{"root": {...}}`` editor states, and bare ``{"type": "root", ...}`` roots
- legacy ``{"nodes": [...]}`` states
- documents wrapped in ``content``, ``custom``, ``text``, ``value`` or
  ``data`` keys
- JSON strings of any of the above, and plain text

Examples
--------
Render a stored value to HTML:

    >>> from lexdoc import render_html
    >>> render_html('{"root": {"children": [{"type": "paragraph", '
    ...             '"children": [{"type": "text", "text": "Hello"}]}]}}')
    '<p>Hello</p>'

Extract text and headings:

    >>> from lexdoc import extract_headings, extract_text
    >>> extract_text("Just text")
    'Just text\\n'

See Also
--------
lexdoc.ast : Node definitions, normalization and serialization
lexdoc.renderers : HTML and plain text renderers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from lexdoc.api import (  # noqa: E402
    convert_payload_data,
    extract_headings,
    extract_text,
    normalize,
    render_html,
    rich_text_to_html,
)
from lexdoc.ast import EditorState, HeadingEntry, detect_format, is_document  # noqa: E402
from lexdoc.exceptions import (  # noqa: E402
    InvalidOptionsError,
    LexdocError,
    RenderingError,
    ValidationError,
)
from lexdoc.options import (  # noqa: E402
    HtmlRendererOptions,
    NormalizeOptions,
    PlainTextOptions,
)

__all__ = [
    "__version__",
    # Conversion
    "normalize",
    "render_html",
    "rich_text_to_html",
    "extract_text",
    "extract_headings",
    "convert_payload_data",
    # Shape detection
    "is_document",
    "detect_format",
    # Types
    "EditorState",
    "HeadingEntry",
    # Options
    "NormalizeOptions",
    "HtmlRendererOptions",
    "PlainTextOptions",
    # Exceptions
    "LexdocError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
]
