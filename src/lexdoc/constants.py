#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the lexdoc library.

This module centralizes the hardcoded values and default configuration used
across the normalizer, the AST builder and the renderers.

Constants are organized by category:
1. Normalization - Root defaults and recursion limits
2. Editor Node Vocabulary - Node type strings and text format bits
3. HTML Rendering - Inline styles used for email-safe output
4. Plain Text Rendering
5. Command Line - Exit codes and choices
"""

from __future__ import annotations

# =============================================================================
# Normalization
# =============================================================================

# Maximum nesting depth followed by the normalizer, the builder and the renderers
DEFAULT_MAX_DEPTH = 200

DEFAULT_ROOT_DIRECTION = None
DEFAULT_ROOT_FORMAT = ""
DEFAULT_ROOT_INDENT = 0
DEFAULT_ROOT_VERSION = 1

# Keys of an editor root that are modelled explicitly
ROOT_SCALAR_KEYS = ("direction", "format", "indent", "version")

# =============================================================================
# Editor Node Vocabulary
# =============================================================================

NODE_ROOT = "root"
NODE_TEXT = "text"
NODE_TAB = "tab"
NODE_PARAGRAPH = "paragraph"
NODE_HEADING = "heading"
NODE_LIST = "list"
NODE_LIST_ITEM = "listitem"
NODE_QUOTE = "quote"
NODE_CODE = "code"
NODE_LINK = "link"
NODE_AUTOLINK = "autolink"
NODE_IMAGE = "image"
NODE_HORIZONTAL_RULE = "horizontalrule"
NODE_LINE_BREAK = "linebreak"
NODE_BLOCK = "block"

# listType values that select an ordered list
ORDERED_LIST_TYPES = frozenset({"number", "ordered"})
CHECK_LIST_TYPE = "check"

# Bits of the editor's integer text format field
TEXT_FORMAT_BOLD = 1
TEXT_FORMAT_ITALIC = 1 << 1
TEXT_FORMAT_STRIKETHROUGH = 1 << 2
TEXT_FORMAT_UNDERLINE = 1 << 3
TEXT_FORMAT_CODE = 1 << 4

# Heading level used by the renderer and by the outline when a heading has none
DEFAULT_RENDER_HEADING_LEVEL = 1
DEFAULT_OUTLINE_HEADING_LEVEL = 2
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Block types with dedicated rendering
BLOCK_BANNER = "banner"
BLOCK_MEDIA = "media"
BLOCK_CODE = "code"

# =============================================================================
# HTML Rendering
# =============================================================================

DEFAULT_LINK_URL = "#"
DEFAULT_IMAGE_STYLE = "max-width: 100%; height: auto;"
DEFAULT_BANNER_BACKGROUND_COLOR = "#f5f5f5"
DEFAULT_BANNER_TEXT_COLOR = "#333333"
BANNER_STYLE_TEMPLATE = (
    "background-color: {background}; color: {color}; padding: 20px; margin: 20px 0; border-radius: 5px;"
)
MEDIA_WRAPPER_STYLE = "margin: 20px 0;"
MEDIA_CAPTION_STYLE = "font-style: italic; margin-top: 8px;"
CODE_BLOCK_STYLE = "background-color: #f5f5f5; padding: 15px; border-radius: 5px; overflow-x: auto;"
CHECKBOX_CHECKED = "&#9745; "
CHECKBOX_UNCHECKED = "&#9744; "

DEFAULT_HTML_STANDALONE = False
DEFAULT_HTML_TITLE = "Document"
DEFAULT_HTML_LANGUAGE = "en"

# =============================================================================
# Plain Text Rendering
# =============================================================================

DEFAULT_LIST_ITEM_PREFIX = "• "
DEFAULT_COLLAPSE_NEWLINES = True

# =============================================================================
# Command Line
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
