"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Any


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters (including quotes) when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=True)


def html_attribute(name: str, value: Any) -> str:
    """Render `` name="value"`` with the value escaped, or "" for None.

    Parameters
    ----------
    name : str
        Attribute name, emitted as-is
    value : Any
        Attribute value; converted with ``str()`` and escaped

    Returns
    -------
    str
        The attribute with a leading space, or an empty string

    Examples
    --------
    >>> html_attribute("alt", 'say "hi"')
    ' alt="say &quot;hi&quot;"'
    >>> html_attribute("width", None)
    ''

    """
    if value is None:
        return ""
    return f' {name}="{escape_html(str(value))}"'
