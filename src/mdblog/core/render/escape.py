"""HTML entity escaping for text and attribute values"""

import html


def escape_html(text: str | None) -> str:
    """Escape &, < and > (in that order). None becomes an empty string.

    Not idempotent: apply at most once per literal segment.
    """
    return html.escape(text or "", quote=False)


def escape_attr(value: str) -> str:
    """Escape a value that is already HTML-safe text for use inside a double-quoted attribute."""
    return value.replace('"', "&quot;")
