"""Slug helpers for post identifiers and category anchors"""

import re


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def slug_from_path(path: str) -> str | None:
    """Post id from a page path: '/posts/hello' and '/posts/hello.html' both give 'hello'.

    Returns None for an empty path or a last segment with some other extension.
    """
    parts = [p for p in path.split('/') if p]
    if not parts:
        return None
    last = parts[-1]
    if last.endswith('.html'):
        return last[:-len('.html')]
    if '.' not in last:
        return last
    return None
