"""Frontmatter stripping and post body loading"""

import re
from pathlib import Path
from typing import Any

import yaml

from mdblog.core.models import PostRecord
from mdblog.core.posts import resolve_body_path


FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)', re.DOTALL)


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def read_markdown(path: Path) -> str:
    """Read a markdown file and return its body without frontmatter."""
    try:
        raw = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ValueError(f"Could not load: {path}") from e
    _, body = strip_frontmatter(raw)
    return body


def read_post_body(site_root: Path, post: PostRecord) -> str:
    """Resolve and read the markdown body of a post relative to site_root."""
    return read_markdown(site_root / resolve_body_path(post))
