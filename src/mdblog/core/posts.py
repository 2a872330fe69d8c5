"""Posts index loading, lookup, ordering, and path resolution"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from mdblog.core.models import PostRecord


logger = logging.getLogger(__name__)

_POSTS_ADAPTER = TypeAdapter(list[PostRecord])


def load_posts(path: Path) -> list[PostRecord]:
    """Read the JSON posts index at path."""
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except OSError as e:
        raise ValueError(f"Could not load posts index: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid posts index {path}: {e}") from e
    try:
        posts = _POSTS_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ValueError(f"Invalid posts index {path}: {e}") from e
    logger.debug("loaded %d posts from %s", len(posts), path)
    return posts


def find_post(posts: list[PostRecord], post_id: str) -> PostRecord:
    for post in posts:
        if post.id == post_id:
            return post
    raise ValueError(f"Post not found: {post_id}")


def sort_newest_first(posts: list[PostRecord]) -> list[PostRecord]:
    """Order by date descending; ISO dates sort lexically, undated posts go last."""
    dated = sorted((p for p in posts if p.date), key=lambda p: p.date, reverse=True)
    return dated + [p for p in posts if not p.date]


def group_by_category(posts: list[PostRecord]) -> dict[str, list[PostRecord]]:
    """Map category -> posts (index order), with categories sorted alphabetically."""
    groups: dict[str, list[PostRecord]] = {}
    for post in posts:
        groups.setdefault(post.category, []).append(post)
    return {cat: groups[cat] for cat in sorted(groups)}


def resolve_body_path(post: PostRecord) -> str:
    """Site-root-relative markdown path: the explicit md field, else posts/<id>.md."""
    return (post.md or f"posts/{post.id}.md").lstrip('/')


def page_href(post: PostRecord) -> str:
    """Absolute URL path of the published post page."""
    return '/' + (post.file or f"posts/{post.id}.html").lstrip('/')
