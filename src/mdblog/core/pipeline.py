"""Pipeline step functions: render a single file or post, build the whole site"""

import logging
from pathlib import Path

from mdblog.core.models import PostRecord
from mdblog.core.pages import (
    LABELS,
    category_section_html,
    empty_categories_html,
    error_card_html,
    page_html,
    post_card_html,
    post_meta_html,
)
from mdblog.core.parse import read_markdown, read_post_body
from mdblog.core.posts import find_post, group_by_category, load_posts, page_href, sort_newest_first
from mdblog.core.render.convert import md_to_html
from mdblog.core.utils.slug import slug_from_path


logger = logging.getLogger(__name__)


def _write(path: Path, text: str) -> None:
    """Write text to path, creating parent directories. OSError becomes RuntimeError."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
    except OSError as e:
        raise RuntimeError(f"Failed to write {path}: {e}") from e


def _page_path(output_dir: Path, post: PostRecord) -> Path:
    """Output file for a post page; must stay inside output_dir."""
    path = output_dir / page_href(post).lstrip('/')
    if not path.resolve().is_relative_to(output_dir.resolve()):
        raise ValueError(f"Page path escapes output directory: {page_href(post)}")
    return path


def run_render(source: Path, dest: Path | None = None) -> str:
    """Convert one markdown file to an HTML fragment, writing it to dest when given."""
    fragment = md_to_html(read_markdown(source))
    if dest is not None:
        _write(dest, fragment)
        logger.info("rendered %s -> %s", source, dest)
    return fragment


def run_render_post(
    site_root: Path,
    posts_index: Path,
    ref: str,
    dest: Path | None = None,
    ) -> str:
    """Render a post looked up in the index by id or page path ('hello', '/posts/hello.html')."""
    post_id = slug_from_path(ref)
    if post_id is None:
        raise ValueError(f"Not a post id or page path: {ref}")
    post = find_post(load_posts(posts_index), post_id)
    fragment = md_to_html(read_post_body(site_root, post))
    if dest is not None:
        _write(dest, fragment)
        logger.info("rendered post %s -> %s", post.id, dest)
    return fragment


def run_build(
    site_root: Path,
    posts_index: Path,
    output_dir: Path,
    locale: str = 'pt',
    site_title: str = 'Blog',
    ) -> list[tuple[str, Path]]:
    """Write index.html, categories.html and one page per post. Returns (post_id, page_path) pairs.

    A post whose body cannot be loaded is published with the error card in
    place of its content. A post whose page path leaves output_dir is skipped.
    The build continues in both cases.
    """
    posts = load_posts(posts_index)
    results = []

    for post in posts:
        try:
            page_path = _page_path(output_dir, post)
        except ValueError as e:
            logger.warning("post %s skipped: %s", post.id, e)
            continue
        try:
            content = md_to_html(read_post_body(site_root, post))
        except ValueError as e:
            logger.warning("post %s: %s", post.id, e)
            content = error_card_html(str(e), locale)
        _write(page_path, page_html(post.title, content, post_meta_html(post, locale), lang=locale))
        results.append((post.id, page_path))

    cards = ''.join(post_card_html(p) for p in sort_newest_first(posts))
    _write(output_dir / 'index.html', page_html(site_title, cards, lang=locale))

    groups = group_by_category(posts)
    sections = ''.join(category_section_html(c, ps) for c, ps in groups.items()) or empty_categories_html(locale)
    _write(output_dir / 'categories.html', page_html(LABELS[locale]['categories'], sections, lang=locale))

    logger.info("built %d post page(s) into %s", len(results), output_dir)
    return results
