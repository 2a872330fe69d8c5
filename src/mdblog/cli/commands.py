"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.dates import format_date_dmy
from mdblog.core.pipeline import run_build, run_render, run_render_post
from mdblog.core.posts import group_by_category, load_posts, sort_newest_first


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else _settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def render_cmd(
    path: Annotated[Optional[Path], typer.Argument(help="Markdown file to convert")] = None,
    post_id: Annotated[Optional[str], typer.Option("--id", help="Post id or page path, resolved through the posts index")] = None,
    site_root: Annotated[Optional[str], typer.Option("--site-root", help="Directory markdown paths resolve against")] = None,
    index: Annotated[Optional[str], typer.Option("--posts-index", help="JSON posts index")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write the HTML fragment here instead of stdout")] = None,
    ):
    """Convert one markdown file, or one indexed post, to an HTML fragment."""
    if (path is None) == (post_id is None):
        _fail("Give either a markdown PATH or --id, not both")
    settings = _settings(overrides={"site_root": site_root, "posts_index": index})
    try:
        if post_id is not None:
            fragment = run_render_post(Path(settings.site_root), Path(settings.posts_index), post_id, out)
        else:
            fragment = run_render(path, out)
    except ValueError as e:
        _fail(str(e))
    except RuntimeError as e:
        _fail("Render failed", e)
    if out is None:
        typer.echo(fragment)
    else:
        typer.echo(f"  {path or post_id} -> {out}")


def build_cmd(
    site_root: Annotated[Optional[str], typer.Option("--site-root", help="Directory markdown paths resolve against")] = None,
    index: Annotated[Optional[str], typer.Option("--posts-index", help="JSON posts index")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    locale: Annotated[Optional[str], typer.Option("--locale", help="pt or en")] = None,
    ):
    """Render every post in the index plus the index and categories pages."""
    settings = _settings(overrides={
        "site_root": site_root, "posts_index": index, "output_dir": out, "locale": locale,
    })
    output_dir = Path(settings.output_dir)
    try:
        results = run_build(
            Path(settings.site_root), Path(settings.posts_index), output_dir,
            settings.locale, settings.site_title,
        )
    except ValueError as e:
        _fail(str(e))
    except RuntimeError as e:
        _fail("Build failed", e)
    for post_id, page_path in results:
        typer.echo(f"  {post_id} -> {page_path}")
    typer.echo(f"Built {len(results)} post(s) to {output_dir}/")


def _load(index: Optional[str]) -> list:
    settings = _settings(overrides={"posts_index": index})
    try:
        return load_posts(Path(settings.posts_index))
    except ValueError as e:
        _fail(str(e))


def list_cmd(
    index: Annotated[Optional[str], typer.Option("--posts-index", help="JSON posts index")] = None,
    ):
    """List posts, newest first."""
    posts = _load(index)
    if not posts:
        typer.echo("No posts found.")
        raise typer.Exit(1)
    for post in sort_newest_first(posts):
        typer.echo(f"{format_date_dmy(post.date):<10}  {post.id}  {post.title}")


def categories_cmd(
    index: Annotated[Optional[str], typer.Option("--posts-index", help="JSON posts index")] = None,
    ):
    """List categories with the posts filed under each."""
    groups = group_by_category(_load(index))
    if not groups:
        typer.echo("No categories found.")
        raise typer.Exit(1)
    for category, posts in groups.items():
        typer.echo(f"{category} ({len(posts)})")
        for post in posts:
            typer.echo(f"  {post.id}")
