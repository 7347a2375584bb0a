"""CLI command implementations"""

import asyncio
import html
import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from sitecontent.config import Settings, load_config
from sitecontent.core.query import get_post, query_faq, query_posts
from sitecontent.core.sitemap import build_robots, build_sitemap, render_sitemap_xml
from sitecontent.errors import ConfigError, ContentError


ContentDirOpt = Annotated[Optional[str], typer.Option("--content-dir", help="Content root directory")]
SiteUrlOpt = Annotated[Optional[str], typer.Option("--site-url", help="Absolute base URL of the site")]


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
    except ConfigError as e:
        _fail(str(e))


def _run(coro, what: str):
    """Run a query coroutine, mapping content errors to a clean exit."""
    try:
        return asyncio.run(coro)
    except ContentError as e:
        _fail(f"{what} failed", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Query Markdown/MDX site content: posts, FAQ, sitemap."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def posts_cmd(
    dev: Annotated[bool, typer.Option("--dev", help="Include draft posts")] = False,
    limit: Annotated[Optional[int], typer.Option("--limit", min=0, help="Show only the N most recent posts")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print posts as JSON")] = False,
    content_dir: ContentDirOpt = None,
    ):
    """List blog posts, newest first."""
    settings = _settings(overrides={"content_dir": content_dir, "dev_mode": dev or None})
    posts = _run(query_posts(limit=limit, settings=settings), "Post listing")

    if as_json:
        typer.echo(json.dumps([
            {
                "slug": p.filename,
                "title": p.frontmatter.title,
                "date": p.frontmatter.date.date().isoformat(),
                "draft": p.frontmatter.draft,
            }
            for p in posts
        ], indent=2))
        return

    if not posts:
        typer.echo("No posts found.")
        return
    for p in posts:
        marker = " (draft)" if p.frontmatter.draft else ""
        typer.echo(f"{p.frontmatter.date.date().isoformat()}  {p.filename}  {p.frontmatter.title}{marker}")


def post_cmd(
    slug: Annotated[str, typer.Argument(help="Post filename without extension")],
    dev: Annotated[bool, typer.Option("--dev", help="Allow draft posts")] = False,
    content_dir: ContentDirOpt = None,
    ):
    """Print a single post rendered as HTML."""
    settings = _settings(overrides={"content_dir": content_dir, "dev_mode": dev or None})
    post = _run(get_post(slug, settings=settings), "Post lookup")
    if post is None:
        _fail(f"Post not found: {slug}")
    typer.echo(f"<h1>{html.escape(post.frontmatter.title)}</h1>")
    typer.echo(post.content.html, nl=False)


def faq_cmd(
    as_json: Annotated[bool, typer.Option("--json", help="Print entries as JSON with rendered answers")] = False,
    content_dir: ContentDirOpt = None,
    ):
    """List FAQ questions."""
    settings = _settings(overrides={"content_dir": content_dir})
    entries = _run(query_faq(settings=settings), "FAQ listing")
    if as_json:
        typer.echo(json.dumps([
            {"slug": e.filename, "question": e.frontmatter.question, "html": e.content.html}
            for e in entries
        ], indent=2, ensure_ascii=False))
        return
    for e in entries:
        typer.echo(f"{e.filename}: {e.frontmatter.question}")


def sitemap_cmd(
    out: Annotated[Optional[Path], typer.Option("--out", help="Write sitemap.xml here instead of stdout")] = None,
    content_dir: ContentDirOpt = None,
    site_url: SiteUrlOpt = None,
    ):
    """Build sitemap.xml from static routes and published posts."""
    settings = _settings(overrides={"content_dir": content_dir, "site_url": site_url})
    posts = _run(query_posts(dev_mode=False, settings=settings), "Post listing")
    try:
        xml = render_sitemap_xml(build_sitemap(posts, settings))
    except ConfigError as e:
        _fail(str(e))
    if out is None:
        typer.echo(xml, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(xml, encoding="utf-8")
    typer.echo(f"Wrote {len(posts)} post(s) to {out}")


def robots_cmd(site_url: SiteUrlOpt = None):
    """Print robots.txt pointing crawlers at the sitemap."""
    settings = _settings(overrides={"site_url": site_url})
    try:
        typer.echo(build_robots(settings), nl=False)
    except ConfigError as e:
        _fail(str(e))
