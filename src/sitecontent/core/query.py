"""Content query API: concurrent load of glob matches, post listing, single lookups"""

import asyncio
import dataclasses
import logging
import posixpath
import re
from pathlib import Path
from typing import Literal, Optional, Union

from sitecontent.config import Settings
from sitecontent.core.loader import enumerate_paths, read_raw_async
from sitecontent.core.models import BlogPostFrontmatter, ContentDocument, FAQFrontmatter, Frontmatter
from sitecontent.core.parse import DEFAULT_PRESET, build_document
from sitecontent.core.utils.dates import to_instant
from sitecontent.errors import AmbiguousMatchError, ParseError


logger = logging.getLogger(__name__)

SLUG_RE = re.compile(r'^[\w-][\w.-]*$')

OnError = Literal["raise", "skip"]


async def _load_one(path: Path, schema: type[Frontmatter], preset: str) -> ContentDocument:
    raw = await read_raw_async(path)
    return await asyncio.to_thread(build_document, path, raw, schema, preset)


def _check_unique_stems(pattern: str, paths: list[Path]) -> None:
    by_stem: dict[str, list[Path]] = {}
    for p in paths:
        by_stem.setdefault(p.stem, []).append(p)
    clashes = [p for group in by_stem.values() if len(group) > 1 for p in group]
    if clashes:
        raise AmbiguousMatchError(pattern, clashes)


async def query_all(
    pattern: str,
    schema: type[Frontmatter] = Frontmatter,
    *,
    root: Optional[Union[str, Path]] = None,
    on_error: OnError = "raise",
    preset: str = DEFAULT_PRESET,
    ) -> list[ContentDocument]:
    """Read and compile every file matching pattern, concurrently.

    Result order is enumeration order. Two matches sharing a filename (march.md
    and march.mdx) raise AmbiguousMatchError. With on_error="raise" the first
    failure aborts the query; with "skip" a ParseError drops only that
    document. ReadError is always fatal.
    """
    paths = enumerate_paths(pattern, root)
    _check_unique_stems(pattern, paths)
    skip = on_error == "skip"
    results = await asyncio.gather(
        *(_load_one(p, schema, preset) for p in paths),
        return_exceptions=skip,
    )
    docs: list[ContentDocument] = []
    for path, result in zip(paths, results):
        if isinstance(result, ParseError):
            logger.warning("Skipping %s: %s", path, result.reason)
            continue
        if isinstance(result, BaseException):
            raise result
        docs.append(result)
    logger.debug("Query %r returned %d of %d document(s)", pattern, len(docs), len(paths))
    return docs


async def get_one(
    pattern: str,
    schema: type[Frontmatter] = Frontmatter,
    *,
    root: Optional[Union[str, Path]] = None,
    preset: str = DEFAULT_PRESET,
    ) -> Optional[ContentDocument]:
    """Return the single document matching pattern, or None when nothing matches.

    More than one match raises AmbiguousMatchError.
    """
    paths = enumerate_paths(pattern, root)
    if not paths:
        return None
    if len(paths) > 1:
        raise AmbiguousMatchError(pattern, paths)
    return await _load_one(paths[0], schema, preset)


def _with_instant(post: ContentDocument) -> ContentDocument:
    """Return post with frontmatter.date coerced to an aware UTC datetime."""
    try:
        instant = to_instant(post.frontmatter.date)
    except ValueError as e:
        raise ParseError(post.source_path, f"invalid date: {e}") from e
    frontmatter = post.frontmatter.model_copy(update={"date": instant})
    return dataclasses.replace(post, frontmatter=frontmatter)


async def query_posts(
    dev_mode: Optional[bool] = None,
    limit: Optional[int] = None,
    *,
    settings: Optional[Settings] = None,
    ) -> list[ContentDocument]:
    """List blog posts newest first.

    Drafts are dropped unless dev_mode (default: settings.dev_mode). Dates are
    coerced to UTC instants, the sort is stable, and a truthy limit keeps only
    the most recent `limit` posts.
    """
    settings = settings or Settings()
    if dev_mode is None:
        dev_mode = settings.dev_mode
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    posts = await query_all(
        settings.blog_pattern,
        BlogPostFrontmatter,
        root=settings.content_dir,
        on_error=settings.on_error,
        preset=settings.parser_config,
    )
    if not dev_mode:
        posts = [p for p in posts if not p.frontmatter.draft]

    posts = sorted((_with_instant(p) for p in posts), key=lambda p: p.frontmatter.date, reverse=True)
    return posts[:limit] if limit else posts


async def get_post(
    slug: str,
    dev_mode: Optional[bool] = None,
    *,
    settings: Optional[Settings] = None,
    ) -> Optional[ContentDocument]:
    """Return the blog post stored as <slug>.md or <slug>.mdx, or None.

    Slugs that are not plain file stems, and drafts outside dev mode, are
    treated as not found.
    """
    settings = settings or Settings()
    if dev_mode is None:
        dev_mode = settings.dev_mode
    if not SLUG_RE.match(slug):
        return None

    blog_dir = posixpath.dirname(settings.blog_pattern)
    post = await get_one(
        posixpath.join(blog_dir, f"{slug}.{{md,mdx}}"),
        BlogPostFrontmatter,
        root=settings.content_dir,
        preset=settings.parser_config,
    )
    if post is None or (post.frontmatter.draft and not dev_mode):
        return None
    return _with_instant(post)


async def query_faq(*, settings: Optional[Settings] = None) -> list[ContentDocument]:
    """List FAQ entries ordered by filename."""
    settings = settings or Settings()
    entries = await query_all(
        settings.faq_pattern,
        FAQFrontmatter,
        root=settings.content_dir,
        on_error=settings.on_error,
        preset=settings.parser_config,
    )
    return sorted(entries, key=lambda e: e.filename)
