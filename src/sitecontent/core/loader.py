"""Glob enumeration and raw reads of content files"""

import asyncio
import glob
import logging
import os
from pathlib import Path
from typing import Optional, Union

from sitecontent.errors import ReadError


logger = logging.getLogger(__name__)


def expand_braces(pattern: str) -> list[str]:
    """Expand {a,b} alternatives, e.g. 'blog/*.{mdx,md}' -> ['blog/*.mdx', 'blog/*.md'].

    Nested groups expand left to right. Unbalanced or single-item groups are
    left as literal text.
    """
    depth = 0
    start = None
    commas: list[int] = []
    for i, ch in enumerate(pattern):
        if ch == '{':
            if depth == 0:
                start, commas = i, []
            depth += 1
        elif ch == '}' and depth:
            depth -= 1
            if depth == 0 and commas:
                bounds = [start] + commas + [i]
                options = [pattern[a + 1:b] for a, b in zip(bounds, bounds[1:])]
                head, tail = pattern[:start], pattern[i + 1:]
                return [
                    expanded
                    for option in options
                    for expanded in expand_braces(head + option + tail)
                ]
        elif ch == ',' and depth == 1:
            commas.append(i)
    return [pattern]


def enumerate_paths(pattern: str, root: Optional[Union[str, Path]] = None) -> list[Path]:
    """Resolve pattern against the filesystem at call time.

    Relative patterns are resolved under root (default: cwd). Matches are
    regular files only, de-duplicated across brace alternatives, sorted within
    each alternative and otherwise kept in alternative order.
    """
    base = Path(root) if root is not None else Path.cwd()
    found: dict[Path, None] = {}
    for alternative in expand_braces(pattern):
        if os.path.isabs(alternative):
            matches = sorted(Path(p) for p in glob.glob(alternative, recursive=True))
        else:
            matches = sorted(base / p for p in glob.glob(alternative, root_dir=base, recursive=True))
        for p in matches:
            if p.is_file():
                found.setdefault(p)
    logger.debug("Pattern %r under %s matched %d file(s)", pattern, base, len(found))
    return list(found)


def read_raw(path: Union[str, Path]) -> str:
    """Read a content file as UTF-8 text; any failure raises ReadError."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, str(e)) from e


async def read_raw_async(path: Union[str, Path]) -> str:
    """read_raw on a worker thread so many files can be read concurrently."""
    return await asyncio.to_thread(read_raw, path)
