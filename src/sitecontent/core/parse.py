"""Frontmatter extraction, schema validation, and the markdown-it extension pipeline"""

import logging
import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from markdown_it import MarkdownIt
from pydantic import ValidationError

from sitecontent.core.loader import read_raw
from sitecontent.core.models import CompiledDocument, ContentDocument, Frontmatter, RenderedContent
from sitecontent.core.rules.code_title import code_title_rule, render_code_title
from sitecontent.core.rules.headings import autolink_heading_rule, heading_slug_rule
from sitecontent.core.rules.highlight import highlight_rule, render_fence
from sitecontent.errors import ParseError


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
DEFAULT_PRESET = 'gfm-like'


def make_parser(preset: str = DEFAULT_PRESET) -> MarkdownIt:
    """Build a MarkdownIt instance with the extension rules in pipeline order.

    code_title runs before highlight so the title is gone from the fence info
    when the lexer is chosen; heading_slug runs before autolink_heading so
    every anchor has an id to point at.
    """
    md = MarkdownIt(preset, options_update={"linkify": True})
    md.core.ruler.push('code_title', code_title_rule)
    md.core.ruler.after('code_title', 'highlight', highlight_rule)
    md.core.ruler.after('highlight', 'heading_slug', heading_slug_rule)
    md.core.ruler.after('heading_slug', 'autolink_heading', autolink_heading_rule)
    md.add_render_rule('code_title', render_code_title)
    md.add_render_rule('fence', render_fence)
    return md


def split_frontmatter(text: str, source_path: Optional[Union[str, Path]] = None) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the leading YAML block removed."""
    text = text.lstrip('\ufeff')
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except (yaml.YAMLError, ValueError) as e:
        raise ParseError(source_path, f"invalid YAML frontmatter: {e}") from e
    if not isinstance(fm, dict):
        raise ParseError(source_path, f"invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    return fm, text[m.end():]


def validate_frontmatter(data: dict[str, Any], schema: type[Frontmatter], source_path=None) -> Frontmatter:
    """Validate raw frontmatter against schema; missing or bad fields raise ParseError."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
        )
        raise ParseError(source_path, f"frontmatter does not match {schema.__name__}: {problems}") from e


def compile_document(
    raw: str,
    schema: type[Frontmatter] = Frontmatter,
    source_path: Optional[Union[str, Path]] = None,
    parser: Optional[MarkdownIt] = None,
    ) -> CompiledDocument:
    """Compile raw Markdown/MDX into validated frontmatter and rendered content."""
    data, body = split_frontmatter(raw, source_path)
    frontmatter = validate_frontmatter(data, schema, source_path)
    md = parser or make_parser()
    env: dict[str, Any] = {}
    try:
        tokens = md.parse(body, env)
    except Exception as e:
        raise ParseError(source_path, f"markdown pipeline failed: {e}") from e
    return CompiledDocument(frontmatter=frontmatter, content=RenderedContent(tokens=tokens, md=md, env=env))


def build_document(
    path: Path,
    raw: str,
    schema: type[Frontmatter] = Frontmatter,
    preset: str = DEFAULT_PRESET,
    ) -> ContentDocument:
    """Compile raw text read from path into a ContentDocument."""
    compiled = compile_document(raw, schema, source_path=path, parser=make_parser(preset))
    logger.debug("Compiled %s as %s", path, schema.__name__)
    return ContentDocument(
        frontmatter=compiled.frontmatter,
        content=compiled.content,
        filename=path.stem,
        source_path=str(path),
    )


def load_document(
    path: Union[str, Path],
    schema: type[Frontmatter] = Frontmatter,
    preset: str = DEFAULT_PRESET,
    ) -> ContentDocument:
    """Read and compile a single content file."""
    path = Path(path)
    return build_document(path, read_raw(path), schema, preset)
