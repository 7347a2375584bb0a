"""Frontmatter schemas and compiled content records"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode
from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitecontent.core.utils.dates import to_instant


class Frontmatter(BaseModel):
    """Base schema: no required fields, unknown keys kept as extras."""
    model_config = ConfigDict(frozen=True, extra="allow")


class BlogPostFrontmatter(Frontmatter):
    title: str
    date: Union[datetime.datetime, datetime.date, str] = Field(strict=True)
    draft: bool = False

    @field_validator("date")
    @classmethod
    def _date_must_parse(cls, value):
        to_instant(value)
        return value


class FAQFrontmatter(Frontmatter):
    question: str


T = TypeVar("T", bound=Frontmatter)


@dataclass(frozen=True)
class RenderedContent:
    """Token stream produced by the extension pipeline; not persisted.

    `tree` is the neutral syntax tree handed to the presentation layer,
    `html` is that tree serialized with the parser's render rules.
    """
    tokens: list[Token]
    md: MarkdownIt = field(repr=False, compare=False)
    env: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def tree(self) -> SyntaxTreeNode:
        return SyntaxTreeNode(self.tokens)

    @property
    def html(self) -> str:
        return self.md.renderer.render(self.tokens, self.md.options, self.env)

    def heading_ids(self) -> list[str]:
        """Return the anchor ids assigned to headings, in document order."""
        return [t.attrGet('id') for t in self.tokens if t.type == 'heading_open' and t.attrGet('id')]


@dataclass(frozen=True)
class CompiledDocument(Generic[T]):
    frontmatter: T
    content: RenderedContent


@dataclass(frozen=True)
class ContentDocument(Generic[T]):
    """A compiled content file; filename is the basename without extension."""
    frontmatter: T
    content: RenderedContent
    filename:    str
    source_path: str

