"""Application configuration: settings schema and sitecontent.yaml loader"""

import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from sitecontent.errors import ConfigError


CONFIG_FILE = "sitecontent.yaml"
ENV_PREFIX = "SITECONTENT_"


class Settings(BaseModel):
    site_url:      Optional[str] = Field(default=None, description="Absolute base URL used in sitemap/robots")
    content_dir:   str = Field(default="src/content", description="Root directory that content patterns resolve under")
    blog_pattern:  str = Field(default="blog/*.{mdx,md}", description="Glob for blog posts, relative to content_dir")
    faq_pattern:   str = Field(default="faq/*.{mdx,md}",  description="Glob for FAQ entries, relative to content_dir")
    dev_mode:      bool = Field(default=False, description="Include draft posts in listings")
    on_error:      Literal["raise", "skip"] = Field(default="raise", description="Policy for documents that fail to parse")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")

    def require_site_url(self) -> str:
        """Return site_url without a trailing slash; raise ConfigError if unset."""
        if not self.site_url:
            raise ConfigError(f"site_url is not set (use {CONFIG_FILE}, {ENV_PREFIX}SITE_URL, or --site-url)")
        return self.site_url.rstrip("/")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from sitecontent.yaml, then SITECONTENT_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
