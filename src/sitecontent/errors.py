"""Exception hierarchy for content loading, compilation, and configuration"""

from pathlib import Path
from typing import Optional, Union


class ContentError(Exception):
    """Base class for all sitecontent errors."""


class ReadError(ContentError):
    """A matched content file could not be read. Aborts the whole query."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read {self.path}: {reason}")


class ParseError(ContentError, ValueError):
    """Frontmatter, body, or date of a single document is malformed."""

    def __init__(self, path: Optional[Union[str, Path]], reason: str):
        self.path = str(path) if path is not None else "<string>"
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")


class AmbiguousMatchError(ContentError):
    """A single-document pattern matched more than one file."""

    def __init__(self, pattern: str, paths: list):
        self.pattern = pattern
        self.paths = [str(p) for p in paths]
        super().__init__(f"Pattern {pattern!r} matched {len(self.paths)} files: {', '.join(self.paths)}")


class ConfigError(ContentError, ValueError):
    """Settings are invalid or a required setting is missing."""
