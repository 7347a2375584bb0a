"""Content discovery, MDX compilation, and queries for a Markdown-driven site"""

from sitecontent.config import Settings, load_config
from sitecontent.core.models import BlogPostFrontmatter, ContentDocument, FAQFrontmatter, Frontmatter
from sitecontent.core.parse import compile_document, load_document
from sitecontent.core.query import get_one, get_post, query_all, query_faq, query_posts
from sitecontent.errors import AmbiguousMatchError, ConfigError, ContentError, ParseError, ReadError

__all__ = [
    "AmbiguousMatchError", "BlogPostFrontmatter", "ConfigError", "ContentDocument", "ContentError",
    "FAQFrontmatter", "Frontmatter", "ParseError", "ReadError", "Settings",
    "compile_document", "get_one", "get_post", "load_document", "load_config",
    "query_all", "query_faq", "query_posts",
]
