"""Root test configuration: shared content-tree fixtures"""

from pathlib import Path

import pytest

from sitecontent.config import Settings


def _write_post(blog_dir: Path, name: str, title: str, date: str, draft: bool = None, body: str = "Body.\n") -> Path:
    """Write a blog post with frontmatter into blog_dir and return its path."""
    lines = ["---", f"title: {title}", f"date: {date}"]
    if draft is not None:
        lines.append(f"draft: {'true' if draft else 'false'}")
    lines.append("---")
    path = blog_dir / name
    path.write_text("\n".join(lines) + "\n\n" + body, encoding="utf-8")
    return path


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path):
    """Content root with empty blog/ and faq/ directories."""
    root = tmp_path / "content"
    (root / "blog").mkdir(parents=True)
    (root / "faq").mkdir(parents=True)
    return root


@pytest.fixture(name="settings")
def settings_fixture(content_dir):
    return Settings(content_dir=str(content_dir), site_url="https://example.com")


@pytest.fixture(name="three_posts")
def three_posts_fixture(content_dir):
    """The canonical trio: an old draft and two published posts."""
    blog = content_dir / "blog"
    _write_post(blog, "new-year.md", "New Year", "2024-01-01", draft=True)
    _write_post(blog, "february.mdx", "February", "2024-02-01")
    _write_post(blog, "march.md", "March", "2024-03-01", draft=False)
    return blog


@pytest.fixture(name="write_post")
def write_post_fixture():
    """Expose _write_post to tests that build their own blog directory."""
    return _write_post
