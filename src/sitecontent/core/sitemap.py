"""Sitemap and robots.txt built from the post listing and explicit settings"""

from datetime import UTC, date, datetime
from typing import Optional
from xml.etree import ElementTree as ET

from pydantic import BaseModel

from sitecontent.config import Settings
from sitecontent.core.models import ContentDocument


SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
STATIC_ROUTES = ["", "/blog", "/faq"]


class SitemapEntry(BaseModel):
    url: str
    last_modified: str      # YYYY-MM-DD


def post_url(site_url: str, filename: str) -> str:
    return f"{site_url}/blog/{filename}"


def build_sitemap(
    posts: list[ContentDocument],
    settings: Settings,
    today: Optional[date] = None,
    ) -> list[SitemapEntry]:
    """Static routes stamped with today, then one entry per post stamped with its date.

    posts are expected as returned by query_posts (dates already UTC instants).
    """
    base = settings.require_site_url()
    stamp = (today or datetime.now(UTC).date()).isoformat()
    routes = [SitemapEntry(url=f"{base}{route}", last_modified=stamp) for route in STATIC_ROUTES]
    blogs = [
        SitemapEntry(url=post_url(base, p.filename), last_modified=p.frontmatter.date.date().isoformat())
        for p in posts
    ]
    return routes + blogs


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    """Serialize entries as a sitemaps.org <urlset> document."""
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        ET.SubElement(url, "lastmod").text = entry.last_modified
    ET.indent(urlset)
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def build_robots(settings: Settings) -> str:
    """Allow all crawlers and point them at the sitemap."""
    base = settings.require_site_url()
    return f"User-agent: *\nAllow: /\n\nSitemap: {base}/sitemap.xml\n"
