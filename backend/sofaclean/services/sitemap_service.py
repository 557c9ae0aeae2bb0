"""Sitemap generation.

Post entries come from the curated ``SITEMAP_POSTS`` setting rather than the
posts table. ``sitemap_divergence`` reports where the two disagree.
"""

from datetime import datetime, timezone
from typing import Dict, List
from xml.etree import ElementTree

from sqlalchemy.orm import Session

from sofaclean.config import settings
from sofaclean.models.post import Post
from sofaclean.services.seo_service import encode_slug

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _iso(value: str | None = None) -> str:
    if value:
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.isoformat()
    return datetime.now(timezone.utc).isoformat()


def build_entries() -> List[Dict[str, str]]:
    base = settings.site_url()
    now = _iso()
    entries = [
        {"loc": f"{base}/", "lastmod": now, "changefreq": "daily", "priority": "1.0"},
    ]
    for lang in ("en", "th"):
        entries.append({"loc": f"{base}/{lang}", "lastmod": now, "changefreq": "daily", "priority": "1.0"})
        entries.append({"loc": f"{base}/{lang}/blog", "lastmod": now, "changefreq": "weekly", "priority": "0.9"})
    for item in settings.SITEMAP_POSTS:
        entries.append(
            {
                "loc": f"{base}/{item['lang']}/blog/{encode_slug(item['slug'])}",
                "lastmod": _iso(item.get("lastmod")),
                "changefreq": "monthly",
                "priority": "0.8",
            }
        )
    return entries


def render_sitemap_xml(entries: List[Dict[str, str]]) -> str:
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ElementTree.SubElement(urlset, "url")
        for tag in ("loc", "lastmod", "changefreq", "priority"):
            ElementTree.SubElement(url, tag).text = entry[tag]
    body = ElementTree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


def sitemap_divergence(db: Session) -> Dict[str, List[str]]:
    curated = {item["slug"] for item in settings.SITEMAP_POSTS}
    published = {row[0] for row in db.query(Post.slug).filter(Post.status == "published").all()}
    return {
        "missing_from_sitemap": sorted(published - curated),
        "not_published": sorted(curated - published),
    }
