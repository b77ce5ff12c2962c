"""Sitemap and robots.txt output for the reader."""

from __future__ import annotations

from lxml import etree

from vibedocs.config import VIBEDOCS_SITE_URL
from vibedocs.navigation import flatten_sections
from vibedocs.schemas import DocSection, SitemapEntry
from vibedocs.search import iter_section_documents

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

HOME_PRIORITY = 1.0
LANDING_PRIORITY = 0.9
DOCUMENT_PRIORITY = 0.8

DISALLOWED_PATHS = ("/api/", "/_next/")


def build_sitemap(
    sections: list[DocSection], site_url: str = VIBEDOCS_SITE_URL
) -> list[SitemapEntry]:
    """Home page, the first document in reading order, then every document."""
    base = site_url.rstrip("/")
    modified = {
        (doc.section, doc.slug): doc.last_modified
        for doc in iter_section_documents(sections)
    }
    newest = max((value for value in modified.values() if value), default=None)

    entries = [SitemapEntry(url=base, last_modified=newest, priority=HOME_PRIORITY)]
    ordered = flatten_sections(sections)
    if ordered:
        landing = ordered[0]
        entries.append(
            SitemapEntry(
                url=f"{base}{landing.href}",
                last_modified=modified.get((landing.section, landing.document)),
                priority=LANDING_PRIORITY,
            )
        )
    for item in ordered:
        entries.append(
            SitemapEntry(
                url=f"{base}{item.href}",
                last_modified=modified.get((item.section, item.document)),
                priority=DOCUMENT_PRIORITY,
            )
        )
    return entries


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    urlset = etree.Element(_tag("urlset"), nsmap={None: SITEMAP_NS})
    for entry in entries:
        url = etree.SubElement(urlset, _tag("url"))
        etree.SubElement(url, _tag("loc")).text = entry.url
        if entry.last_modified is not None:
            etree.SubElement(url, _tag("lastmod")).text = entry.last_modified.isoformat()
        etree.SubElement(url, _tag("changefreq")).text = entry.change_frequency
        etree.SubElement(url, _tag("priority")).text = f"{entry.priority:.1f}"
    return etree.tostring(
        urlset, xml_declaration=True, encoding="UTF-8", pretty_print=True
    ).decode("utf-8")


def render_robots_txt(site_url: str = VIBEDOCS_SITE_URL) -> str:
    lines = ["User-agent: *", "Allow: /"]
    lines.extend(f"Disallow: {path}" for path in DISALLOWED_PATHS)
    lines.append(f"Sitemap: {site_url.rstrip('/')}/sitemap.xml")
    return "\n".join(lines) + "\n"


def _tag(name: str) -> str:
    return f"{{{SITEMAP_NS}}}{name}"
