"""Sitemap generation — produce sitemap.xml from the docs collection.

The sitemap lists the site's top-level pages followed by one URL per
document in the ``docs`` collection.  Every entry carries the generation
date, a weekly change frequency, and a priority ranked by page kind:

    ""            1.0   home page
    /docs/...     0.8   documentation pages
    anything else 0.9   other top-level pages

The document is rebuilt on every request; nothing is cached.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement, indent, tostring

from csvsite._errors import MalformedIdentifier
from csvsite.config import STATIC_PAGES
from csvsite.content.routes import DOCS_PREFIX, derive_route

if TYPE_CHECKING:
    from csvsite._types import ChangeFrequency, RoutePath
    from csvsite.content.store import ContentRecord
    from csvsite.export.static import ExportedFile
    from csvsite.observability.collector import StackCollector

# XML namespace for sitemaps
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
SITEMAP_PATH = "/sitemap.xml"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
_CHANGE_FREQUENCY: ChangeFrequency = "weekly"


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One ``<url>`` element of the sitemap.

    Attributes:
        path: Site-relative path (``""`` for the home page).
        last_modified: Date written to ``<lastmod>``.
        change_frequency: Value written to ``<changefreq>``.
        priority: Value written to ``<priority>``, between 0.0 and 1.0.

    """

    path: RoutePath
    last_modified: date
    change_frequency: ChangeFrequency
    priority: float

    def loc(self, site_url: str) -> str:
        """Absolute URL of this entry under *site_url*."""
        return site_url + self.path


def priority_for(path: RoutePath) -> float:
    """Return the sitemap priority for a path."""
    if path == "":
        return 1.0
    if path.startswith(DOCS_PREFIX):
        return 0.8
    return 0.9


def _today() -> date:
    return datetime.now(timezone.utc).date()


def render_sitemap(entries: Iterable[SitemapEntry], site_url: str) -> str:
    """Render entries as a sitemap protocol XML document.

    Args:
        entries: Entries in output order.
        site_url: Site origin prefixed to each path.  A trailing slash is
            removed.

    Returns:
        Complete XML string, starting with the XML declaration.

    """
    base = site_url.rstrip("/")

    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)

    for entry in entries:
        url_el = SubElement(urlset, "url")
        SubElement(url_el, "loc").text = entry.loc(base)
        SubElement(url_el, "lastmod").text = entry.last_modified.isoformat()
        SubElement(url_el, "changefreq").text = entry.change_frequency
        SubElement(url_el, "priority").text = f"{entry.priority:.1f}"

    indent(urlset, space="  ")
    xml_body = tostring(urlset, encoding="unicode", xml_declaration=False)
    return f"{_XML_DECLARATION}\n{xml_body}\n"


class SitemapAssembler:
    """Builds the sitemap for a set of docs records.

    Stateless between calls: each ``render()`` derives routes afresh from
    the records it is given.

    Args:
        site_url: Site origin, e.g. ``"https://csvtoolkit.org"``.
        static_pages: Top-level paths listed before document routes.
        collector: Optional observability collector.

    """

    __slots__ = ("_collector", "_site_url", "_static_pages")

    def __init__(
        self,
        site_url: str,
        static_pages: Sequence[RoutePath] = STATIC_PAGES,
        collector: StackCollector | None = None,
    ) -> None:
        self._site_url = site_url.rstrip("/")
        self._static_pages = tuple(static_pages)
        self._collector = collector

    @property
    def site_url(self) -> str:
        """Site origin used as the URL prefix."""
        return self._site_url

    @property
    def static_pages(self) -> tuple[RoutePath, ...]:
        """Top-level pages, in output order."""
        return self._static_pages

    def routes(self, records: Iterable[ContentRecord]) -> list[RoutePath]:
        """Static pages followed by one route per well-formed record.

        Records with malformed identifiers are skipped with a warning on
        stderr; the remaining routes are still returned.
        """
        routes: list[RoutePath] = list(self._static_pages)
        for record in records:
            try:
                routes.append(derive_route(record.id))
            except MalformedIdentifier as exc:
                print(f"  Sitemap: skipping {record.id!r} ({exc})", file=sys.stderr)
                if self._collector is not None:
                    self._collector.record_skip(record.id, str(exc))
        return routes

    def entries(
        self,
        records: Iterable[ContentRecord],
        today: date | None = None,
    ) -> list[SitemapEntry]:
        """Build a :class:`SitemapEntry` for every route."""
        lastmod = today or _today()
        return [
            SitemapEntry(
                path=path,
                last_modified=lastmod,
                change_frequency=_CHANGE_FREQUENCY,
                priority=priority_for(path),
            )
            for path in self.routes(records)
        ]

    def render(
        self,
        records: Iterable[ContentRecord],
        today: date | None = None,
    ) -> str:
        """Assemble and render the sitemap XML for *records*."""
        t0 = time.perf_counter()
        records = list(records)
        entries = self.entries(records, today)
        xml = render_sitemap(entries, self._site_url)

        if self._collector is not None:
            doc_count = len(entries) - len(self._static_pages)
            self._collector.record_sitemap(
                SITEMAP_PATH,
                url_count=len(entries),
                skipped=len(records) - doc_count,
                duration_ms=(time.perf_counter() - t0) * 1000,
            )
        return xml


def write_sitemap(
    assembler: SitemapAssembler,
    records: Iterable[ContentRecord],
    output_dir: Path,
    *,
    today: date | None = None,
) -> ExportedFile | None:
    """Write sitemap.xml to the output directory.

    Returns *None* (with a warning on stderr) if the assembler has no
    site URL.  SiteConfig rejects an empty origin, so this only happens
    for assemblers built directly.

    Args:
        assembler: Configured sitemap assembler.
        records: Records of the ``docs`` collection.
        output_dir: Root export output directory.
        today: Date to stamp entries with (defaults to the current UTC date).

    Returns:
        An :class:`ExportedFile` record for the sitemap, or *None*.

    """
    from csvsite.export.static import ExportedFile

    if not assembler.site_url:
        print(
            "  Sitemap skipped: set site_url in config to enable",
            file=sys.stderr,
        )
        return None

    t0 = time.perf_counter()
    xml = assembler.render(records, today)

    sitemap_path = output_dir / "sitemap.xml"
    data = xml.encode("utf-8")
    sitemap_path.write_bytes(data)
    elapsed = (time.perf_counter() - t0) * 1000

    return ExportedFile(
        source_path=SITEMAP_PATH,
        output_path=sitemap_path,
        source_type="sitemap",
        size_bytes=len(data),
        duration_ms=elapsed,
    )
