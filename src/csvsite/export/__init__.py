"""Export layer — sitemap generation and static output.

Assembles the XML sitemap served at ``/sitemap.xml`` and writes the same
document, plus public assets, during ``csvsite build``.
"""

from csvsite.export.sitemap import SitemapAssembler, SitemapEntry, render_sitemap
from csvsite.export.static import ExportedFile, ExportResult, StaticExporter

__all__ = [
    "ExportResult",
    "ExportedFile",
    "SitemapAssembler",
    "SitemapEntry",
    "StaticExporter",
    "render_sitemap",
]
