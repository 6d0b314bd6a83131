"""csvsite application — content store, sitemap, and Chirp wiring.

The public functions (serve, build, sitemap) are the primary entry points.
"""

import asyncio
import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

from csvsite.config import SiteConfig
from csvsite.config_loader import load_config
from csvsite.content.store import ContentStore
from csvsite.export.sitemap import SitemapAssembler
from csvsite.observability import EventLog, StackCollector

if TYPE_CHECKING:
    from chirp import App

    from csvsite.content.router import ContentRouter
    from csvsite.export.static import ExportResult


def _create_store(config: SiteConfig, collector: StackCollector | None = None) -> ContentStore:
    """Create the content store rooted at ``config.content_path``."""
    return ContentStore(config.content_path, collector=collector)


def _create_assembler(
    config: SiteConfig,
    collector: StackCollector | None = None,
) -> SitemapAssembler:
    """Create a sitemap assembler with the configured origin injected."""
    return SitemapAssembler(config.site_url, config.static_pages, collector=collector)


def _create_chirp_app(config: SiteConfig, *, debug: bool = False) -> App:
    """Create a Chirp App configured for the site."""
    from chirp import App, AppConfig

    app_config = AppConfig(
        template_dir=config.templates_path,
        debug=debug,
        host=config.host,
        port=config.port,
    )
    return App(config=app_config)


def _wire_content_routes(
    app: App,
    config: SiteConfig,
    store: ContentStore,
    collector: StackCollector,
) -> ContentRouter:
    """Register the sitemap and stats endpoints on *app*."""
    from csvsite.content.router import ContentRouter

    router = ContentRouter(app, store)
    router.register_sitemap_endpoint(_create_assembler(config, collector))
    router.register_stats_endpoint(collector)
    return router


def create_app(
    config: SiteConfig,
    *,
    store: ContentStore | None = None,
    collector: StackCollector | None = None,
    debug: bool = False,
) -> App:
    """Build a ready-to-run Chirp App serving ``/sitemap.xml``.

    Args:
        config: Resolved site configuration.
        store: Content store override (defaults to one on ``config.content_path``).
        collector: Observability collector (a fresh one when omitted).
        debug: Enable Chirp debug mode.

    """
    collector = collector if collector is not None else StackCollector(EventLog())
    store = store if store is not None else _create_store(config, collector)
    app = _create_chirp_app(config, debug=debug)
    _wire_content_routes(app, config, store, collector)
    return app


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def sitemap(root: str | Path = ".", **kwargs: object) -> str:
    """Render the sitemap XML for the site at *root*.

    Args:
        root: Path to the site root directory.
        **kwargs: Override SiteConfig fields.

    """
    config = load_config(Path(root), **kwargs)
    store = _create_store(config)
    records = asyncio.run(store.fetch_collection("docs"))
    return _create_assembler(config).render(records)


def build(root: str | Path = ".", **kwargs: object) -> ExportResult:
    """Write the site's static artifacts (assets and sitemap.xml).

    Args:
        root: Path to the site root directory.
        **kwargs: Override SiteConfig fields.

    """
    from csvsite.banner import print_banner
    from csvsite.export.static import StaticExporter

    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    collector = StackCollector(EventLog())
    store = _create_store(config, collector)
    docs = asyncio.run(store.fetch_collection("docs"))
    load_ms = (time.perf_counter() - t0) * 1000

    print_banner(config, len(docs), mode="build", load_ms=load_ms)

    result = StaticExporter(store, config, collector).export(docs)
    _print_export_summary(result)
    return result


def _print_export_summary(result: ExportResult) -> None:
    """Print export completion summary to stderr."""
    lines = [
        "",
        "─" * 41,
    ]
    if result.total_assets > 0:
        lines.append(
            f"  Copied {result.total_assets} asset{'s' if result.total_assets != 1 else ''}"
        )
    if result.sitemap_written:
        lines.append("  Wrote sitemap.xml")
    lines.append(f"  Output: {result.output_dir}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)


def serve(root: str | Path = ".", **kwargs: object) -> None:
    """Run the site as a live Pounce server.

    Every ``/sitemap.xml`` request re-reads the docs collection, so content
    edits show up without a restart.

    Args:
        root: Path to the site root directory.
        **kwargs: Override SiteConfig fields.

    """
    from csvsite.banner import print_banner

    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    collector = StackCollector(EventLog())
    store = _create_store(config, collector)
    doc_count = len(asyncio.run(store.fetch_collection("docs")))

    app = create_app(config, store=store, collector=collector)
    load_ms = (time.perf_counter() - t0) * 1000

    print_banner(config, doc_count, mode="serve", load_ms=load_ms)

    from pounce.config import ServerConfig
    from pounce.server import Server

    server_config = ServerConfig(
        host=config.host,
        port=config.port,
        workers=config.workers,  # 0 = auto-detect via Pounce
    )
    server = Server(server_config, app, lifecycle_collector=collector)
    server.run()
