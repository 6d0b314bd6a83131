"""Content router — serves content-derived endpoints as Chirp routes.

Registers ``/sitemap.xml``, which fetches the ``docs`` collection and
renders the sitemap on every request, plus a JSON stats endpoint over the
event log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from csvsite.export.sitemap import SITEMAP_PATH

if TYPE_CHECKING:
    from chirp import App, Request

    from csvsite.content.store import ContentStore
    from csvsite.export.sitemap import SitemapAssembler
    from csvsite.observability.collector import StackCollector

STATS_ENDPOINT = "/__csvsite/stats"

_XML_CONTENT_TYPE = "application/xml"


class ContentRouter:
    """Routes content-derived documents through Chirp's request/response cycle.

    Args:
        app: Chirp App to register routes on (must not yet be frozen).
        store: Content store queried per request.

    """

    def __init__(self, app: App, store: ContentStore) -> None:
        self._app = app
        self._store = store
        self._route_count = 0

    @property
    def route_count(self) -> int:
        """Number of routes registered so far."""
        return self._route_count

    def register_sitemap_endpoint(self, assembler: SitemapAssembler) -> None:
        """Register ``GET /sitemap.xml``.

        Each request fetches the docs collection and renders a fresh
        document.  A failed fetch raises ``ContentFetchFailure`` out of the
        handler, which Chirp answers with a 500.

        Args:
            assembler: Sitemap assembler configured with the site origin.

        """
        from chirp.http.response import Response

        store = self._store

        async def sitemap_handler(request: Request) -> Any:
            records = await store.fetch_collection("docs")
            return Response(
                body=assembler.render(records),
                status=200,
                content_type=_XML_CONTENT_TYPE,
            )

        sitemap_handler.__name__ = "csvsite_sitemap"
        sitemap_handler.__qualname__ = "ContentRouter.csvsite_sitemap"

        self._app.route(SITEMAP_PATH, methods=["GET"], name="csvsite:sitemap")(sitemap_handler)
        self._route_count += 1

    def register_stats_endpoint(self, collector: StackCollector) -> None:
        """Register the ``/__csvsite/stats`` JSON endpoint.

        Returns event log statistics and the most recent sitemap event.

        Args:
            collector: StackCollector for accessing the event log.

        """
        import json

        async def stats_handler(request: Request) -> Any:
            from chirp.http.response import Response

            from csvsite.observability.events import SitemapGenerated

            latest = collector.log.query(event_type=SitemapGenerated, limit=1)
            payload = json.dumps(
                {
                    "event_log": collector.log.stats(),
                    "last_sitemap": (
                        {
                            "url_count": latest[0].url_count,
                            "skipped": latest[0].skipped,
                            "duration_ms": latest[0].duration_ms,
                        }
                        if latest
                        else None
                    ),
                },
                indent=2,
            )

            return Response(
                body=payload,
                status=200,
                content_type="application/json",
            )

        stats_handler.__name__ = "csvsite_stats"
        stats_handler.__qualname__ = "ContentRouter.csvsite_stats"

        self._app.route(STATS_ENDPOINT, name="csvsite:stats")(stats_handler)
        self._route_count += 1
