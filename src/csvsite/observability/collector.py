"""Stack collector — one entry point for recording site events.

Implements Pounce's ``LifecycleCollector`` protocol so it can be passed
directly to Pounce workers, and adds ``record_*`` helpers for content,
sitemap, and build events.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

from typing import Any

from csvsite.observability.events import (
    BuildEvent,
    CollectionLoaded,
    EntrySkipped,
    SitemapGenerated,
    now_ns,
)
from csvsite.observability.log import EventLog


class StackCollector:
    """Unified event collector.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Pounce LifecycleCollector protocol -----

    def record(self, event: Any) -> None:
        """Record a Pounce lifecycle event (stored unchanged)."""
        self._log.append(event)

    # ----- Content events -----

    def record_load(
        self,
        collection: str,
        *,
        record_count: int = 0,
        load_ms: float = 0.0,
    ) -> None:
        """Record a collection load."""
        self._log.append(
            CollectionLoaded(
                collection=collection,
                record_count=record_count,
                load_ms=load_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_skip(self, source: str, reason: str) -> None:
        """Record a record left out of the sitemap."""
        self._log.append(EntrySkipped(source=source, reason=reason, timestamp_ns=now_ns()))

    # ----- Sitemap events -----

    def record_sitemap(
        self,
        path: str,
        *,
        url_count: int = 0,
        skipped: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a generated sitemap."""
        self._log.append(
            SitemapGenerated(
                path=path,
                url_count=url_count,
                skipped=skipped,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    # ----- Build events -----

    def record_build(
        self,
        kind: str,
        source: str,
        target: str,
        *,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a build pipeline event."""
        self._log.append(
            BuildEvent(
                kind=kind,  # type: ignore[arg-type]
                source=source,
                target=target,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )
