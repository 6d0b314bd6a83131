"""Site observability — a unified event model for content, sitemap, and build.

Aggregates events from:
- **Pounce**: Connection lifecycle (open, request, response, disconnect, close)
- **Content store**: Collection loads
- **Sitemap**: Generated documents and skipped records
- **Build**: Asset copies and written files

Quick Start:
    >>> from csvsite.observability import StackCollector, EventLog
    >>> log = EventLog()
    >>> collector = StackCollector(log)
    >>> collector.record_load("docs", record_count=12)

"""

from csvsite.observability.collector import StackCollector
from csvsite.observability.events import (
    BuildEvent,
    CollectionLoaded,
    EntrySkipped,
    SiteEvent,
    SitemapGenerated,
    now_ns,
)
from csvsite.observability.log import EventLog

__all__ = [
    "BuildEvent",
    "CollectionLoaded",
    "EntrySkipped",
    "EventLog",
    "SiteEvent",
    "SitemapGenerated",
    "StackCollector",
    "now_ns",
]
