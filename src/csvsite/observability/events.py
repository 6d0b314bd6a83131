"""Event model for site observability.

Defines event types for content loading, sitemap generation, and the
static build.  Pounce lifecycle events are stored alongside them as-is.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Content events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CollectionLoaded:
    """A content collection was read from disk.

    Attributes:
        collection: Collection name (``docs`` or ``blog``).
        record_count: Number of records loaded.
        load_ms: Time spent loading in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    collection: str
    record_count: int
    load_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class EntrySkipped:
    """A content record was left out of the sitemap.

    Attributes:
        source: Identifier of the skipped record.
        reason: Why it was skipped.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    source: str
    reason: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Sitemap events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SitemapGenerated:
    """A sitemap document was assembled.

    Attributes:
        path: URL path the sitemap was produced for (``/sitemap.xml``).
        url_count: Number of ``<url>`` entries.
        skipped: Number of records skipped as malformed.
        duration_ms: Time taken to assemble and render.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    url_count: int
    skipped: int
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Build events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BuildEvent:
    """A static build action occurred.

    Attributes:
        kind: The type of build action.
        source: Source file path (or description).
        target: Output file path (or description).
        duration_ms: Time taken in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: Literal["copy_asset", "generate_sitemap", "write_manifest"]
    source: str
    target: str
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type SiteEvent = (
    CollectionLoaded
    | EntrySkipped
    | SitemapGenerated
    | BuildEvent
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
