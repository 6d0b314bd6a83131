"""Content store — Markdown collections loaded into typed records.

Reads ``content/<collection>/**/*.md``, parses the YAML front matter block
strictly with PyYAML, takes the body with Patitas, and validates the front
matter against the collection schema.  Each record's identifier is its path
relative to the collection directory (``"acme/overview.md"``).

Front matter values keep their YAML types: ``order: "3"`` stays a string
and fails the ``number`` check.

The store holds no cache: every ``fetch_collection`` call re-reads the
filesystem, so each request sees the content as it is on disk.

Thread Safety:
    Records are frozen.  The store itself only holds immutable paths and
    may be shared across workers.

"""

from __future__ import annotations

import asyncio
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import yaml
from patitas import extract_body

from csvsite._errors import ContentFetchFailure, FrontMatterError
from csvsite.content.schema import schema_for

if TYPE_CHECKING:
    from collections.abc import Mapping

    from csvsite._types import CollectionName, ContentID
    from csvsite.observability.collector import StackCollector

_CONTENT_SUFFIX = ".md"

# Opening fence starts the file; the first line holding only --- closes it
_FRONT_MATTER = re.compile(r"\A---[^\n]*\n(.*?)^[ \t]*---[ \t]*\r?$", re.DOTALL | re.MULTILINE)


def parse_front_matter(text: str, *, source: str = "") -> tuple[dict[str, Any], str]:
    """Split a content file into front matter and Markdown body.

    A file without a closed ``---`` block has empty front matter.

    Raises:
        FrontMatterError: If the block is not valid YAML or not a mapping.

    """
    match = _FRONT_MATTER.match(text)
    if match is None:
        return {}, text.strip()

    where = f"{source}: " if source else ""
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        msg = f"{where}front matter is not valid YAML: {exc}"
        raise FrontMatterError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"{where}front matter must be a mapping, got {type(data).__name__}"
        raise FrontMatterError(msg)
    return data, extract_body(text)


@dataclass(frozen=True, slots=True)
class ContentRecord:
    """A single content file after loading and validation.

    Attributes:
        id: Path relative to the collection directory, slash-separated.
        collection: Collection the record belongs to.
        front_matter: Validated front matter (read-only).
        body: Markdown source after the front matter block.
        source_path: Absolute path of the file, when loaded from disk.

    """

    id: ContentID
    collection: CollectionName
    front_matter: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    body: str = ""
    source_path: Path | None = None


class ContentStore:
    """Loads the ``docs`` and ``blog`` collections from a content directory.

    Args:
        content_path: Directory holding one subdirectory per collection.
        collector: Optional observability collector for load events.

    """

    __slots__ = ("_collector", "_content_path")

    def __init__(self, content_path: Path, collector: StackCollector | None = None) -> None:
        self._content_path = content_path
        self._collector = collector

    @property
    def content_path(self) -> Path:
        """Root content directory."""
        return self._content_path

    async def fetch_collection(self, name: CollectionName) -> list[ContentRecord]:
        """Fetch all records in a named collection.

        Filesystem reads run in a worker thread so the event loop stays free.

        Raises:
            ContentError: If *name* is not a known collection.
            ContentFetchFailure: If the collection cannot be read or decoded,
                or a file fails schema validation.

        """
        schema_for(name)
        try:
            return await asyncio.to_thread(self.load, name)
        except (OSError, UnicodeDecodeError, FrontMatterError) as exc:
            msg = f"Failed to fetch {name!r} collection from {self._content_path}: {exc}"
            raise ContentFetchFailure(msg) from exc

    def load(self, name: CollectionName) -> list[ContentRecord]:
        """Synchronously load and validate every file in a collection.

        A missing collection directory is an empty collection.

        """
        schema = schema_for(name)
        t0 = time.perf_counter()
        collection_dir = self._content_path / name

        records: list[ContentRecord] = []
        if collection_dir.is_dir():
            for path in sorted(collection_dir.rglob(f"*{_CONTENT_SUFFIX}")):
                if not path.is_file():
                    continue
                identifier = path.relative_to(collection_dir).as_posix()
                source = f"{name}/{identifier}"
                metadata, body = parse_front_matter(path.read_text(encoding="utf-8"), source=source)
                front_matter = schema.validate(metadata, source=source)
                records.append(ContentRecord(
                    id=identifier,
                    collection=name,
                    front_matter=MappingProxyType(front_matter),
                    body=body,
                    source_path=path,
                ))

        if self._collector is not None:
            self._collector.record_load(
                name,
                record_count=len(records),
                load_ms=(time.perf_counter() - t0) * 1000,
            )
        return records
