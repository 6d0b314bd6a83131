"""Static export — write the site's build artifacts to disk.

Produces the files a static host needs next to the rendered pages:
copied (and optionally fingerprinted) public assets and ``sitemap.xml``.
"""

from __future__ import annotations

import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from csvsite._errors import ContentError, ExportError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from csvsite.config import SiteConfig
    from csvsite.content.store import ContentRecord, ContentStore
    from csvsite.observability.collector import StackCollector


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during export.

    Attributes:
        source_path: Logical source (e.g., ``"/sitemap.xml"``).
        output_path: Absolute filesystem path to the written file.
        source_type: Category of the exported file.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to produce and write this file.

    """

    source_path: str
    output_path: Path
    source_type: Literal["asset", "sitemap", "manifest"]
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Aggregate result of a full static export.

    Attributes:
        files: All files written during export.
        total_assets: Number of static asset files copied.
        sitemap_written: Whether ``sitemap.xml`` was produced.
        duration_ms: Total wall-clock time for the export.
        output_dir: Absolute path to the output directory.

    """

    files: tuple[ExportedFile, ...]
    total_assets: int
    sitemap_written: bool
    duration_ms: float
    output_dir: Path


class StaticExporter:
    """Exports the site's static artifacts.

    Args:
        store: Content store to read the ``docs`` collection from.
        config: Frozen site configuration.
        collector: Optional observability collector.

    """

    def __init__(
        self,
        store: ContentStore,
        config: SiteConfig,
        collector: StackCollector | None = None,
    ) -> None:
        self._store = store
        self._config = config
        self._collector = collector

    def export(self, docs: Sequence[ContentRecord] | None = None) -> ExportResult:
        """Run the full export pipeline and return the result.

        Args:
            docs: Already-loaded ``docs`` records.  Loaded from the store
                when omitted.

        Pipeline order:
            1. Clean output directory
            2. Copy public assets
            3. Fingerprint stylesheets/scripts and write manifest (if enabled)
            4. Generate sitemap

        Raises:
            ExportError: If any step of the pipeline fails.

        """
        start = time.perf_counter()
        output_dir = self._config.output_path

        try:
            self._clean_output(output_dir)
            all_files: list[ExportedFile] = list(self._copy_assets(output_dir))
            total_assets = len(all_files)

            if self._config.fingerprint:
                all_files.extend(self._fingerprint_assets(output_dir, tuple(all_files)))

            if docs is None:
                docs = self._store.load("docs")
            sitemap = self._generate_sitemap(output_dir, docs)
            if sitemap is not None:
                all_files.append(sitemap)
        except (OSError, UnicodeDecodeError, ContentError) as exc:
            msg = f"Static export to {output_dir} failed: {exc}"
            raise ExportError(msg) from exc

        elapsed = (time.perf_counter() - start) * 1000

        return ExportResult(
            files=tuple(all_files),
            total_assets=total_assets,
            sitemap_written=sitemap is not None,
            duration_ms=elapsed,
            output_dir=output_dir,
        )

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _clean_output(self, output_dir: Path) -> None:
        """Remove and recreate the output directory."""
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    def _copy_assets(self, output_dir: Path) -> tuple[ExportedFile, ...]:
        """Copy public assets into the output root."""
        from csvsite.export.assets import copy_assets

        files = copy_assets(self._config.static_path, output_dir)
        if self._collector is not None:
            for f in files:
                self._collector.record_build(
                    "copy_asset", f.source_path, str(f.output_path),
                    duration_ms=f.duration_ms,
                )
        return files

    def _fingerprint_assets(
        self,
        output_dir: Path,
        assets: tuple[ExportedFile, ...],
    ) -> list[ExportedFile]:
        """Hash asset filenames and write ``manifest.json``."""
        from csvsite.export.assets import fingerprint_assets, write_manifest

        t0 = time.perf_counter()
        manifest = fingerprint_assets(output_dir, assets, self._config.build)
        manifest_path = write_manifest(output_dir, manifest)
        elapsed = (time.perf_counter() - t0) * 1000

        if self._collector is not None:
            self._collector.record_build(
                "write_manifest", "/manifest.json", str(manifest_path),
                duration_ms=elapsed,
            )
        return [ExportedFile(
            source_path="/manifest.json",
            output_path=manifest_path,
            source_type="manifest",
            size_bytes=manifest_path.stat().st_size,
            duration_ms=elapsed,
        )]

    def _generate_sitemap(
        self,
        output_dir: Path,
        docs: Sequence[ContentRecord],
    ) -> ExportedFile | None:
        """Generate sitemap.xml from the docs collection."""
        from csvsite.export.sitemap import SitemapAssembler, write_sitemap

        assembler = SitemapAssembler(
            self._config.site_url,
            self._config.static_pages,
            collector=self._collector,
        )
        result = write_sitemap(assembler, docs, output_dir)
        if result is not None and self._collector is not None:
            self._collector.record_build(
                "generate_sitemap", result.source_path, str(result.output_path),
                duration_ms=result.duration_ms,
            )
        return result
