"""Tests for csvsite.export.static — StaticExporter pipeline."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from csvsite._errors import ExportError
from csvsite.config import SiteConfig
from csvsite.content.store import ContentStore
from csvsite.export.static import StaticExporter
from csvsite.observability import BuildEvent, StackCollector


def _exporter(root: Path, collector: StackCollector | None = None, **kwargs: object) -> StaticExporter:
    config = SiteConfig(root=root, **kwargs)  # type: ignore[arg-type]
    return StaticExporter(ContentStore(config.content_path), config, collector)


class TestStaticExporter:
    """StaticExporter.export — clean, copy, fingerprint, sitemap."""

    def test_exports_assets_and_sitemap(self, site_root: Path) -> None:
        result = _exporter(site_root).export()

        assert result.total_assets == 2
        assert result.sitemap_written
        assert result.output_dir == site_root / "dist"
        assert (site_root / "dist" / "sitemap.xml").read_text().count("<url>") == 5

    def test_cleans_output_directory(self, site_root: Path) -> None:
        stale = site_root / "dist" / "old.html"
        stale.parent.mkdir()
        stale.write_text("stale")

        _exporter(site_root).export()

        assert not stale.exists()

    def test_absolute_output(self, site_root: Path, tmp_path_factory: pytest.TempPathFactory) -> None:
        out = tmp_path_factory.mktemp("out")
        result = _exporter(site_root, output=out).export()
        assert result.output_dir == out
        assert (out / "sitemap.xml").exists()

    def test_uses_preloaded_docs(self, site_root: Path) -> None:
        config = SiteConfig(root=site_root)
        store = ContentStore(config.content_path)
        docs = store.load("docs")[:1]

        with patch.object(ContentStore, "load", side_effect=AssertionError("reloaded")):
            StaticExporter(store, config).export(docs)

        assert (site_root / "dist" / "sitemap.xml").read_text().count("<url>") == 3

    def test_fingerprint_writes_manifest(self, site_root: Path) -> None:
        result = _exporter(site_root, fingerprint=True).export()

        kinds = [f.source_type for f in result.files]
        assert kinds.count("asset") == 2
        assert "manifest" in kinds
        assert (site_root / "dist" / "manifest.json").exists()

    def test_invalid_content_raises_export_error(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "bad.md").write_text(
            "---\ntitle: 3\n---\n"
        )
        with pytest.raises(ExportError, match="Static export"):
            _exporter(site_root).export()

    def test_records_build_events(self, site_root: Path) -> None:
        collector = StackCollector()
        _exporter(site_root, collector, fingerprint=True).export()

        kinds = sorted(e.kind for e in collector.log.query(event_type=BuildEvent))
        assert kinds == ["copy_asset", "copy_asset", "generate_sitemap", "write_manifest"]

    def test_undecodable_content_raises_export_error(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "binary.md").write_bytes(b"\xff\xfe\x00")
        with pytest.raises(ExportError, match="Static export"):
            _exporter(site_root).export()
