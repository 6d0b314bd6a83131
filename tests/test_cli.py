"""Tests for csvsite._cli — argument parsing and command dispatch."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from csvsite._cli import _build_parser, main


class TestBuildParser:
    """_build_parser — CLI argument parsing."""

    def test_build_default_args(self) -> None:
        args = _build_parser().parse_args(["build"])
        assert args.command == "build"
        assert args.root == "."
        assert args.output is None
        assert args.site_url is None
        assert args.fingerprint is False

    def test_build_all_flags(self) -> None:
        args = _build_parser().parse_args([
            "build", "my-site/",
            "--output", "public_html",
            "--site-url", "https://example.com",
            "--fingerprint",
        ])
        assert args.root == "my-site/"
        assert args.output == "public_html"
        assert args.site_url == "https://example.com"
        assert args.fingerprint is True

    def test_serve_default_args(self) -> None:
        args = _build_parser().parse_args(["serve"])
        assert args.command == "serve"
        assert args.host == "0.0.0.0"
        assert args.port == 8000
        assert args.workers == 0

    def test_sitemap_args(self) -> None:
        args = _build_parser().parse_args(["sitemap", "site/", "--site-url", "http://localhost"])
        assert args.command == "sitemap"
        assert args.root == "site/"
        assert args.site_url == "http://localhost"

    def test_no_command_returns_none(self) -> None:
        assert _build_parser().parse_args([]).command is None


class TestMain:
    """main — dispatch to app entry points."""

    def test_no_command_prints_help(self) -> None:
        with patch.object(sys, "stdout", io.StringIO()), pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 0

    def test_sitemap_writes_stdout(self, site_root: Path) -> None:
        out = io.StringIO()
        with patch.object(sys, "stdout", out):
            main(["sitemap", str(site_root)])
        assert out.getvalue().count("<url>") == 5

    def test_build_passes_overrides(self) -> None:
        with patch("csvsite.app.build") as mock_build:
            main(["build", "site/", "--site-url", "https://example.com"])
        mock_build.assert_called_once_with(
            root="site/", output=None, site_url="https://example.com", fingerprint=None,
        )

    def test_serve_dispatch(self) -> None:
        with patch("csvsite.app.serve") as mock_serve:
            main(["serve", "--port", "9000"])
        mock_serve.assert_called_once_with(root=".", host="0.0.0.0", port=9000, workers=0)

    def test_site_error_exits_nonzero(self, site_root: Path) -> None:
        (site_root / "csvsite.yaml").write_text("port: [broken\n")
        err = io.StringIO()
        with patch.object(sys, "stderr", err), pytest.raises(SystemExit) as excinfo:
            main(["sitemap", str(site_root)])
        assert excinfo.value.code == 1
        assert "csvsite: error:" in err.getvalue()

    def test_build_with_undecodable_doc_exits_nonzero(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "binary.md").write_bytes(b"\xff\xfe\x00")
        err = io.StringIO()
        with patch.object(sys, "stderr", err), pytest.raises(SystemExit) as excinfo:
            main(["build", str(site_root)])
        assert excinfo.value.code == 1
        assert "Failed to fetch 'docs' collection" in err.getvalue()

    def test_empty_site_url_exits_nonzero(self, site_root: Path) -> None:
        err = io.StringIO()
        with patch.object(sys, "stderr", err), pytest.raises(SystemExit) as excinfo:
            main(["sitemap", str(site_root), "--site-url", ""])
        assert excinfo.value.code == 1
        assert "site_url must be an absolute http(s) origin" in err.getvalue()
