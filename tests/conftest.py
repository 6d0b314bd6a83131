"""Shared test fixtures for csvsite."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create a minimal site with docs, blog, and public assets.

    Docs collection layout::

        content/docs/demo/overview.md
        content/docs/demo/install.md
        content/docs/acme/guides/setup.md

    """
    docs = tmp_path / "content" / "docs"
    (docs / "demo").mkdir(parents=True)
    (docs / "acme" / "guides").mkdir(parents=True)
    (docs / "demo" / "overview.md").write_text(
        "---\ntitle: Demo\nproject: demo\norder: 1\n---\n\n# Demo\n\nOverview.\n"
    )
    (docs / "demo" / "install.md").write_text(
        "---\ntitle: Install\n---\n\nRun the installer.\n"
    )
    (docs / "acme" / "guides" / "setup.md").write_text(
        "---\ndescription: Setting up acme\n---\n\nSetup steps.\n"
    )

    blog = tmp_path / "content" / "blog"
    blog.mkdir()
    (blog / "launch.md").write_text(
        "---\n"
        "title: Launch\n"
        "description: We launched\n"
        "date: 2024-05-01\n"
        "author: Sam\n"
        "tags: [news, release]\n"
        "---\n\nHello.\n"
    )

    public = tmp_path / "public"
    (public / "css").mkdir(parents=True)
    (public / "css" / "style.css").write_text("body { margin: 0; }\n")
    (public / "favicon.svg").write_text("<svg/>\n")

    (tmp_path / "templates").mkdir()

    return tmp_path
