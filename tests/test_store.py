"""Tests for csvsite.content.store — loading collections from disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from csvsite._errors import ContentError, ContentFetchFailure, FrontMatterError
from csvsite.content.store import ContentRecord, ContentStore, parse_front_matter
from csvsite.observability import CollectionLoaded, StackCollector


class TestLoad:
    """ContentStore.load — synchronous collection loading."""

    def test_identifiers_relative_to_collection(self, site_root: Path) -> None:
        store = ContentStore(site_root / "content")
        ids = sorted(r.id for r in store.load("docs"))
        assert ids == ["acme/guides/setup.md", "demo/install.md", "demo/overview.md"]

    def test_records_carry_collection_and_front_matter(self, site_root: Path) -> None:
        store = ContentStore(site_root / "content")
        overview = next(r for r in store.load("docs") if r.id == "demo/overview.md")

        assert overview.collection == "docs"
        assert overview.front_matter["title"] == "Demo"
        assert overview.front_matter["order"] == 1
        assert overview.front_matter["project"] == "demo"
        assert overview.body.startswith("# Demo")
        assert overview.source_path == site_root / "content" / "docs" / "demo" / "overview.md"

    def test_front_matter_is_read_only(self, site_root: Path) -> None:
        record = ContentStore(site_root / "content").load("docs")[0]
        with pytest.raises(TypeError):
            record.front_matter["title"] = "changed"  # type: ignore[index]

    def test_blog_collection(self, site_root: Path) -> None:
        posts = ContentStore(site_root / "content").load("blog")
        assert [p.id for p in posts] == ["launch.md"]
        assert posts[0].front_matter["tags"] == ["news", "release"]

    def test_missing_collection_dir_is_empty(self, tmp_path: Path) -> None:
        assert ContentStore(tmp_path / "content").load("docs") == []

    def test_ignores_non_markdown_files(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "logo.png").write_bytes(b"\x89PNG")
        ids = [r.id for r in ContentStore(site_root / "content").load("docs")]
        assert "demo/logo.png" not in ids

    def test_invalid_blog_front_matter(self, site_root: Path) -> None:
        (site_root / "content" / "blog" / "draft.md").write_text("---\ntitle: Draft\n---\n")
        with pytest.raises(FrontMatterError, match="blog/draft.md"):
            ContentStore(site_root / "content").load("blog")

    def test_records_load_event(self, site_root: Path) -> None:
        collector = StackCollector()
        ContentStore(site_root / "content", collector=collector).load("docs")

        events = collector.log.query(event_type=CollectionLoaded)
        assert len(events) == 1
        assert events[0].collection == "docs"
        assert events[0].record_count == 3


class TestFetchCollection:
    """ContentStore.fetch_collection — async query interface."""

    @pytest.mark.asyncio
    async def test_fetches_docs(self, site_root: Path) -> None:
        records = await ContentStore(site_root / "content").fetch_collection("docs")
        assert len(records) == 3
        assert all(isinstance(r, ContentRecord) for r in records)

    @pytest.mark.asyncio
    async def test_rereads_disk_each_call(self, site_root: Path) -> None:
        store = ContentStore(site_root / "content")
        assert len(await store.fetch_collection("docs")) == 3

        (site_root / "content" / "docs" / "demo" / "faq.md").write_text("FAQ\n")
        assert len(await store.fetch_collection("docs")) == 4

    @pytest.mark.asyncio
    async def test_schema_failure_becomes_fetch_failure(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "bad.md").write_text(
            "---\ntitle: [not, a, string]\n---\n"
        )
        store = ContentStore(site_root / "content")

        with pytest.raises(ContentFetchFailure) as excinfo:
            await store.fetch_collection("docs")
        assert isinstance(excinfo.value.__cause__, FrontMatterError)

    @pytest.mark.asyncio
    async def test_unreadable_file_becomes_fetch_failure(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "binary.md").write_bytes(b"\xff\xfe\x00")
        store = ContentStore(site_root / "content")

        with pytest.raises(ContentFetchFailure):
            await store.fetch_collection("docs")

    @pytest.mark.asyncio
    async def test_unknown_collection(self, site_root: Path) -> None:
        store = ContentStore(site_root / "content")
        with pytest.raises(ContentError, match="Unknown content collection"):
            await store.fetch_collection("pages")  # type: ignore[arg-type]


class TestParseFrontMatter:
    """parse_front_matter — strict YAML front matter splitting."""

    def test_splits_front_matter_and_body(self) -> None:
        meta, body = parse_front_matter("---\ntitle: Demo\norder: 2\n---\n\n# Demo\n")
        assert meta == {"title": "Demo", "order": 2}
        assert body == "# Demo"

    def test_no_front_matter(self) -> None:
        assert parse_front_matter("# Plain\n") == ({}, "# Plain")

    def test_empty_block(self) -> None:
        assert parse_front_matter("---\n---\nBody\n") == ({}, "Body")

    def test_unclosed_fence_is_body(self) -> None:
        meta, body = parse_front_matter("---\ntitle: Demo\n")
        assert meta == {}
        assert body.startswith("---")

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(FrontMatterError, match="docs/demo/broken.md: front matter is not valid YAML"):
            parse_front_matter("---\ntitle: [unclosed\n---\n", source="docs/demo/broken.md")

    def test_list_block_raises(self) -> None:
        with pytest.raises(FrontMatterError, match="must be a mapping, got list"):
            parse_front_matter("---\n- title\n- order\n---\nBody\n")

    def test_quoted_number_stays_string(self) -> None:
        meta, _ = parse_front_matter('---\norder: "3"\n---\n')
        assert meta["order"] == "3"


class TestMalformedFrontMatter:
    """Files whose front matter block cannot be parsed fail the load."""

    def test_docs_invalid_yaml_fails_load(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "broken.md").write_text(
            "---\ntitle: [unclosed\n---\n"
        )
        with pytest.raises(FrontMatterError, match="docs/demo/broken.md"):
            ContentStore(site_root / "content").load("docs")

    def test_docs_list_front_matter_fails_load(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "listy.md").write_text(
            "---\n- one\n- two\n---\nBody\n"
        )
        with pytest.raises(FrontMatterError, match="must be a mapping"):
            ContentStore(site_root / "content").load("docs")

    def test_blog_invalid_yaml_names_yaml_error(self, site_root: Path) -> None:
        (site_root / "content" / "blog" / "broken.md").write_text(
            "---\ntitle: [unclosed\n---\n"
        )
        with pytest.raises(FrontMatterError, match="not valid YAML"):
            ContentStore(site_root / "content").load("blog")

    def test_quoted_order_rejected(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "quoted.md").write_text(
            '---\norder: "3"\n---\n'
        )
        with pytest.raises(FrontMatterError, match="'order' must be number, got str"):
            ContentStore(site_root / "content").load("docs")

    @pytest.mark.asyncio
    async def test_invalid_yaml_becomes_fetch_failure(self, site_root: Path) -> None:
        (site_root / "content" / "docs" / "demo" / "broken.md").write_text(
            "---\ntitle: [unclosed\n---\n"
        )
        with pytest.raises(ContentFetchFailure) as excinfo:
            await ContentStore(site_root / "content").fetch_collection("docs")
        assert isinstance(excinfo.value.__cause__, FrontMatterError)


class TestContentRecord:
    """ContentRecord — defaults."""

    def test_defaults(self) -> None:
        record = ContentRecord(id="demo/overview.md", collection="docs")
        assert record.front_matter == {}
        assert record.body == ""
        assert record.source_path is None
