"""csvsite configuration.

SiteConfig is the central configuration object, frozen after creation.
BuildOptions carries the bundling, chunking, and asset naming settings used
by the static build.
"""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Literal
from urllib.parse import urlsplit

from csvsite._errors import ConfigError

# Public origin of the site, used verbatim as the sitemap URL prefix
DEFAULT_SITE_URL = "https://csvtoolkit.org"

# Top-level pages listed ahead of content routes in the sitemap
STATIC_PAGES: tuple[str, ...] = ("", "/projects")


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Bundling and asset naming options for ``csvsite build``.

    Attributes:
        inline_stylesheets: Stylesheet inlining policy (``auto``, ``always``, ``never``).
        assets_dir: Output subdirectory for hashed build assets.
        css_code_split: Emit per-page CSS instead of one bundle.
        minify: Minifier used for scripts, or *None* to disable.
        compress_html: Collapse whitespace in rendered HTML.

    """

    inline_stylesheets: Literal["auto", "always", "never"] = "auto"
    assets_dir: str = "_astro"
    css_code_split: bool = True
    minify: str | None = "terser"
    compress_html: bool = True

    def chunk_name(self, module_id: str) -> str | None:
        """Return the chunk a module belongs to, or *None* for the default chunk.

        Third-party modules share a ``vendor`` chunk for long-term caching;
        the search index loader gets its own ``search`` chunk so it can be
        lazy-loaded.
        """
        if "node_modules" in module_id:
            return "vendor"
        if "pagefind" in module_id:
            return "search"
        return None

    def asset_file_name(self, name: str | None = None, digest: str | None = None) -> str:
        """Return the output path of a hashed asset.

        ``style.css`` with digest ``a1b2c3d4`` becomes
        ``_astro/style.a1b2c3d4.css``.  Without a name, the bundler's
        placeholder pattern is returned unchanged.
        """
        if not name:
            return f"{self.assets_dir}/[name].[hash][extname]"
        pure = PurePosixPath(name)
        ext = pure.suffix.lstrip(".")
        stem = pure.stem if ext else pure.name
        hashed = f"{stem}.{digest or '[hash]'}"
        return f"{self.assets_dir}/{hashed}.{ext}" if ext else f"{self.assets_dir}/{hashed}"


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Configuration for a csvsite application.

    Attributes:
        root: Path to the site root directory (contains content/, public/, etc.).
              Always resolved to an absolute path on construction.
        host: Bind address for serve mode.
        port: Bind port for serve mode.
        output: Output directory for static export.
        workers: Number of Pounce workers (0 = auto-detect).
        content_dir: Directory containing the ``docs`` and ``blog`` collections.
        templates_dir: Directory containing Kida templates.
        static_dir: Directory containing static assets copied by the build.
        site_url: Public http(s) origin of the site, prefixed to every sitemap ``<loc>``.
        static_pages: Top-level paths listed first in the sitemap.
        fingerprint: Enable content-hash asset naming in ``csvsite build``.
        build: Bundling and asset naming options.

    """

    root: Path = field(default_factory=Path.cwd)
    host: str = "127.0.0.1"
    port: int = 3000
    output: Path = field(default_factory=lambda: Path("dist"))
    workers: int = 0
    content_dir: str = "content"
    templates_dir: str = "templates"
    static_dir: str = "public"
    site_url: str = DEFAULT_SITE_URL
    static_pages: tuple[str, ...] = STATIC_PAGES
    fingerprint: bool = False
    build: BuildOptions = field(default_factory=BuildOptions)

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        site_url = self.site_url.rstrip("/")
        parts = urlsplit(site_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            msg = f"site_url must be an absolute http(s) origin, got {self.site_url!r}"
            raise ConfigError(msg)
        object.__setattr__(self, "site_url", site_url)

    @property
    def content_path(self) -> Path:
        """Absolute path to content directory."""
        return self.root / self.content_dir

    @property
    def templates_path(self) -> Path:
        """Absolute path to templates directory."""
        return self.root / self.templates_dir

    @property
    def static_path(self) -> Path:
        """Absolute path to static assets directory."""
        return self.root / self.static_dir

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
