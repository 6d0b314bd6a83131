"""Startup banner — mode-aware status output.

Prints a startup banner with timing and status indicators.  Detects
``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from csvsite._types import SiteMode
    from csvsite.config import SiteConfig


# ---------------------------------------------------------------------------
# ANSI helpers: respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_CYAN = "\033[36m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""

_MODE_STYLES: dict[str, tuple[str, str]] = {
    "build": (_YELLOW, "build"),
    "serve": (_CYAN, "serve"),
}


def _mode_badge(mode: str) -> str:
    """Return a styled [mode] badge."""
    color, label = _MODE_STYLES.get(mode, (_DIM, mode))
    return f"{color}[{label}]{_RESET}"


def print_banner(
    config: SiteConfig,
    doc_count: int,
    mode: SiteMode,
    *,
    load_ms: float = 0.0,
    warnings: list[str] | None = None,
) -> None:
    """Print the csvsite startup banner to stderr.

    Args:
        config: Resolved SiteConfig.
        doc_count: Number of documents in the docs collection.
        mode: One of ``"build"``, ``"serve"``.
        load_ms: Time spent loading content in milliseconds.
        warnings: Optional list of warning messages to display.

    """
    from csvsite import __version__

    header = f"  {_GREEN}{_BOLD}csvsite{_RESET} {_DIM}v{__version__}{_RESET}  {_mode_badge(mode)}"

    lines: list[str] = [
        "",
        header,
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    docs_label = "doc" if doc_count == 1 else "docs"
    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines.append(f"  {_DIM}├─{_RESET} {doc_count} {docs_label} loaded{timing}")
    lines.append(f"  {_DIM}├─{_RESET} site: {config.site_url}")

    if mode == "build":
        lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{config.output_path}{_RESET}")
    elif mode == "serve":
        workers_label = str(config.workers) if config.workers > 0 else "auto"
        lines.append(f"  {_DIM}├─{_RESET} workers: {workers_label}")
        lines.append("")
        lines.append(f"  {_BOLD}{_CYAN}http://{config.host}:{config.port}/sitemap.xml{_RESET}")

    if warnings:
        lines.append("")
        lines.extend(f"  {_YELLOW}!{_RESET} {w}" for w in warnings)

    lines.append("")

    print("\n".join(lines), file=sys.stderr)
