"""Asset handling — copy and optionally fingerprint static assets.

Copies files from the site's ``public/`` directory into the export root,
preserving directory structure.  When fingerprinting is enabled, stylesheets
and scripts are moved under the build assets directory with a content-hash
in their name (``_astro/style.a1b2c3d4.css``).
"""

from __future__ import annotations

import hashlib
import json
import shutil
import time
from pathlib import Path
from typing import TYPE_CHECKING

from csvsite.export.static import ExportedFile

if TYPE_CHECKING:
    from csvsite.config import BuildOptions

# Files/directories skipped during asset copying
_HIDDEN_PREFIXES = (".", "_")

# Asset types renamed by fingerprinting
_HASHED_SUFFIXES = frozenset({".css", ".js"})


def copy_assets(
    static_path: Path,
    output_dir: Path,
) -> tuple[ExportedFile, ...]:
    """Recursively copy static assets to ``output_dir``.

    Skips files whose own name starts with ``.`` or ``_`` and anything
    inside ``__pycache__``.

    Args:
        static_path: Source directory (e.g., ``site_root/public/``).
        output_dir: Root export output directory.

    Returns:
        Tuple of :class:`ExportedFile` entries, one per copied file.

    """
    if not static_path.is_dir():
        return ()

    results: list[ExportedFile] = []

    for src_file in sorted(static_path.rglob("*")):
        if not src_file.is_file():
            continue
        if "__pycache__" in src_file.parts:
            continue
        if src_file.name.startswith(_HIDDEN_PREFIXES):
            continue

        t0 = time.perf_counter()

        relative = src_file.relative_to(static_path)
        dest_file = output_dir / relative
        dest_file.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_file, dest_file)

        size = dest_file.stat().st_size
        elapsed = (time.perf_counter() - t0) * 1000

        results.append(ExportedFile(
            source_path=f"/{relative.as_posix()}",
            output_path=dest_file,
            source_type="asset",
            size_bytes=size,
            duration_ms=elapsed,
        ))

    return tuple(results)


def fingerprint_assets(
    output_dir: Path,
    assets: tuple[ExportedFile, ...],
    build: BuildOptions,
) -> dict[str, str]:
    """Move stylesheets and scripts to content-hashed names.

    For each copied ``.css``/``.js`` asset, computes an 8-character hex
    digest of its contents and moves it to
    ``build.asset_file_name(name, digest)``:

        ``/css/style.css`` -> ``/_astro/style.a1b2c3d4.css``

    Args:
        output_dir: Root export output directory.
        assets: Records returned by :func:`copy_assets`.
        build: Build options supplying the naming pattern.

    Returns:
        Mapping of original paths to fingerprinted paths.

    """
    manifest: dict[str, str] = {}

    for asset in assets:
        filepath = asset.output_path
        if filepath.suffix not in _HASHED_SUFFIXES or not filepath.is_file():
            continue

        digest = hashlib.sha256(filepath.read_bytes()).hexdigest()[:8]
        relative_new = build.asset_file_name(filepath.name, digest)
        new_path = output_dir / relative_new
        new_path.parent.mkdir(parents=True, exist_ok=True)
        filepath.replace(new_path)

        manifest[asset.source_path] = f"/{relative_new}"

    return manifest


def write_manifest(output_dir: Path, manifest: dict[str, str]) -> Path:
    """Write the asset manifest to ``output_dir/manifest.json``.

    Args:
        output_dir: Root export output directory.
        manifest: Mapping from ``fingerprint_assets()``.

    Returns:
        Path to the written manifest file.

    """
    manifest_path = output_dir / "manifest.json"
    manifest_path.write_text(
        json.dumps(manifest, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return manifest_path
