"""Load SiteConfig from csvsite.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from csvsite._errors import ConfigError
from csvsite.config import BuildOptions, SiteConfig

# Keys accepted at the top level of a config file (outside [csvsite])
_SITE_KEYS = frozenset({
    "host", "port", "output", "workers", "content_dir", "templates_dir",
    "static_dir", "site_url", "static_pages", "fingerprint",
})

_BUILD_KEYS = frozenset(BuildOptions.__dataclass_fields__)


def load_config(root: Path, **overrides: object) -> SiteConfig:
    """Load SiteConfig from root, optionally merging csvsite.yaml.

    Looks for csvsite.yaml, csvsite.yml, or csvsite.toml in root. If found,
    loads and merges with overrides. Overrides take precedence.

    Raises:
        ConfigError: If the config file cannot be read or parsed, or
            ``site_url`` is not an absolute http(s) origin.

    """
    file_config = _read_site_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if "static_pages" in merged:
        merged["static_pages"] = tuple(str(p) for p in merged["static_pages"])  # type: ignore[union-attr]
    if isinstance(merged.get("build"), dict):
        merged["build"] = BuildOptions(**merged["build"])  # type: ignore[arg-type]
    return SiteConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_site_config(root: Path) -> dict[str, object]:
    """Read csvsite config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("csvsite.yaml", "csvsite.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "csvsite.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path}: expected a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_site_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_site_section(data)


def _flatten_site_section(data: dict[str, object]) -> dict[str, object]:
    """Extract csvsite.* keys and the build table into top-level config."""
    result: dict[str, object] = {}
    section = data.get("csvsite")
    if isinstance(section, dict):
        result.update((k, v) for k, v in section.items() if k in _SITE_KEYS)
    for k, v in data.items():
        if k in _SITE_KEYS:
            result[k] = v
    build = data.get("build")
    if isinstance(build, dict):
        result["build"] = {k: v for k, v in build.items() if k in _BUILD_KEYS}
    return result
