"""Configuration loading for l10ncheck (.l10ncheck.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".l10ncheck.yml"

DEFAULT_CATALOG = "l10n/en-US/viewer.ftl"
DEFAULT_SEARCH_ROOTS = ("web", "src")
DEFAULT_EXTENSIONS = (".html", ".js", ".mjs")
# Minimum number of characters a prefix or suffix fragment must have to count
# as evidence of a dynamically-built identifier.
DEFAULT_MIN_FRAGMENT_LENGTH = 6
DEFAULT_INTERPOLATION_MARKER = "${"


@dataclass(frozen=True)
class CheckConfig:
    """Settings for one check run, resolved against the project root."""

    root: Path
    catalog: str = DEFAULT_CATALOG
    search_roots: List[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_ROOTS))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_paths: List[str] = field(default_factory=list)
    min_fragment_length: int = DEFAULT_MIN_FRAGMENT_LENGTH
    interpolation_marker: str = DEFAULT_INTERPOLATION_MARKER

    @property
    def catalog_path(self) -> Path:
        return self.root / self.catalog

    @property
    def search_paths(self) -> List[Path]:
        return [self.root / entry for entry in self.search_roots]


def load_config(config_path: Path) -> CheckConfig:
    """Load configuration from disk.

    A directory is searched for .l10ncheck.yml and falls back to defaults
    when it has none. A file path must exist.
    """
    explicit = not config_path.expanduser().is_dir()
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_file}")
        return CheckConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    catalog = _as_str(data.get("catalog")) or DEFAULT_CATALOG

    search_roots = unique(_as_str_list(data.get("search_roots")))
    if "search_roots" in data and not search_roots:
        raise ConfigError("search_roots must list at least one directory")

    extensions = normalise_extensions(_as_str_list(data.get("extensions")))

    min_length = data.get("min_fragment_length", DEFAULT_MIN_FRAGMENT_LENGTH)
    if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length < 1:
        raise ConfigError("min_fragment_length must be a positive integer")

    marker = data.get("interpolation_marker", DEFAULT_INTERPOLATION_MARKER)
    if not isinstance(marker, str) or not marker:
        raise ConfigError("interpolation_marker must be a non-empty string")

    return CheckConfig(
        root=root,
        catalog=catalog,
        search_roots=search_roots or list(DEFAULT_SEARCH_ROOTS),
        extensions=extensions or list(DEFAULT_EXTENSIONS),
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        min_fragment_length=min_length,
        interpolation_marker=marker,
    )


def normalise_extensions(values: Sequence[str]) -> List[str]:
    """Lower-case extensions and ensure each carries a leading dot."""
    result: List[str] = []
    for value in values:
        cleaned = value.strip().lower()
        if not cleaned:
            continue
        if not cleaned.startswith("."):
            cleaned = f".{cleaned}"
        if cleaned not in result:
            result.append(cleaned)
    return result


def unique(values: Sequence[str]) -> List[str]:
    """Drop repeated entries, keeping first-seen order."""
    return list(dict.fromkeys(values))


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CheckConfig", "ConfigError", "CONFIG_FILENAME", "load_config", "normalise_extensions", "unique"]
