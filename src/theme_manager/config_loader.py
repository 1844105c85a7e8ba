"""Load ThemeManagerConfig from theme-manager.yaml if present.

Merges file config with keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from theme_manager.config import ThemeManagerConfig, path_entries_from_mapping

CONFIG_NAMES = ("theme-manager.yaml", "theme-manager.yml", "theme-manager.toml")


def load_config(root: Path | str, **overrides: object) -> ThemeManagerConfig:
    """Load ThemeManagerConfig from root, optionally merging theme-manager.yaml.

    Looks for theme-manager.yaml, theme-manager.yml, or theme-manager.toml in
    root. If found, loads and merges with overrides. Overrides take precedence.
    Relative template paths are resolved against root.
    """
    root = Path(root).resolve()
    file_config = _read_config_file(root)
    merged: dict[str, Any] = {**file_config, **overrides}
    templates = merged.get("templates")
    if isinstance(templates, dict) and templates.get("paths"):
        merged["templates"] = {**templates, "paths": _anchor_paths(root, templates["paths"])}
    return ThemeManagerConfig.from_mapping(merged)


def find_config_file(root: Path) -> Path | None:
    """Return the first config file present in root, or None."""
    for name in CONFIG_NAMES:
        path = root / name
        if path.is_file():
            return path
    return None


def _read_config_file(root: Path) -> dict[str, object]:
    """Read config from yaml/toml if present. Returns empty dict otherwise."""
    path = find_config_file(root)
    if path is None:
        return {}
    if path.suffix == ".toml":
        return _parse_toml(path)
    return _parse_yaml(path)


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config. Returns empty dict on error."""
    import yaml

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config. Returns empty dict on error."""
    import tomllib

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return data


def _anchor_paths(root: Path, raw: object) -> dict[str, list[str]]:
    """Resolve relative template roots against the config root."""
    anchored: dict[str, list[str]] = {}
    for index, entry in enumerate(path_entries_from_mapping(raw)):
        key = entry.namespace if entry.namespace is not None else str(index)
        anchored.setdefault(key, []).extend(
            str(root / p) if not Path(p).is_absolute() else p for p in entry.paths
        )
    return anchored
