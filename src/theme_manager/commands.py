"""Scaffold a theme directory under every configured template root.

A theme is a subdirectory of each configured template root.  Building a theme
creates those subdirectories and, optionally, seeds them with the default
theme's templates so they can be edited in place.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from theme_manager._errors import ConfigError

if TYPE_CHECKING:
    from theme_manager.config import ThemeManagerConfig


def _validate_theme_name(name: str) -> None:
    if not name or not name.strip():
        msg = "Theme name must not be empty"
        raise ConfigError(msg)
    if "/" in name or "\\" in name or name in (".", ".."):
        msg = f"Theme name {name!r} must be a single directory name"
        raise ConfigError(msg)


def build_theme(
    config: ThemeManagerConfig,
    name: str,
    *,
    copy_default: bool = False,
) -> list[Path]:
    """Create ``<root>/<name>`` for every configured template root.

    Args:
        config: Configuration providing the template roots.
        name: Theme (directory) name.
        copy_default: Copy the default theme's files into the new theme.
            Existing files are never overwritten.

    Returns:
        Theme directories that did not exist before, in configuration order.

    Raises:
        ConfigError: If the name is invalid or no template roots are configured.

    """
    _validate_theme_name(name)
    roots = [Path(p) for entry in config.templates.paths for p in entry.paths]
    if not roots:
        msg = "No template paths configured; nothing to build"
        raise ConfigError(msg)

    created: list[Path] = []
    for root in roots:
        theme_dir = root / name
        if not theme_dir.is_dir():
            try:
                theme_dir.mkdir(parents=True)
            except OSError as exc:
                msg = f"Failed to create theme directory {theme_dir}: {exc}"
                raise ConfigError(msg) from exc
            created.append(theme_dir)

        default_dir = root / config.default_theme
        if copy_default and name != config.default_theme and default_dir.is_dir():
            _copy_missing(default_dir, theme_dir)
    return created


def _copy_missing(source: Path, target: Path) -> None:
    """Copy files from source into target, skipping files target already has."""
    for src in sorted(source.rglob("*")):
        if not src.is_file():
            continue
        dest = target / src.relative_to(source)
        if dest.exists():
            continue
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
