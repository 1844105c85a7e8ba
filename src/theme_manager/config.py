"""Theme manager configuration.

ThemeManagerConfig is the central configuration object, frozen after creation.
It is normally built from the nested mapping an application keeps for its
settings (see ``ThemeManagerConfig.from_mapping``) or from a config file via
``theme_manager.config_loader.load_config``.

Expected mapping shape::

    {
        "themes": [
            {"name": "default", "active": False},
            {"name": "dark", "active": True},
        ],
        "templates": {
            "map": {"error::404": "/app/templates/404.html"},
            "extension": "html",
            "layout": "layout::default",
            "paths": {
                "app": ["/app/templates/app"],
                "layout": "/app/templates/layout",
                0: "/app/templates",
            },
        },
    }

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_THEME = "default"
DEFAULT_SUFFIX = "html"

# Settings section that may hold the theme list instead of the top level
SETTINGS_SECTION = "theme_manager"

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric_key(key: object) -> bool:
    """Return True for keys that denote an unnamed (default) namespace.

    Integer keys and strings such as ``"0"`` or ``"12"`` count as numeric.
    """
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    if isinstance(key, str):
        return _NUMERIC_RE.match(key) is not None
    return False


@dataclass(frozen=True, slots=True)
class ThemeDescriptor:
    """A configured theme.

    Attributes:
        name: Theme name, also the subdirectory name under every template root.
            None for an active entry configured without a name; selecting it
            resets the active theme to the default.
        active: Whether this theme is selected for rendering.

    """

    name: str | None
    active: bool = False


@dataclass(frozen=True, slots=True)
class TemplatePathEntry:
    """Template roots registered under one namespace.

    A scalar ``paths`` is normalized to a one-element tuple and a numeric
    ``namespace`` to ``None``.
    """

    namespace: str | None
    paths: tuple[str, ...]

    def __post_init__(self) -> None:
        paths: Any = self.paths
        if isinstance(paths, (str, bytes)) or not isinstance(paths, Iterable):
            paths = (paths,)
        object.__setattr__(self, "paths", tuple(str(p) for p in paths))
        if self.namespace is not None and is_numeric_key(self.namespace):
            object.__setattr__(self, "namespace", None)


@dataclass(frozen=True, slots=True)
class TemplatesConfig:
    """Template renderer settings.

    Attributes:
        map: Explicit template name to file path mapping, consulted first.
        extension: Default suffix appended to template names without one.
        layout: Layout template wrapped around every render (None = no layout).
        paths: Template roots, in configuration order.
        autoescape: Passed through to the Kida environment.

    """

    map: dict[str, str] = field(default_factory=dict)
    extension: str = DEFAULT_SUFFIX
    layout: str | None = None
    paths: tuple[TemplatePathEntry, ...] = ()
    autoescape: bool = False

    @classmethod
    def from_mapping(cls, data: object) -> TemplatesConfig:
        """Build from the ``templates`` section; anything but a mapping yields defaults."""
        if not isinstance(data, Mapping):
            return cls()
        raw_map = data.get("map") or {}
        template_map = (
            {str(k): str(v) for k, v in raw_map.items()}
            if isinstance(raw_map, Mapping)
            else {}
        )
        extension = data.get("extension") or data.get("default_suffix") or DEFAULT_SUFFIX
        layout = data.get("layout")
        return cls(
            map=template_map,
            extension=str(extension),
            layout=str(layout) if layout else None,
            paths=path_entries_from_mapping(data.get("paths")),
            autoescape=bool(data.get("autoescape", False)),
        )


@dataclass(frozen=True, slots=True)
class ThemeManagerConfig:
    """Configuration for a theme-aware renderer.

    Attributes:
        themes: Configured themes in order, or None when the theme
            configuration is absent or malformed.
        templates: Template renderer settings.
        default_theme: Theme whose subdirectory is always registered.

    """

    themes: tuple[ThemeDescriptor, ...] | None = None
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    default_theme: str = DEFAULT_THEME

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ThemeManagerConfig:
        """Build a config from an application settings mapping.

        The theme list is read from ``themes`` or, failing that, from the
        ``theme_manager`` settings section.  Theme entries that are not
        mappings, and inactive entries without a name, are skipped.
        """
        if not data:
            return cls()
        raw_themes = data.get("themes")
        section = data.get(SETTINGS_SECTION)
        if raw_themes is None and isinstance(section, Mapping):
            raw_themes = section.get("themes")
        default_theme = data.get("default_theme")
        if default_theme is None and isinstance(section, Mapping):
            default_theme = section.get("default_theme")
        return cls(
            themes=themes_from_list(raw_themes),
            templates=TemplatesConfig.from_mapping(data.get("templates")),
            default_theme=str(default_theme or DEFAULT_THEME),
        )

    @property
    def theme_names(self) -> tuple[str, ...]:
        """Names of all configured themes, in order."""
        return tuple(t.name for t in self.themes or () if t.name)


def themes_from_list(raw: object) -> tuple[ThemeDescriptor, ...] | None:
    """Convert a raw theme list; returns None unless ``raw`` is a list or tuple."""
    if not isinstance(raw, (list, tuple)):
        return None
    themes: list[ThemeDescriptor] = []
    for entry in raw:
        if isinstance(entry, ThemeDescriptor):
            themes.append(entry)
            continue
        if not isinstance(entry, Mapping):
            continue
        active = bool(entry.get("active", False))
        name = entry.get("name")
        if not name:
            # An unnamed active entry still takes part in last-wins selection
            if active:
                themes.append(ThemeDescriptor(name=None, active=True))
            continue
        themes.append(ThemeDescriptor(name=str(name), active=active))
    return tuple(themes)


def path_entries_from_mapping(raw: object) -> tuple[TemplatePathEntry, ...]:
    """Convert the ``templates.paths`` section into path entries.

    Accepts a mapping of namespace to path(s), a list of paths (all
    un-namespaced), or a single path string.
    """
    if not raw:
        return ()
    if isinstance(raw, Mapping):
        return tuple(
            TemplatePathEntry(namespace=None if is_numeric_key(ns) else str(ns), paths=paths)
            for ns, paths in raw.items()
        )
    if isinstance(raw, (list, tuple)):
        return tuple(TemplatePathEntry(namespace=None, paths=p) for p in raw)
    return (TemplatePathEntry(namespace=None, paths=raw),)
