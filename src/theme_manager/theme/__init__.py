"""Theme path resolution — default-then-override registration plan.

Every template root gets the default theme's subdirectory registered.  When
another theme is active, its subdirectory is registered right after the
default one under the same namespace.  The template resolver searches a
namespace's paths last-added first, so the active theme overrides the default
and any template the theme does not provide falls through to the default.

Given ``/app/templates`` and an active ``dark`` theme::

    /app/templates/default   (registered first)
    /app/templates/dark      (registered second, searched first)

Thread Safety:
    Pure functions over immutable inputs.  Safe for concurrent use.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from theme_manager.config import DEFAULT_THEME, TemplatePathEntry, ThemeDescriptor

if TYPE_CHECKING:
    from theme_manager.config import ThemeManagerConfig


@dataclass(frozen=True, slots=True)
class PathRegistration:
    """One ``add_path`` call in the registration plan."""

    path: str
    namespace: str | None = None


def resolve_active_theme(
    themes: Sequence[ThemeDescriptor] | None,
    default_theme: str = DEFAULT_THEME,
) -> str:
    """Return the name of the active theme.

    The last descriptor marked active wins.  Falls back to ``default_theme``
    when none is active, when the last active descriptor has no name, or
    when ``themes`` is missing or not a sequence.
    """
    if not isinstance(themes, (list, tuple)):
        return default_theme
    active: str | None = None
    for theme in themes:
        if theme.active:
            active = theme.name
    return active or default_theme


def resolve_paths(
    active_theme: str,
    default_theme: str,
    entries: Iterable[TemplatePathEntry],
) -> list[PathRegistration]:
    """Build the ordered path registrations for every template root.

    Returns:
        Registrations in processing order.  Per root: the default theme
        subpath, then the active theme subpath when it differs.  No
        deduplication and no filesystem checks.

    """
    registrations: list[PathRegistration] = []
    for entry in entries:
        for path in entry.paths:
            registrations.append(PathRegistration(f"{path}/{default_theme}", entry.namespace))
            if active_theme != default_theme:
                registrations.append(PathRegistration(f"{path}/{active_theme}", entry.namespace))
    return registrations


def plan_for_config(config: ThemeManagerConfig) -> tuple[str, list[PathRegistration]]:
    """Resolve the active theme and registration plan for a config."""
    active = resolve_active_theme(config.themes, config.default_theme)
    return active, resolve_paths(active, config.default_theme, config.templates.paths)
