"""Renderer factory — wires the active theme into a template renderer.

Configuration and collaborators are passed in explicitly.  Assembly order:

1. Resolve the active theme from ``config.themes``.
2. Assemble the ``url`` / ``serverurl`` helpers (fails fast when a
   collaborator is missing).
3. Build the renderer with the template map, default suffix and layout.
4. Register every template root: default theme subpath, then the active
   theme subpath when it differs.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from theme_manager.helpers import assemble_helpers
from theme_manager.observability.events import PathRegistered, ThemeResolved, now_ns
from theme_manager.templating.renderer import TemplateRenderer
from theme_manager.templating.resolver import TemplateResolver
from theme_manager.theme import plan_for_config

if TYPE_CHECKING:
    from theme_manager.config import ThemeManagerConfig
    from theme_manager.observability.log import EventLog


def create_renderer(
    config: ThemeManagerConfig,
    *,
    collaborators: Mapping[str, object] | None = None,
    require_helpers: bool = True,
    event_log: EventLog | None = None,
) -> TemplateRenderer:
    """Create a theme-aware renderer from configuration.

    Args:
        config: Theme and template configuration.
        collaborators: Base URL generators keyed by helper name
            (``url``, ``serverurl`` or one of their aliases).
        require_helpers: When False, a renderer is built without helpers
            instead of raising for missing collaborators.
        event_log: Receives assembly and render events.

    Raises:
        MissingDependencyError: If a helper collaborator is missing and
            ``require_helpers`` is True.

    """
    active, plan = plan_for_config(config)
    if event_log is not None:
        event_log.append(
            ThemeResolved(
                active_theme=active,
                default_theme=config.default_theme,
                source="config" if active in _active_names(config) else "default",
                timestamp_ns=now_ns(),
            )
        )

    assembly = assemble_helpers(collaborators)
    helpers = assembly.unwrap() if require_helpers else assembly.helpers

    templates = config.templates
    renderer = TemplateRenderer(
        TemplateResolver(templates.map, templates.extension),
        templates.layout,
        helpers=helpers,
        autoescape=templates.autoescape,
        event_log=event_log,
    )

    for registration in plan:
        renderer.add_path(registration.path, registration.namespace)
        if event_log is not None:
            event_log.append(
                PathRegistered(
                    path=registration.path,
                    namespace=registration.namespace,
                    theme=registration.path.rsplit("/", 1)[-1],
                    timestamp_ns=now_ns(),
                )
            )
    return renderer


def _active_names(config: ThemeManagerConfig) -> set[str]:
    return {t.name for t in config.themes or () if t.active and t.name}
