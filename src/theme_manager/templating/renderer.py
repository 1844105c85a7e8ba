"""Theme-aware template renderer backed by Kida.

Name resolution is owned by ``TemplateResolver``; the renderer builds a Kida
``Environment`` whose ``FileSystemLoader`` searches the same directories in
the same priority.  ``{% extends %}`` and ``{% include %}`` inside a theme
template therefore fall back from the active theme to the default one, but
Kida sees the raw name: it must be a file name relative to the search
directories (``"partials/nav.html"``).  The default suffix and
``namespace::`` prefixes apply only to names passed to ``render()``.

Environments are cached per search path and dropped when a path is added.

"""

from __future__ import annotations

import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from theme_manager.observability.events import TemplateRendered, now_ns
from theme_manager.templating.resolver import TemplateResolver

if TYPE_CHECKING:
    from pathlib import Path

    from kida import Environment

    from theme_manager.observability.log import EventLog

# Default params registered under this name apply to every template
TEMPLATE_ALL = "*"


class TemplateRenderer:
    """Render templates from registered theme directories.

    Args:
        resolver: Template registry; a fresh one is created when omitted.
        layout: Layout template wrapped around every render, or None.
        helpers: Globals exposed to every template (e.g. ``url``).
        autoescape: Passed through to the Kida environment.
        event_log: Receives a ``TemplateRendered`` event per render.

    """

    __slots__ = (
        "_autoescape",
        "_defaults",
        "_environments",
        "_event_log",
        "_helpers",
        "_layout",
        "_resolver",
    )

    def __init__(
        self,
        resolver: TemplateResolver | None = None,
        layout: str | None = None,
        *,
        helpers: Mapping[str, Any] | None = None,
        autoescape: bool = False,
        event_log: EventLog | None = None,
    ) -> None:
        self._resolver = resolver if resolver is not None else TemplateResolver()
        self._layout = layout
        self._helpers: dict[str, Any] = dict(helpers or {})
        self._autoescape = autoescape
        self._event_log = event_log
        self._defaults: dict[str, dict[str, Any]] = {}
        self._environments: dict[tuple[str, ...], Environment] = {}

    @property
    def resolver(self) -> TemplateResolver:
        return self._resolver

    @property
    def layout(self) -> str | None:
        return self._layout

    @property
    def helpers(self) -> Mapping[str, Any]:
        """Helper globals available to every template (read-only)."""
        return MappingProxyType(self._helpers)

    # ----- Path registry -----

    def add_path(self, path: str | Path, namespace: str | None = None) -> None:
        """Register a template directory, searched before earlier ones."""
        self._resolver.add_path(path, namespace)
        self._environments.clear()

    def get_paths(self) -> list[tuple[str, str | None]]:
        """Return ``(path, namespace)`` pairs in registration order."""
        return self._resolver.get_paths()

    # ----- Parameters -----

    def add_default_param(self, template_name: str, param: str, value: Any) -> None:
        """Set a parameter passed to a template unless the caller overrides it.

        Use ``TEMPLATE_ALL`` as the template name to apply it to every template.
        """
        self._defaults.setdefault(template_name, {})[param] = value

    def _merge_params(self, name: str, params: Mapping[str, Any] | None) -> dict[str, Any]:
        merged = dict(self._defaults.get(TEMPLATE_ALL, {}))
        merged.update(self._defaults.get(name, {}))
        merged.update(params or {})
        return merged

    # ----- Rendering -----

    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Render a template, wrapped in the layout when one applies.

        A ``layout`` param overrides the configured layout for this call;
        ``False`` disables it.  The layout receives the rendered body as
        ``content``.

        Raises:
            TemplateNotFoundError: If the template or layout cannot be resolved.

        """
        start = time.perf_counter()
        context = self._merge_params(name, params)
        layout = context.pop("layout", self._layout)

        path, body = self._render_one(name, context)
        if layout:
            layout_context = self._merge_params(layout, context)
            layout_context["content"] = body
            _, body = self._render_one(layout, layout_context)

        if self._event_log is not None:
            self._event_log.append(
                TemplateRendered(
                    template_name=name,
                    path=str(path),
                    layout=layout or None,
                    duration_ms=(time.perf_counter() - start) * 1000,
                    timestamp_ns=now_ns(),
                )
            )
        return body

    def _render_one(self, name: str, context: dict[str, Any]) -> tuple[Path, str]:
        path, search_dirs, template_name = self._locate(name)
        template = self._environment(search_dirs).get_template(template_name)
        return path, template.render(**context)

    def _locate(self, name: str) -> tuple[Path, tuple[str, ...], str]:
        """Return the resolved file, the loader search path, and the loader name."""
        namespace, template = self._resolver.split_name(name)
        mapped = self._resolver.resolve_mapped(name)
        if mapped is not None:
            dirs = (str(mapped.parent), *self._resolver.search_dirs(None))
            return mapped, dirs, mapped.name
        path = self._resolver.resolve(name)
        return path, tuple(self._resolver.search_dirs(namespace)), template

    def _environment(self, search_dirs: tuple[str, ...]) -> Environment:
        env = self._environments.get(search_dirs)
        if env is None:
            from kida import Environment, FileSystemLoader

            env = Environment(
                loader=FileSystemLoader(list(search_dirs)),
                autoescape=self._autoescape,
            )
            for helper_name, helper in self._helpers.items():
                env.add_global(helper_name, helper)
            self._environments[search_dirs] = env
        return env
