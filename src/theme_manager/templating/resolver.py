"""Template registry: template map plus namespaced path stacks.

Template names take the form ``template`` or ``namespace::template``.  The
default suffix is appended when the name carries no extension.

Lookup order:
    1. The template map (exact name, then name with suffix).
    2. The namespace's paths, most recently added first.
    3. For namespaced names, the un-namespaced paths, most recently added first.

"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from theme_manager._errors import TemplateNotFoundError

NAMESPACE_SEPARATOR = "::"


class TemplateResolver:
    """Resolve template names to files on disk.

    Args:
        template_map: Explicit name to file path mapping.
        default_suffix: Extension (without the dot) appended to bare names.

    """

    __slots__ = ("_default_suffix", "_map", "_registrations", "_stacks")

    def __init__(
        self,
        template_map: Mapping[str, str] | None = None,
        default_suffix: str = "html",
    ) -> None:
        self._map: dict[str, str] = dict(template_map or {})
        self._default_suffix = default_suffix.lstrip(".")
        self._stacks: dict[str | None, list[str]] = {}
        self._registrations: list[tuple[str, str | None]] = []

    @property
    def default_suffix(self) -> str:
        return self._default_suffix

    def add_path(self, path: str | Path, namespace: str | None = None) -> None:
        """Register a template directory, searched before earlier ones."""
        normalized = str(path)
        if len(normalized) > 1:
            normalized = normalized.rstrip("/")
        self._stacks.setdefault(namespace, []).append(normalized)
        self._registrations.append((normalized, namespace))

    def get_paths(self) -> list[tuple[str, str | None]]:
        """Return ``(path, namespace)`` pairs in registration order."""
        return list(self._registrations)

    def search_dirs(self, namespace: str | None = None) -> list[str]:
        """Return the directories searched for a namespace, highest priority first."""
        dirs = list(reversed(self._stacks.get(namespace, [])))
        if namespace is not None:
            dirs.extend(reversed(self._stacks.get(None, [])))
        return dirs

    def split_name(self, name: str) -> tuple[str | None, str]:
        """Split ``namespace::template`` and apply the default suffix."""
        namespace: str | None = None
        template = name
        if NAMESPACE_SEPARATOR in name:
            namespace, template = name.split(NAMESPACE_SEPARATOR, 1)
            namespace = namespace or None
        if not PurePosixPath(template).suffix:
            template = f"{template}.{self._default_suffix}"
        return namespace, template

    def resolve(self, name: str) -> Path:
        """Return the file for a template name.

        Raises:
            TemplateNotFoundError: If neither the map nor any registered
                directory provides the template.

        """
        mapped = self.resolve_mapped(name)
        if mapped is not None:
            return mapped

        namespace, template = self.split_name(name)
        dirs = self.search_dirs(namespace)
        for directory in dirs:
            candidate = Path(directory) / template
            if candidate.is_file():
                return candidate

        searched = ", ".join(dirs) or "<no paths registered>"
        msg = f"Template {name!r} not found (searched: {searched})"
        raise TemplateNotFoundError(msg)

    def resolve_mapped(self, name: str) -> Path | None:
        """Return the mapped file for a name, or None when the map has no entry."""
        if name in self._map:
            return Path(self._map[name])
        namespace, template = self.split_name(name)
        key = f"{namespace}{NAMESPACE_SEPARATOR}{template}" if namespace else template
        if key in self._map:
            return Path(self._map[key])
        return None
