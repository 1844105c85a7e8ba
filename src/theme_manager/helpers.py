"""The ``url`` and ``serverurl`` view helpers exposed as template globals.

The host application supplies the actual URL generators as collaborators.
``assemble_helpers`` checks they are all present once, when the renderer is
assembled, and returns a typed result instead of failing on first use.

Collaborators are looked up under the helper identity or any of its aliases::

    assemble_helpers({
        "url": router.url_for,             # (route, params, **options) -> str
        "serverurl": request.absolute_url, # (path) -> str
    })

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from theme_manager._errors import MissingDependencyError

if TYPE_CHECKING:
    from theme_manager._types import ServerUrlGenerator, UrlGenerator

URL_HELPER = "url"
SERVER_URL_HELPER = "serverurl"

HELPER_ALIASES: dict[str, tuple[str, ...]] = {
    URL_HELPER: ("url", "Url"),
    SERVER_URL_HELPER: ("serverurl", "serverUrl", "ServerUrl"),
}


class UrlHelper:
    """Generate a URL for a named route.

    Args:
        generate: Base generator, called as ``generate(route, params, **options)``.

    """

    __slots__ = ("_generate",)

    def __init__(self, generate: UrlGenerator) -> None:
        self._generate = generate

    def __call__(
        self,
        route: str | None = None,
        params: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> str:
        return self._generate(route, dict(params or {}), **options)


class ServerUrlHelper:
    """Generate an absolute URL (scheme and host included) for a path.

    Args:
        generate: Base generator, called as ``generate(path)``.

    """

    __slots__ = ("_generate",)

    def __init__(self, generate: ServerUrlGenerator) -> None:
        self._generate = generate

    def __call__(self, path: str | None = None) -> str:
        return self._generate(path)


_HELPER_TYPES: dict[str, type[UrlHelper] | type[ServerUrlHelper]] = {
    URL_HELPER: UrlHelper,
    SERVER_URL_HELPER: ServerUrlHelper,
}


@dataclass(frozen=True, slots=True)
class HelperAssembly:
    """Result of assembling the view helpers.

    Attributes:
        helpers: Template global name to helper, one entry per alias.
        errors: One error per missing collaborator (empty on success).

    """

    helpers: dict[str, UrlHelper | ServerUrlHelper] = field(default_factory=dict)
    errors: tuple[MissingDependencyError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> dict[str, UrlHelper | ServerUrlHelper]:
        """Return the helpers, or raise the first assembly error."""
        if self.errors:
            raise self.errors[0]
        return self.helpers


def _find_collaborator(collaborators: Mapping[str, object], identity: str) -> object | None:
    for key in HELPER_ALIASES[identity]:
        value = collaborators.get(key)
        if value is not None:
            return value
    return None


def assemble_helpers(collaborators: Mapping[str, object] | None = None) -> HelperAssembly:
    """Wrap each supplied URL generator and register it under every alias.

    A missing or non-callable collaborator produces a ``MissingDependencyError``
    in the result rather than an exception.
    """
    collaborators = collaborators or {}
    helpers: dict[str, UrlHelper | ServerUrlHelper] = {}
    errors: list[MissingDependencyError] = []

    for identity, helper_type in _HELPER_TYPES.items():
        base = _find_collaborator(collaborators, identity)
        if base is None or not callable(base):
            msg = (
                f"A {helper_type.__name__} base generator is required in order to "
                f"create the {identity!r} view helper; not found "
                f"(looked up as: {', '.join(HELPER_ALIASES[identity])})"
            )
            errors.append(MissingDependencyError(msg))
            continue
        helper = helper_type(base)
        for alias in HELPER_ALIASES[identity]:
            helpers[alias] = helper

    return HelperAssembly(helpers=helpers, errors=tuple(errors))
