"""Bounded, lock-protected store for assembly and render events.

Thread Safety:
    Every access goes through one ``threading.Lock``.

"""

import threading
from collections import deque

from theme_manager.observability.events import ThemeEvent


class EventLog:
    """Ring buffer of ``ThemeEvent`` records, oldest dropped first.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 1_000) -> None:
        self._events: deque[ThemeEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: ThemeEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        theme: str | None = None,
        namespace: str | None = None,
        limit: int = 100,
    ) -> list[ThemeEvent]:
        """Return matching events, most recent first.

        Args:
            event_type: Only events of this type.
            theme: Only events about this theme: the active theme of a
                ``ThemeResolved``, the theme of a ``PathRegistered``, or a
                ``TemplateRendered`` whose file lives under that theme.
            namespace: Only ``PathRegistered`` events for this namespace.
            limit: Maximum number of events to return.

        """
        with self._lock:
            snapshot = list(self._events)

        results: list[ThemeEvent] = []
        for event in reversed(snapshot):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if theme is not None and theme not in _themes_of(event):
                continue
            if namespace is not None and getattr(event, "namespace", None) != namespace:
                continue
            results.append(event)
        return results

    def recent(self, n: int = 20) -> list[ThemeEvent]:
        """Return the N most recent events, oldest first."""
        with self._lock:
            items = list(self._events)
        return items[-n:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)


def _themes_of(event: ThemeEvent) -> tuple[str, ...]:
    active = getattr(event, "active_theme", None)
    if active is not None:
        return (active,)
    registered = getattr(event, "theme", None)
    if registered is not None:
        return (registered,)
    # TemplateRendered: the theme is the directory holding the template file
    return tuple(event.path.split("/")[:-1])
