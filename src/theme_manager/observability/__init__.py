"""Observability — structured events for renderer assembly and rendering.

All events are frozen dataclasses with nanosecond timestamps.  Pass an
``EventLog`` to ``create_renderer`` to record which theme was selected,
which directories were registered, and which templates were rendered.

Quick Start:
    >>> from theme_manager.observability import EventLog, PathRegistered
    >>> log = EventLog()
    >>> renderer = create_renderer(config, collaborators=helpers, event_log=log)
    >>> log.query(event_type=PathRegistered)

"""

from theme_manager.observability.events import (
    PathRegistered,
    TemplateRendered,
    ThemeEvent,
    ThemeResolved,
    now_ns,
)
from theme_manager.observability.log import EventLog

__all__ = [
    "EventLog",
    "PathRegistered",
    "TemplateRendered",
    "ThemeEvent",
    "ThemeResolved",
    "now_ns",
]
