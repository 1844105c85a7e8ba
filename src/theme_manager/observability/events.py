"""Event model for renderer assembly and rendering.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Assembly events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ThemeResolved:
    """The active theme was selected from configuration.

    Attributes:
        active_theme: Name of the selected theme.
        default_theme: Name of the fallback theme.
        source: ``"config"`` when a theme was marked active, ``"default"`` otherwise.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    active_theme: str
    default_theme: str
    source: Literal["config", "default"]
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class PathRegistered:
    """A template directory was added to the renderer.

    Attributes:
        path: Directory path as registered.
        namespace: Registry namespace (None = un-namespaced).
        theme: Theme whose subdirectory this is.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    namespace: str | None
    theme: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Rendering events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TemplateRendered:
    """A template was rendered.

    Attributes:
        template_name: Name passed to ``render()``.
        path: Resolved template file.
        layout: Layout template wrapped around the output, if any.
        duration_ms: Render time in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    template_name: str
    path: str
    layout: str | None
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type ThemeEvent = ThemeResolved | PathRegistered | TemplateRendered


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
