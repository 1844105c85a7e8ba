"""Shared test fixtures for theme_manager."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def themed_site(tmp_path: Path) -> Path:
    """Create a template tree with a default and a dark theme.

    Layout::

        templates/
            default/  home.html, about.html, layout.html
            dark/     home.html
        app/
            default/  dashboard.html
            dark/     (empty)

    Returns the site root.
    """
    default = tmp_path / "templates" / "default"
    default.mkdir(parents=True)
    (default / "home.html").write_text("default home: {{ title }}")
    (default / "about.html").write_text("default about")
    (default / "layout.html").write_text("<main>{{ content }}</main>")

    dark = tmp_path / "templates" / "dark"
    dark.mkdir()
    (dark / "home.html").write_text("dark home: {{ title }}")

    app_default = tmp_path / "app" / "default"
    app_default.mkdir(parents=True)
    (app_default / "dashboard.html").write_text("dashboard")
    (tmp_path / "app" / "dark").mkdir()

    return tmp_path


@pytest.fixture
def site_settings(themed_site: Path) -> dict[str, Any]:
    """Settings mapping for ``themed_site`` with the dark theme active."""
    return {
        "themes": [
            {"name": "default", "active": False},
            {"name": "dark", "active": True},
        ],
        "templates": {
            "extension": "html",
            "paths": {
                "app": [str(themed_site / "app")],
                0: str(themed_site / "templates"),
            },
        },
    }


@pytest.fixture
def collaborators() -> dict[str, Any]:
    """Base URL generators for the ``url`` and ``serverurl`` helpers."""

    def url_for(route: str | None, params: dict[str, Any], **options: Any) -> str:
        path = f"/{route or ''}"
        if params:
            path += "/" + "/".join(f"{k}-{v}" for k, v in sorted(params.items()))
        return path

    def absolute_url(path: str | None = None) -> str:
        return f"https://example.com{path or '/'}"

    return {"url": url_for, "serverurl": absolute_url}
