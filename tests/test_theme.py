"""Tests for theme_manager.theme — active theme and registration plan."""

from __future__ import annotations

from theme_manager.config import TemplatePathEntry, ThemeDescriptor, ThemeManagerConfig
from theme_manager.theme import (
    PathRegistration,
    plan_for_config,
    resolve_active_theme,
    resolve_paths,
)


# ---------------------------------------------------------------------------
# Active theme selection
# ---------------------------------------------------------------------------


class TestResolveActiveTheme:
    """resolve_active_theme — last active descriptor wins."""

    def test_no_active_falls_back_to_default(self) -> None:
        themes = (ThemeDescriptor("default"), ThemeDescriptor("dark"))
        assert resolve_active_theme(themes, "default") == "default"

    def test_empty_sequence(self) -> None:
        assert resolve_active_theme((), "default") == "default"

    def test_missing_configuration(self) -> None:
        assert resolve_active_theme(None, "default") == "default"

    def test_not_a_collection(self) -> None:
        assert resolve_active_theme("dark", "default") == "default"  # type: ignore[arg-type]

    def test_single_active(self) -> None:
        themes = [ThemeDescriptor("default"), ThemeDescriptor("dark", active=True)]
        assert resolve_active_theme(themes, "default") == "dark"

    def test_multiple_active_last_wins(self) -> None:
        themes = (
            ThemeDescriptor("dark", active=True),
            ThemeDescriptor("light"),
            ThemeDescriptor("solar", active=True),
        )
        assert resolve_active_theme(themes, "default") == "solar"

    def test_custom_default(self) -> None:
        assert resolve_active_theme((), "base") == "base"

    def test_default_marked_active(self) -> None:
        themes = (ThemeDescriptor("default", active=True),)
        assert resolve_active_theme(themes, "default") == "default"

    def test_unnamed_last_active_resets_to_default(self) -> None:
        themes = (ThemeDescriptor("dark", active=True), ThemeDescriptor(None, active=True))
        assert resolve_active_theme(themes, "default") == "default"

    def test_named_active_after_unnamed_wins(self) -> None:
        themes = (ThemeDescriptor(None, active=True), ThemeDescriptor("dark", active=True))
        assert resolve_active_theme(themes, "default") == "dark"


# ---------------------------------------------------------------------------
# Registration plan
# ---------------------------------------------------------------------------


class TestResolvePaths:
    """resolve_paths — default subpath always, active subpath after it."""

    def test_dark_theme_scenario(self) -> None:
        entries = [TemplatePathEntry(None, ("/app/templates",))]
        assert resolve_paths("dark", "default", entries) == [
            PathRegistration("/app/templates/default", None),
            PathRegistration("/app/templates/dark", None),
        ]

    def test_default_theme_registers_once(self) -> None:
        entries = [TemplatePathEntry(None, ("/app/templates",))]
        assert resolve_paths("default", "default", entries) == [
            PathRegistration("/app/templates/default", None),
        ]

    def test_two_registrations_per_path_in_order(self) -> None:
        entries = [
            TemplatePathEntry("app", ("/a", "/b")),
            TemplatePathEntry("layout", ("/c",)),
        ]
        plan = resolve_paths("dark", "default", entries)
        assert [(r.path, r.namespace) for r in plan] == [
            ("/a/default", "app"),
            ("/a/dark", "app"),
            ("/b/default", "app"),
            ("/b/dark", "app"),
            ("/c/default", "layout"),
            ("/c/dark", "layout"),
        ]

    def test_default_subpath_exactly_once_per_pair(self) -> None:
        entries = [TemplatePathEntry("app", ("/a", "/b")), TemplatePathEntry(None, ("/c",))]
        for active in ("default", "dark"):
            plan = resolve_paths(active, "default", entries)
            for root, namespace in (("/a", "app"), ("/b", "app"), ("/c", None)):
                matches = [
                    r for r in plan
                    if r.path == f"{root}/default" and r.namespace == namespace
                ]
                assert len(matches) == 1

    def test_scalar_paths_normalized(self) -> None:
        entries = [TemplatePathEntry(None, "/app/templates")]  # type: ignore[arg-type]
        assert resolve_paths("default", "default", entries) == [
            PathRegistration("/app/templates/default", None),
        ]

    def test_numeric_namespace_is_none(self) -> None:
        entries = [TemplatePathEntry("0", ("/app/templates",))]
        plan = resolve_paths("dark", "default", entries)
        assert all(r.namespace is None for r in plan)

    def test_no_entries(self) -> None:
        assert resolve_paths("dark", "default", []) == []

    def test_no_deduplication(self) -> None:
        entries = [TemplatePathEntry(None, ("/a", "/a"))]
        plan = resolve_paths("default", "default", entries)
        assert plan == [PathRegistration("/a/default"), PathRegistration("/a/default")]


class TestPlanForConfig:
    """plan_for_config — config in, (active theme, plan) out."""

    def test_no_themes_configured(self) -> None:
        config = ThemeManagerConfig.from_mapping(
            {"templates": {"paths": ["/app/templates"]}}
        )
        active, plan = plan_for_config(config)
        assert active == "default"
        assert plan == [PathRegistration("/app/templates/default", None)]

    def test_numeric_mapping_key(self) -> None:
        config = ThemeManagerConfig.from_mapping({
            "themes": [{"name": "dark", "active": True}],
            "templates": {"paths": {"0": "/app/templates"}},
        })
        active, plan = plan_for_config(config)
        assert active == "dark"
        assert plan == [
            PathRegistration("/app/templates/default", None),
            PathRegistration("/app/templates/dark", None),
        ]

    def test_unnamed_active_entry_falls_back_to_default(self) -> None:
        config = ThemeManagerConfig.from_mapping({
            "themes": [{"name": "dark", "active": True}, {"active": True}],
            "templates": {"paths": ["/app/templates"]},
        })
        active, plan = plan_for_config(config)
        assert active == "default"
        assert plan == [PathRegistration("/app/templates/default", None)]
