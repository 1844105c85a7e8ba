"""Tests for theme_manager.config_loader — yaml/toml config files."""

from __future__ import annotations

from pathlib import Path

from theme_manager.config import TemplatePathEntry, ThemeDescriptor
from theme_manager.config_loader import find_config_file, load_config


class TestLoadConfig:
    """load_config — file discovery, parsing, overrides."""

    def test_no_file_returns_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.themes is None
        assert config.templates.paths == ()

    def test_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yaml").write_text(
            "themes:\n"
            "  - name: default\n"
            "    active: false\n"
            "  - name: dark\n"
            "    active: true\n"
            "templates:\n"
            "  layout: layout::default\n"
            "  paths:\n"
            "    app: /srv/app\n"
        )
        config = load_config(tmp_path)
        assert config.themes == (ThemeDescriptor("default"), ThemeDescriptor("dark", True))
        assert config.templates.layout == "layout::default"
        assert config.templates.paths == (TemplatePathEntry("app", ("/srv/app",)),)

    def test_yml_extension(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yml").write_text("default_theme: base\n")
        assert load_config(tmp_path).default_theme == "base"

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.toml").write_text(
            '[[themes]]\nname = "dark"\nactive = true\n\n'
            '[templates]\nextension = "phtml"\n'
        )
        config = load_config(tmp_path)
        assert config.themes == (ThemeDescriptor("dark", True),)
        assert config.templates.extension == "phtml"

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yaml").write_text("default_theme: from-yaml\n")
        (tmp_path / "theme-manager.toml").write_text('default_theme = "from-toml"\n')
        assert find_config_file(tmp_path) == tmp_path / "theme-manager.yaml"
        assert load_config(tmp_path).default_theme == "from-yaml"

    def test_invalid_yaml_returns_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yaml").write_text("themes: [unclosed\n")
        assert load_config(tmp_path).themes is None

    def test_non_mapping_yaml_returns_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yaml").write_text("- just\n- a list\n")
        assert load_config(tmp_path).themes is None

    def test_invalid_toml_returns_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.toml").write_text("themes = [\n")
        assert load_config(tmp_path).themes is None

    def test_overrides_take_precedence(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yaml").write_text(
            "themes:\n  - name: dark\n    active: true\n"
        )
        config = load_config(tmp_path, themes=[{"name": "light", "active": True}])
        assert config.themes == (ThemeDescriptor("light", True),)

    def test_relative_paths_anchored_to_root(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yaml").write_text(
            "templates:\n"
            "  paths:\n"
            "    app: app\n"
            "    0: templates\n"
            "    abs: /srv/abs\n"
        )
        config = load_config(tmp_path)
        root = tmp_path.resolve()
        assert config.templates.paths == (
            TemplatePathEntry("app", (str(root / "app"),)),
            TemplatePathEntry(None, (str(root / "templates"),)),
            TemplatePathEntry("abs", ("/srv/abs",)),
        )

    def test_relative_list_paths(self, tmp_path: Path) -> None:
        (tmp_path / "theme-manager.yaml").write_text(
            "templates:\n  paths:\n    - one\n    - two\n"
        )
        config = load_config(tmp_path)
        root = tmp_path.resolve()
        assert [e.paths for e in config.templates.paths] == [
            (str(root / "one"),),
            (str(root / "two"),),
        ]
        assert all(e.namespace is None for e in config.templates.paths)
