"""Theme manager CLI — theme-manager themes / paths / build-theme.

Entry point for the ``theme-manager`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the theme-manager CLI."""
    parser = argparse.ArgumentParser(
        prog="theme-manager",
        description="Theme-aware template path registration.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # theme-manager themes
    themes_parser = subparsers.add_parser(
        "themes",
        help="List configured themes and the active one",
    )
    themes_parser.add_argument("root", nargs="?", default=".", help="Config root directory")

    # theme-manager paths
    paths_parser = subparsers.add_parser(
        "paths",
        help="Show template directories in registration order",
    )
    paths_parser.add_argument("root", nargs="?", default=".", help="Config root directory")

    # theme-manager build-theme
    build_parser = subparsers.add_parser(
        "build-theme",
        help="Create a theme directory under every template root",
    )
    build_parser.add_argument("name", help="Theme name")
    build_parser.add_argument("root", nargs="?", default=".", help="Config root directory")
    build_parser.add_argument(
        "--copy-default",
        action="store_true",
        help="Seed the theme with the default theme's templates",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from theme_manager import __version__

    return __version__


def _cmd_themes(root: str) -> None:
    from theme_manager.config_loader import load_config
    from theme_manager.theme import resolve_active_theme

    config = load_config(root)
    active = resolve_active_theme(config.themes, config.default_theme)
    names = list(config.theme_names)
    if config.default_theme not in names:
        names.insert(0, config.default_theme)
    for name in names:
        marker = "*" if name == active else " "
        print(f"{marker} {name}")


def _cmd_paths(root: str) -> None:
    from theme_manager.config_loader import load_config
    from theme_manager.theme import plan_for_config

    config = load_config(root)
    active, plan = plan_for_config(config)
    print(f"Active theme: {active}")
    for registration in plan:
        namespace = registration.namespace or "-"
        print(f"  {namespace:<12} {registration.path}")


def _cmd_build_theme(root: str, name: str, *, copy_default: bool) -> None:
    from theme_manager.commands import build_theme
    from theme_manager.config_loader import load_config

    config = load_config(root)
    created = build_theme(config, name, copy_default=copy_default)
    for path in created:
        print(f"  created {path}")
    print(f"Theme {name!r}: {len(created)} director{'y' if len(created) == 1 else 'ies'} created")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from theme_manager._errors import ThemeManagerError

    try:
        if args.command == "themes":
            _cmd_themes(args.root)
        elif args.command == "paths":
            _cmd_paths(args.root)
        elif args.command == "build-theme":
            _cmd_build_theme(args.root, args.name, copy_default=args.copy_default)
    except ThemeManagerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
