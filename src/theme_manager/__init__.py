"""Theme manager — wire an active theme into a server-side template renderer.

Every configured template root gets the default theme's subdirectory
registered; when another theme is active, its subdirectory is registered on
top, so template lookup falls back from the chosen theme to the default.

Quick start::

    from theme_manager import ThemeManagerConfig, create_renderer

    config = ThemeManagerConfig.from_mapping(settings)
    renderer = create_renderer(
        config,
        collaborators={"url": router.url_for, "serverurl": absolute_url},
    )
    html = renderer.render("app::home", {"title": "Home"})

Given ``templates/`` and an active ``dark`` theme::

    templates/default/   always registered
    templates/dark/      registered after, searched first

"""

__version__ = "0.1.0"
__all__ = [
    "ThemeManagerConfig",
    "__version__",
    "create_renderer",
    "load_config",
    "resolve_active_theme",
    "resolve_paths",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import theme_manager`` fast; Kida is only imported on first render.
    """
    if name == "ThemeManagerConfig":
        from theme_manager.config import ThemeManagerConfig

        return ThemeManagerConfig

    if name == "create_renderer":
        from theme_manager.factory import create_renderer

        return create_renderer

    if name == "load_config":
        from theme_manager.config_loader import load_config

        return load_config

    if name == "resolve_active_theme":
        from theme_manager.theme import resolve_active_theme

        return resolve_active_theme

    if name == "resolve_paths":
        from theme_manager.theme import resolve_paths

        return resolve_paths

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
