"""Shared type definitions for theme_manager."""

from collections.abc import Callable

# Base URL generator supplied by the host application: (route, params, **options) -> url
type UrlGenerator = Callable[..., str]

# Base server URL generator supplied by the host application: (path) -> url
type ServerUrlGenerator = Callable[..., str]
