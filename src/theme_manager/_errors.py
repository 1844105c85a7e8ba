"""Theme manager error hierarchy.

All theme-manager errors inherit from ThemeManagerError for easy catching.
"""


class ThemeManagerError(Exception):
    """Base error for all theme manager operations."""


class ConfigError(ThemeManagerError):
    """Invalid or missing configuration."""


class MissingDependencyError(ConfigError):
    """A collaborator required to assemble the renderer was not supplied."""


class TemplateNotFoundError(ThemeManagerError):
    """No registered directory or template map entry provides the template."""
