"""Template registry and Kida-backed renderer."""

from theme_manager.templating.renderer import TEMPLATE_ALL, TemplateRenderer
from theme_manager.templating.resolver import NAMESPACE_SEPARATOR, TemplateResolver

__all__ = [
    "NAMESPACE_SEPARATOR",
    "TEMPLATE_ALL",
    "TemplateRenderer",
    "TemplateResolver",
]
