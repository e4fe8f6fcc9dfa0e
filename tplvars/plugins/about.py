"""About pages for template plugins, rendered with Jinja2."""

from typing import Optional

from jinja2 import BaseLoader, Environment, TemplateError
from markupsafe import Markup

from .registry import PluginRegistry, get_plugin_registry

_env = Environment(
    loader=BaseLoader(),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_about(plugin_key: str, registry: Optional[PluginRegistry] = None) -> Markup:
    """Render the about page of a plugin.

    Args:
        plugin_key: Plugin key, e.g. "get_template_vars"
        registry: PluginRegistry instance (default: global singleton)

    Returns:
        HTML fragment describing authors, usage, parameters and history

    Raises:
        ValueError: If the plugin or its about template is missing
    """
    registry = registry or get_plugin_registry()

    plugin = registry.get(plugin_key)
    if plugin is None:
        raise ValueError(f"Plugin not found: {plugin_key}")

    template_str = registry.get_template(plugin.about_template)
    if not template_str:
        raise ValueError(f"About template not found for plugin: {plugin_key}")

    try:
        rendered = _env.from_string(template_str).render(plugin=plugin)
    except TemplateError as e:
        raise ValueError(f"Template rendering error for {plugin_key}: {e}")

    return Markup(rendered)
