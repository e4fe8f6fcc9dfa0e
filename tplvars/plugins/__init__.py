"""
Plugins module for Template Variable Inspector

Binds the inspector to Jinja2 and serves plugin definitions and about pages.
"""

from .schemas import PluginAuthor, PluginParameter, ChangeEntry, PluginInfo, PluginSummary
from .registry import PluginRegistry, get_plugin_registry
from .about import render_about
from .jinja_functions import get_template_vars, get_template_vars_about, register_template_functions

__all__ = [
    "PluginAuthor",
    "PluginParameter",
    "ChangeEntry",
    "PluginInfo",
    "PluginSummary",
    "PluginRegistry",
    "get_plugin_registry",
    "render_about",
    "get_template_vars",
    "get_template_vars_about",
    "register_template_functions",
]
