"""
Plugin Registry - loads and serves template plugin definitions and about templates.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from .schemas import PluginInfo, PluginSummary

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"
TEMPLATES_DIR = Path(__file__).parent / "templates"


class PluginRegistry:
    """Registry for template plugin definitions.

    Definitions are loaded from definitions/*.yaml, about templates
    from templates/*.html.j2. Both are cached until reload().
    """

    def __init__(
        self,
        definitions_dir: Optional[Path] = None,
        templates_dir: Optional[Path] = None,
    ):
        """Initialize the registry.

        Args:
            definitions_dir: Path to plugin definitions (default: tplvars/plugins/definitions)
            templates_dir: Path to about templates (default: tplvars/plugins/templates)
        """
        self.definitions_dir = definitions_dir or DEFINITIONS_DIR
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self._plugins: dict[str, PluginInfo] = {}
        self._templates: dict[str, str] = {}
        self._load_all()

    def _load_all(self) -> None:
        self._load_definitions()
        self._load_templates()

    def _load_definitions(self) -> None:
        """Load all plugin definitions from YAML files."""
        if not self.definitions_dir.exists():
            logger.warning(f"Plugin definitions directory not found: {self.definitions_dir}")
            return

        for yaml_file in sorted(self.definitions_dir.glob("*.yaml")):
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                plugin = PluginInfo.model_validate(data)
                self._plugins[plugin.key] = plugin
                logger.debug(f"Loaded plugin definition: {plugin.key}")
            except Exception as e:
                logger.error(f"Failed to load plugin definition from {yaml_file}: {e}")

        logger.info(f"Loaded {len(self._plugins)} plugin definitions")

    def _load_templates(self) -> None:
        """Load all about templates."""
        if not self.templates_dir.exists():
            logger.warning(f"Plugin templates directory not found: {self.templates_dir}")
            return

        for template_file in self.templates_dir.glob("*.html.j2"):
            name = template_file.name[: -len(".html.j2")]  # about.html.j2 -> about
            self._templates[name] = template_file.read_text(encoding="utf-8")
            logger.debug(f"Loaded plugin template: {name}")

    def reload(self) -> None:
        """Reload all definitions and templates from disk."""
        self._plugins.clear()
        self._templates.clear()
        self._load_all()

    def get(self, key: str) -> Optional[PluginInfo]:
        """Get a plugin definition by key."""
        return self._plugins.get(key)

    def get_template(self, name: str) -> Optional[str]:
        """Get an about template by name."""
        return self._templates.get(name)

    def list_all(self) -> list[PluginInfo]:
        return list(self._plugins.values())

    def list_keys(self) -> list[str]:
        return list(self._plugins.keys())

    def list_summaries(self) -> list[PluginSummary]:
        """List lightweight plugin summaries."""
        return [
            PluginSummary(
                key=p.key,
                name=p.name,
                version=p.version,
                summary=p.summary,
                parameter_count=len(p.parameters),
            )
            for p in self._plugins.values()
        ]

    def count(self) -> int:
        return len(self._plugins)


# Global registry instance
_registry: Optional[PluginRegistry] = None


def get_plugin_registry() -> PluginRegistry:
    """Get the global plugin registry instance."""
    global _registry
    if _registry is None:
        _registry = PluginRegistry()
    return _registry
