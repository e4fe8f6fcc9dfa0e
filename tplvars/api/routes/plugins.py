"""
Plugin API routes for listing template plugins and their about pages.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from ...plugins.about import render_about
from ...plugins.registry import get_plugin_registry
from ...plugins.schemas import PluginInfo, PluginSummary

router = APIRouter(prefix="/plugins", tags=["plugins"])


@router.get("", response_model=list[PluginSummary])
async def list_plugins():
    """List all plugin definitions with summaries."""
    registry = get_plugin_registry()
    return registry.list_summaries()


@router.get("/{key}", response_model=PluginInfo)
async def get_plugin(key: str):
    """Get a specific plugin definition by key."""
    registry = get_plugin_registry()
    plugin = registry.get(key)
    if not plugin:
        raise HTTPException(status_code=404, detail=f"Plugin '{key}' not found")
    return plugin


@router.get("/{key}/about", response_class=HTMLResponse)
async def get_plugin_about(key: str):
    """Get the rendered about page of a plugin."""
    registry = get_plugin_registry()
    if not registry.get(key):
        raise HTTPException(status_code=404, detail=f"Plugin '{key}' not found")
    return HTMLResponse(content=str(render_about(key, registry)))


@router.post("/reload")
async def reload_plugins():
    """Reload all plugin definitions from disk."""
    registry = get_plugin_registry()
    registry.reload()
    return {"reloaded": True, "count": registry.count()}
