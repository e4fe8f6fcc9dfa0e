"""
Inspect API routes for rendering variable dumps over HTTP.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ...inspector.invocation import inspect_variables
from ...inspector.schemas import InspectRequest, InspectResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inspect", tags=["inspect"])


@router.post("", response_model=InspectResponse)
async def inspect(request: InspectRequest):
    """Render the posted variables and return the dump as JSON."""
    options = request.to_options()
    html = inspect_variables(request.variables, options)
    logger.info(f"Inspected {len(request.variables)} variables (max_depth={options.max_depth})")
    return InspectResponse(
        html=str(html),
        variable_count=len(request.variables),
        max_depth=options.max_depth,
    )


@router.post("/render", response_class=HTMLResponse)
async def inspect_render(request: InspectRequest):
    """Render the posted variables and return the dump as an HTML fragment."""
    html = inspect_variables(request.variables, request.to_options())
    return HTMLResponse(content=str(html))
