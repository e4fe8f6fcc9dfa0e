"""Template Variable Inspector API.

Serves the inspector over HTTP:
- Variable dumps (JSON or HTML fragment)
- Plugin definitions and about pages
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tplvars import __version__, config
from tplvars.api.routes import inspect, plugins
from tplvars.plugins.registry import get_plugin_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Loading plugin definitions...")
    plugin_registry = get_plugin_registry()
    logger.info(f"Loaded {plugin_registry.count()} plugins")

    logger.info("Template Variable Inspector API ready")
    yield
    logger.info("Shutting down Template Variable Inspector API")


app = FastAPI(
    title="Template Variable Inspector API",
    description="""
## Template Variable Inspector

Renders arbitrary named values as an indented HTML tree of accessor
paths, runtime types and escaped values.

### Key Endpoints

- `POST /v1/inspect` - Render variables, JSON response
- `POST /v1/inspect/render` - Render variables, HTML response
- `GET /v1/plugins` - List template plugins
- `GET /v1/plugins/{key}/about` - Plugin about page
""",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(inspect.router, prefix="/v1")
app.include_router(plugins.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Template Variable Inspector API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "inspect": "/v1/inspect",
            "plugins": "/v1/plugins",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    plugin_registry = get_plugin_registry()
    return {
        "status": "healthy",
        "plugins_loaded": plugin_registry.count(),
        "default_max_depth": config.DEFAULT_MAX_DEPTH,
    }
