"""Environment-driven defaults for the inspector."""

import os

MIN_DEPTH_LIMIT = 1
MAX_DEPTH_LIMIT = 50

BUILTIN_STYLE = (
    "background:#f5f5f5;padding:1rem;border:1px solid #ddd;"
    "border-radius:4px;overflow:auto;font-family:monospace;"
    "font-size:0.875rem;line-height:1.5;max-height:600px;"
)


def clamp_depth(depth: int) -> int:
    """Clamp a requested depth into the supported range."""
    return max(MIN_DEPTH_LIMIT, min(depth, MAX_DEPTH_LIMIT))


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


DEFAULT_MAX_DEPTH = clamp_depth(_int_from_env("TPLVARS_DEFAULT_MAX_DEPTH", 10))
DEFAULT_STYLE = os.environ.get("TPLVARS_DEFAULT_STYLE", BUILTIN_STYLE)
CORS_ORIGINS = [o.strip() for o in os.environ.get("TPLVARS_CORS_ORIGINS", "*").split(",") if o.strip()]
