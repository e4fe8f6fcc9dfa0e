"""
Inspector module for Template Variable Inspector

Classifies arbitrary values, builds accessor paths and renders
bounded-depth HTML dumps of named variables.
"""

from .schemas import (
    InspectorOptions,
    InspectRequest,
    InspectResponse,
    ParentKind,
    RenderContext,
    ValueKind,
)
from .accessor import InvalidAccessorKind, build_accessor
from .classify import classify_value
from .renderer import render_value
from .invocation import inspect_variables

__all__ = [
    "InspectorOptions",
    "InspectRequest",
    "InspectResponse",
    "ParentKind",
    "RenderContext",
    "ValueKind",
    "InvalidAccessorKind",
    "build_accessor",
    "classify_value",
    "render_value",
    "inspect_variables",
]
