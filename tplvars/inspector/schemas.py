"""
Pydantic schemas for the variable inspector.
"""

import re
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tplvars import config

INDENT_UNIT = "&nbsp;&nbsp;&nbsp;"
LINE_BREAK = "<br/>"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class ParentKind(str, Enum):
    """Container kind a member was reached through."""
    ROOT = "root"
    COMPOSITE = "composite"
    COLLECTION = "collection"


class ValueKind(str, Enum):
    """Closed classification of an inspected value."""
    COMPOSITE = "composite"
    COLLECTION = "collection"
    CALLABLE = "callable"
    LEAF = "leaf"


class RenderContext(BaseModel):
    """Per-walk rendering configuration, shared unchanged by every node."""
    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(config.MAX_DEPTH_LIMIT, ge=1, description="Deepest level that is still expanded")
    indent_unit: str = Field(INDENT_UNIT, description="Indentation emitted once per depth level")

    def indent(self, depth: int) -> str:
        return self.indent_unit * depth


def coerce_int(value: Any) -> int:
    """Integer cast used for host-supplied parameters.

    Strings contribute their leading integer ("12px" -> 12); anything
    that cannot be read as a number becomes 0.
    """
    if isinstance(value, (bool, int, float)):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class InspectorOptions(BaseModel):
    """Options of one inspector invocation, clamped and defaulted."""
    max_depth: int = Field(default_factory=lambda: config.DEFAULT_MAX_DEPTH, description="Maximum nesting depth (1-50)")
    style: str = Field(default_factory=lambda: config.DEFAULT_STYLE, description="CSS for the output container")
    assign: Optional[str] = Field(None, description="Template variable receiving the dump instead of output")

    @field_validator("max_depth", mode="before")
    @classmethod
    def _clamp_max_depth(cls, value: Any) -> int:
        if value is None:
            return config.DEFAULT_MAX_DEPTH
        return config.clamp_depth(coerce_int(value))

    @field_validator("style", mode="before")
    @classmethod
    def _default_style(cls, value: Any) -> str:
        if value is None:
            return config.DEFAULT_STYLE
        return str(value)

    @field_validator("assign", mode="before")
    @classmethod
    def _normalize_assign(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        name = str(value).strip()
        return name or None

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> "InspectorOptions":
        """Build options from raw template call parameters."""
        return cls(
            max_depth=params.get("maxdepth"),
            style=params.get("style"),
            assign=params.get("assign"),
        )


class InspectRequest(BaseModel):
    """Request body for the inspect endpoints."""
    variables: dict[str, Any] = Field(default_factory=dict, description="Named values to inspect")
    maxdepth: Optional[Union[int, str]] = Field(None, description="Maximum nesting depth (1-50)")
    style: Optional[str] = Field(None, description="CSS for the output container")

    def to_options(self) -> InspectorOptions:
        return InspectorOptions(max_depth=self.maxdepth, style=self.style)


class InspectResponse(BaseModel):
    """Rendered dump returned by the inspect endpoint."""
    html: str
    variable_count: int
    max_depth: int
