"""
Pydantic schemas for template plugin definitions.
"""

from typing import Optional
from pydantic import BaseModel, Field


class PluginAuthor(BaseModel):
    """Author credit shown on the about page."""
    name: str = Field(..., description="Author name")
    contact: Optional[str] = Field(None, description="E-mail address or website")


class PluginParameter(BaseModel):
    """A parameter accepted by a template function."""
    name: str = Field(..., description="Parameter name as written in templates")
    description: str = Field(..., description="What the parameter controls")
    required: bool = Field(False, description="Whether callers must pass it")


class ChangeEntry(BaseModel):
    """One release in the change history."""
    version: str
    summary: str


class PluginInfo(BaseModel):
    """Complete definition of a template plugin."""
    key: str = Field(..., description="Global name the plugin is registered under")
    name: str = Field(..., description="Human-readable name")
    version: str = Field(..., description="Plugin version")
    summary: str = Field(..., description="One-line description")
    authors: list[PluginAuthor] = Field(default_factory=list)
    usage: list[str] = Field(default_factory=list, description="Example template calls")
    parameters: list[PluginParameter] = Field(default_factory=list)
    change_history: list[ChangeEntry] = Field(default_factory=list)
    about_template: str = Field("about", description="Template used for the about page")


class PluginSummary(BaseModel):
    """Summary of a plugin for list endpoints."""
    key: str
    name: str
    version: str
    summary: str
    parameter_count: int
