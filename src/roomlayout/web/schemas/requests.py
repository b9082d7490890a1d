"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from roomlayout.application.config import FurnitureConfig


class DocumentRequest(BaseModel):
    """Request carrying a raw layout document of any supported version."""

    document: dict[str, Any] = Field(..., description="Layout document JSON")


class PlacementCheckRequest(BaseModel):
    """Request for checking an item's placement in a layout."""

    document: dict[str, Any] = Field(..., description="Layout document JSON")
    item: FurnitureConfig = Field(..., description="Item at its proposed position")
    snap: bool = Field(default=True, description="Snap to the room grid when enabled")
