"""Root layout document schema.

This module contains the LayoutDocument model, the top-level structure of
an exported layout file.
"""

from typing import Literal

from pydantic import Field

from roomlayout.application.config.schemas.base import LayoutModel
from roomlayout.application.config.schemas.furniture_schema import FurnitureConfig
from roomlayout.application.config.schemas.opening_schema import (
    DoorConfig,
    WindowConfig,
)
from roomlayout.application.config.schemas.room_schema import RoomConfig


class LayoutMetaConfig(LayoutModel):
    """Document timestamps (ISO 8601 strings)."""

    created_at: str
    updated_at: str


class LayoutDocument(LayoutModel):
    """Root model of a persisted layout.

    Only the latest version is accepted here; older documents go through
    ``migrate`` first.

    Example:
        >>> doc = LayoutDocument.model_validate({
        ...     "version": "1.2.0",
        ...     "room": {"width": 4000, "height": 3000, "wallThickness": 200,
        ...              "ceilingHeight": 2400, "gridSize": 100,
        ...              "snapEnabled": True},
        ...     "furniture": [], "doors": [], "windows": [],
        ...     "meta": {"createdAt": "2024-01-01T00:00:00Z",
        ...              "updatedAt": "2024-01-01T00:00:00Z"},
        ... })
    """

    version: Literal["1.2.0"]
    room: RoomConfig
    furniture: list[FurnitureConfig] = Field(default_factory=list)
    doors: list[DoorConfig] = Field(default_factory=list)
    windows: list[WindowConfig] = Field(default_factory=list)
    meta: LayoutMetaConfig

    def to_json_dict(self) -> dict:
        """Dump as camelCase JSON-compatible data, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
