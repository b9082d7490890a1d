"""Furniture item configuration schema."""

from pydantic import Field, model_validator

from roomlayout.application.config.schemas.base import (
    HEX_COLOR_PATTERN,
    MIN_FURNITURE_SIZE,
    LayoutModel,
)
from roomlayout.domain.value_objects import FurnitureCategory, FurnitureType


class FurnitureConfig(LayoutModel):
    """Configuration for a placed furniture item.

    Attributes:
        id: Unique item identifier.
        type: Furniture type.
        name: Display name.
        x: Anchor x in mm (top-left before rotation).
        y: Anchor y in mm (top-left before rotation).
        width: Footprint width in mm.
        depth: Footprint depth in mm.
        height: Item height in mm.
        rotation: Rotation in degrees about the item centre.
        category: Optional palette category (v1.2.0+).
        color: Optional hex colour.
        z_index: Draw order.
        locked: Whether the item rejects geometric edits.
        parent_id: Hosting desk/table id (v1.2.0+).
        attach_offset_x: Centre offset in the parent's frame (v1.2.0+).
        attach_offset_y: Centre offset in the parent's frame (v1.2.0+).
    """

    id: str = Field(..., min_length=1)
    type: FurnitureType
    name: str
    x: float
    y: float
    width: float = Field(..., ge=MIN_FURNITURE_SIZE)
    depth: float = Field(..., ge=MIN_FURNITURE_SIZE)
    height: float = Field(..., ge=MIN_FURNITURE_SIZE)
    rotation: float
    category: FurnitureCategory | None = None
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    z_index: int
    locked: bool
    parent_id: str | None = None
    attach_offset_x: float | None = None
    attach_offset_y: float | None = None

    @model_validator(mode="after")
    def validate_parent_not_self(self) -> "FurnitureConfig":
        """An item cannot be its own parent."""
        if self.parent_id is not None and self.parent_id == self.id:
            raise ValueError("Furniture item cannot be attached to itself")
        return self
