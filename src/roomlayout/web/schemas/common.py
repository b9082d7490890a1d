"""Common Pydantic schemas shared between requests and responses."""

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    """A point in room coordinates (mm)."""

    x: float = Field(..., description="X coordinate in mm")
    y: float = Field(..., description="Y coordinate in mm")
