"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from roomlayout.web.schemas.common import PointSchema


class ValidationResultSchema(BaseModel):
    """Response for layout validation."""

    is_valid: bool = Field(..., description="Whether the document is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class MigrationResponseSchema(BaseModel):
    """Response for layout migration."""

    version: str = Field(..., description="Version of the returned document")
    migrated_from: list[str] = Field(
        default_factory=list, description="Versions upgraded from, in order"
    )
    document: dict[str, Any] = Field(..., description="Latest-version document JSON")


class PlacementCheckResponseSchema(BaseModel):
    """Response for a placement check."""

    allowed: bool = Field(..., description="Whether the item can be placed")
    x: float = Field(..., description="Anchor x after snapping and constraint")
    y: float = Field(..., description="Anchor y after snapping and constraint")
    colliding_ids: list[str] = Field(
        default_factory=list, description="Ids of items the placement collides with"
    )
    overlaps: list[list[PointSchema]] = Field(
        default_factory=list, description="Overlap polygons with colliding items"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
