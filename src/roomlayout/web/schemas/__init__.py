"""Pydantic schemas for the REST API."""

from roomlayout.web.schemas.common import PointSchema
from roomlayout.web.schemas.requests import DocumentRequest, PlacementCheckRequest
from roomlayout.web.schemas.responses import (
    ErrorResponseSchema,
    MigrationResponseSchema,
    PlacementCheckResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "PointSchema",
    # Requests
    "DocumentRequest",
    "PlacementCheckRequest",
    # Responses
    "ErrorResponseSchema",
    "MigrationResponseSchema",
    "PlacementCheckResponseSchema",
    "ValidationResultSchema",
]
