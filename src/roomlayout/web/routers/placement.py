"""Furniture placement check endpoints."""

from fastapi import APIRouter

from roomlayout.application.config import (
    LayoutError,
    document_to_snapshot,
    load_layout_from_dict,
)
from roomlayout.application.config.adapter import config_to_item
from roomlayout.application.inspection import check_placement
from roomlayout.web.exceptions import DocumentRejectedError
from roomlayout.web.schemas.common import PointSchema
from roomlayout.web.schemas.requests import PlacementCheckRequest
from roomlayout.web.schemas.responses import (
    ErrorResponseSchema,
    PlacementCheckResponseSchema,
)

router = APIRouter(prefix="/placement", tags=["placement"])


@router.post(
    "/check",
    response_model=PlacementCheckResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def check_item_placement(
    request: PlacementCheckRequest,
) -> PlacementCheckResponseSchema:
    """Check whether an item can be placed at a proposed position.

    The item is snapped to the grid (if requested and enabled for the room),
    pulled back inside the room, and tested for collisions against the
    layout's furniture.

    Raises:
        DocumentRejectedError: If the layout document is invalid (HTTP 422).
    """
    try:
        document = load_layout_from_dict(request.document)
    except LayoutError as e:
        raise DocumentRejectedError.from_layout_error(e) from e

    report = check_placement(
        document_to_snapshot(document), config_to_item(request.item), snap=request.snap
    )
    return PlacementCheckResponseSchema(
        allowed=report.allowed,
        x=report.x,
        y=report.y,
        colliding_ids=list(report.colliding_ids),
        overlaps=[
            [PointSchema(x=p.x, y=p.y) for p in polygon] for polygon in report.overlaps
        ],
    )
