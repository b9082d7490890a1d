"""Layout migration endpoints."""

import logging

from fastapi import APIRouter

from roomlayout.application.config import (
    LATEST_VERSION,
    LayoutError,
    load_layout_from_dict,
    migrate,
)
from roomlayout.web.exceptions import DocumentRejectedError
from roomlayout.web.schemas.requests import DocumentRequest
from roomlayout.web.schemas.responses import (
    ErrorResponseSchema,
    MigrationResponseSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/migrate", tags=["migrate"])


@router.post(
    "",
    response_model=MigrationResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def migrate_layout_document(request: DocumentRequest) -> MigrationResponseSchema:
    """Upgrade a layout document to the latest version.

    Raises:
        DocumentRejectedError: If the document cannot be migrated or does
            not validate after migration (HTTP 422).
    """
    try:
        document = load_layout_from_dict(request.document)
    except LayoutError as e:
        raise DocumentRejectedError.from_layout_error(e) from e

    applied = migrate(request.document).applied
    logger.debug(f"Migrated document through {applied or 'no'} steps")
    return MigrationResponseSchema(
        version=LATEST_VERSION,
        migrated_from=applied,
        document=document.to_json_dict(),
    )
