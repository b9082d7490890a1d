"""Layout validation endpoints."""

from fastapi import APIRouter

from roomlayout.application.config import validate_document
from roomlayout.web.schemas.requests import DocumentRequest
from roomlayout.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_layout_document(request: DocumentRequest) -> ValidationResultSchema:
    """Migrate and validate a layout document.

    Invalid documents are not an HTTP error: the response lists every
    error and warning found.

    Args:
        request: Request containing the document to validate.

    Returns:
        Validation result with errors and warnings.
    """
    result = validate_document(request.document)
    return ValidationResultSchema(
        is_valid=result.success,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
