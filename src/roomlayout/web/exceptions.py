"""Custom exceptions and error handlers for the REST API."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from roomlayout.application.config import LayoutError


class DocumentRejectedError(Exception):
    """Raised when a submitted layout document cannot be migrated or parsed."""

    def __init__(
        self,
        message: str,
        error_type: str,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.details = details or []
        super().__init__(message)

    @classmethod
    def from_layout_error(cls, error: LayoutError) -> "DocumentRejectedError":
        details = [
            {"path": d.get("path", ""), "message": d.get("message", "")}
            for d in error.details
        ]
        return cls(error.message.splitlines()[0], error.error_type, details)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(DocumentRejectedError)
    async def document_rejected_handler(
        request: Request, exc: DocumentRejectedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )
