"""Layout file loader with comprehensive error handling.

This module loads JSON layout documents, migrates them to the latest
version and validates them against the schema. File system errors, JSON
parse errors, migration failures and Pydantic validation errors are all
reported through ``LayoutError`` with clear, path-tagged details.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomlayout.application.config.migration import migrate
from roomlayout.application.config.schemas import LayoutDocument

logger = logging.getLogger(__name__)


class LayoutError(Exception):
    """Exception raised when a layout document cannot be loaded.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, migration, validation)
        path: Path to the layout file (if applicable)
        details: Additional error details (line/column for JSON, field
            paths for migration and validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Args:
        loc: Tuple of path segments (strings for keys, ints for array indices)

    Returns:
        Formatted JSON path like "furniture[0].width"

    Examples:
        >>> format_json_path(("room", "width"))
        'room.width'
        >>> format_json_path(("doors", 1, "openAngle"))
        'doors[1].openAngle'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract and format validation errors from a Pydantic ValidationError.

    Args:
        error: The Pydantic ValidationError to process

    Returns:
        List of error dictionaries with path, message, value, and error_type
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_error_message(title: str, details: list[dict[str, Any]]) -> str:
    lines = [title]
    for detail in details:
        path = detail["path"] or "<document>"
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def parse_layout(data: Any, path: Path | None = None) -> LayoutDocument:
    """Migrate and validate parsed JSON into a LayoutDocument.

    Args:
        data: Parsed JSON of a layout document (any supported version).
        path: Source file, used only for error reporting.

    Returns:
        A validated, latest-version LayoutDocument.

    Raises:
        LayoutError: With error_type "migration" or "validation".
    """
    migrated = migrate(data)
    if not migrated.success:
        details = [
            {"path": p, "message": m, "error_type": "migration"}
            for p, m in migrated.errors
        ]
        raise LayoutError(
            message=_format_error_message("Layout migration failed:", details),
            error_type="migration",
            path=path,
            details=details,
        )

    try:
        return LayoutDocument.model_validate(migrated.document)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise LayoutError(
            message=_format_error_message("Layout validation failed:", details),
            error_type="validation",
            path=path,
            details=details,
        )


def read_layout_json(path: Path) -> Any:
    """Read and parse a layout file without validating it.

    Raises:
        LayoutError: With error_type "file_not_found", "permission_denied",
            "file_read_error" or "json_parse".
    """
    if not path.exists():
        raise LayoutError(
            message=f"Layout file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise LayoutError(
            message=f"Permission denied reading layout file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise LayoutError(
            message=f"Error reading layout file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise LayoutError(
            message=f"Invalid JSON in layout file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def load_layout(path: Path) -> LayoutDocument:
    """Load, migrate and validate a layout document from a JSON file.

    Args:
        path: Path to the JSON layout file

    Returns:
        A validated LayoutDocument at the latest version

    Raises:
        LayoutError: If the file cannot be read, parsed, migrated or
            validated. ``error_type`` names the failing stage.

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     doc = load_layout(Path("bedroom.json"))
        ... except LayoutError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    data = read_layout_json(path)
    document = parse_layout(data, path=path)
    logger.info(f"Loaded layout {path} ({len(document.furniture)} furniture items)")
    return document


def load_layout_from_dict(data: dict[str, Any]) -> LayoutDocument:
    """Migrate and validate a layout document from a dictionary.

    Raises:
        LayoutError: If the data fails migration or validation.
    """
    return parse_layout(data)
