"""Validate command for checking layout documents.

This module provides the `validate` command that checks a JSON layout
document for errors and warnings, including attachment references,
door/window placement and furniture overlaps.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomlayout.application.config import (
    LayoutError,
    ValidationResult,
    read_layout_json,
    validate_document,
)


def validate_command(
    layout_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout document to validate"),
    ],
) -> None:
    """Validate a layout document.

    Checks the document for:
    - JSON syntax errors
    - Unsupported versions (older supported versions are migrated first)
    - Schema validation errors (missing fields, out-of-range dimensions, etc.)
    - Duplicate ids, broken attachments, misplaced doors and windows
    - Furniture outside the room or overlapping other furniture (warnings)

    Exit codes:
        0 - Document is valid with no warnings
        1 - Document has errors (cannot be loaded)
        2 - Document is valid but has warnings

    Example:
        roomlayout validate bedroom.json
    """
    typer.echo(f"Validating {layout_file}...")
    typer.echo()

    try:
        data = read_layout_json(layout_file)
    except LayoutError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_document(data)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_load_error(error: LayoutError) -> None:
    """Display a layout file reading error.

    Args:
        error: The LayoutError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings.

    Args:
        result: The ValidationResult to display
    """
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path or '<document>'}: {error.message}", err=True)
            if error.value is not None and not isinstance(error.value, (dict, list)):
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Layout is valid.")
