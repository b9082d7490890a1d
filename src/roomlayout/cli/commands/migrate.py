"""Migrate command for upgrading layout documents to the latest version."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from roomlayout.application.config import LATEST_VERSION, LayoutError, load_layout

logger = logging.getLogger(__name__)


def migrate_command(
    layout_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout document to migrate"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the migrated document here instead of stdout"),
    ] = None,
) -> None:
    """Upgrade a layout document to the latest version.

    The document is migrated and validated; the result is written as JSON
    to OUTPUT, or printed when no output path is given.

    Example:
        roomlayout migrate old-bedroom.json -o bedroom.json
    """
    try:
        document = load_layout(layout_file)
    except LayoutError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    content = json.dumps(document.to_json_dict(), indent=2)
    if output is None:
        typer.echo(content)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error writing {output}: {e}", err=True)
        raise typer.Exit(code=1)
    logger.info(f"Wrote migrated layout to {output}")
    typer.echo(f"Migrated {layout_file} to version {LATEST_VERSION}: {output}")
