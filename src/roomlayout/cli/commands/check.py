"""Check command listing colliding furniture in a layout."""

from pathlib import Path
from typing import Annotated

import typer

from roomlayout.application.config import LayoutError, document_to_snapshot, load_layout
from roomlayout.application.inspection import find_collisions


def check_command(
    layout_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout document to check"),
    ],
) -> None:
    """List colliding furniture pairs and their overlap areas.

    Attached children are not reported against their parent or siblings.

    Exit codes:
        0 - No collisions
        1 - Document could not be loaded
        2 - At least one collision

    Example:
        roomlayout check bedroom.json
    """
    try:
        document = load_layout(layout_file)
    except LayoutError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    snapshot = document_to_snapshot(document)
    names = {item.id: item.name or item.id for item in snapshot.furniture}
    collisions = find_collisions(snapshot)

    if not collisions:
        typer.echo(f"No collisions among {len(snapshot.furniture)} furniture items.")
        return

    typer.echo("Collisions:")
    for collision in collisions:
        first = names[collision.first_id]
        second = names[collision.second_id]
        typer.echo(f"  {first} <-> {second}: {collision.area:.0f} mm^2 overlap")
    typer.echo()
    typer.echo(f"{len(collisions)} collision(s) found")
    raise typer.Exit(code=2)
