"""Typer CLI for room layout documents."""

import logging
from typing import Annotated

import typer

from roomlayout.cli.commands import check_command, migrate_command, validate_command

app = typer.Typer(
    name="roomlayout",
    help="Validate, migrate and inspect furniture layout documents.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate, migrate and inspect furniture layout documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="validate")(validate_command)
app.command(name="migrate")(migrate_command)
app.command(name="check")(check_command)


if __name__ == "__main__":
    app()
