"""CLI command implementations for the roomlayout application.

This package contains subcommands for the roomlayout CLI:
- validate: Validate a layout document
- migrate: Upgrade a layout document to the latest version
- check: List colliding furniture
"""

from roomlayout.cli.commands.check import check_command
from roomlayout.cli.commands.migrate import migrate_command
from roomlayout.cli.commands.validate import validate_command

__all__ = ["check_command", "migrate_command", "validate_command"]
