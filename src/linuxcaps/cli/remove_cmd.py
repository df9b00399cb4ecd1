"""``linuxcaps remove <path>`` -- Remove the file capabilities of a file.

Exit Codes:
    0 -- Attribute removed.
    1 -- The attribute could not be removed (absent, or OS error).
"""

from __future__ import annotations

import click

from linuxcaps.cli.output import exit_with_error
from linuxcaps.core.filecaps import FileCaps


@click.command("remove")
@click.argument("path", type=click.Path(exists=True))
def remove_command(path: str) -> None:
    """Remove the capabilities attached to the file at PATH."""
    try:
        FileCaps.remove_for_file(path)
    except OSError as exc:
        exit_with_error(f"{path}: {exc.strerror or exc}", "text", 1)
    click.echo(f"Removed file capabilities from {path}")
