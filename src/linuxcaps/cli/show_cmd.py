"""``linuxcaps show <path>`` -- Show the file capabilities of a file.

Reads the ``security.capability`` attribute of PATH and prints the decoded
version, effective flag, root ID and capability sets.

Exit Codes:
    0 -- Capabilities shown, or the file has none.
    1 -- The attribute could not be read (OS error).
    2 -- The attribute holds malformed data.
"""

from __future__ import annotations

import json

import click

from linuxcaps.cli.output import exit_with_error, print_filecaps
from linuxcaps.core.filecaps import FileCaps
from linuxcaps.exceptions import MalformedCapsError


@click.command("show")
@click.argument("path", type=click.Path(exists=True))
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def show_command(path: str, output_format: str) -> None:
    """Show the capabilities attached to the file at PATH."""
    try:
        fcaps = FileCaps.get_for_file(path)
    except MalformedCapsError as exc:
        exit_with_error(f"{path}: {exc}", output_format, 2)
    except OSError as exc:
        exit_with_error(f"{path}: {exc.strerror or exc}", output_format, 1)

    if output_format == "json":
        click.echo(json.dumps({
            "path": path,
            "capabilities": fcaps.to_dict() if fcaps is not None else None,
        }, indent=2))
        return

    if fcaps is None:
        click.echo(f"No file capabilities on {path}")
        return

    print_filecaps(fcaps, title=path)
