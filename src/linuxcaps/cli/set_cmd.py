"""``linuxcaps set <path>`` -- Attach file capabilities to a file.

Replaces the ``security.capability`` attribute of PATH. Writing the
attribute normally requires CAP_SETFCAP.

Exit Codes:
    0 -- Attribute written.
    1 -- The attribute could not be written (OS error).
    2 -- Invalid option (e.g. an unknown capability name).
"""

from __future__ import annotations

import click

from linuxcaps.cli.options import build_filecaps, filecaps_options
from linuxcaps.cli.output import exit_with_error
from linuxcaps.core.caps import CapSet


@click.command("set")
@click.argument("path", type=click.Path(exists=True))
@filecaps_options
def set_command(
    path: str,
    permitted: CapSet,
    inheritable: CapSet,
    effective: bool,
    rootid: int | None,
) -> None:
    """Set the capabilities of the file at PATH."""
    fcaps = build_filecaps(permitted, inheritable, effective, rootid)
    try:
        fcaps.set_for_file(path)
    except OSError as exc:
        exit_with_error(f"{path}: {exc.strerror or exc}", "text", 1)
    click.echo(f"Set version {fcaps.version} file capabilities on {path}")
