"""``linuxcaps encode`` -- Print the attribute bytes for a capability state.

Builds a FileCaps from the command-line options and prints the encoded
``security.capability`` value as hex, suitable for
``setfattr -n security.capability -v 0x...``.

Exit Codes:
    0 -- Encoded value printed.
    2 -- Invalid option (e.g. an unknown capability name).
"""

from __future__ import annotations

import json

import click

from linuxcaps.cli.options import build_filecaps, filecaps_options
from linuxcaps.core.caps import CapSet


@click.command("encode")
@filecaps_options
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def encode_command(
    permitted: CapSet,
    inheritable: CapSet,
    effective: bool,
    rootid: int | None,
    output_format: str,
) -> None:
    """Encode capabilities into a security.capability value (hex)."""
    fcaps = build_filecaps(permitted, inheritable, effective, rootid)
    data = fcaps.pack_attrs()

    if output_format == "json":
        click.echo(json.dumps({
            "version": fcaps.version,
            "hex": data.hex(),
            "capabilities": fcaps.to_dict(),
        }, indent=2))
    else:
        click.echo("0x" + data.hex())
