"""``linuxcaps list`` -- List every capability this build knows about.

Exit Codes:
    0 -- Always (informational command, cannot fail).
"""

from __future__ import annotations

import json

import click

from linuxcaps.cli.output import print_catalog
from linuxcaps.core.caps import Cap


@click.command("list")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def list_command(output_format: str) -> None:
    """List all known capabilities and their bit positions."""
    if output_format == "json":
        click.echo(json.dumps(
            [{"bit": cap.value, "name": cap.cap_name} for cap in Cap],
            indent=2,
        ))
        return

    print_catalog()
