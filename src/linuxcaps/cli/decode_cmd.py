"""``linuxcaps decode <hex>`` -- Decode raw attribute bytes given as hex.

Useful for inspecting values captured with ``getfattr -e hex -n
security.capability``; a leading ``0x`` and embedded whitespace are
accepted.

Exit Codes:
    0 -- Data decoded and shown.
    2 -- The input is not hex, or not valid file capability data.
"""

from __future__ import annotations

import json

import click

from linuxcaps.cli.output import exit_with_error, print_filecaps
from linuxcaps.core.filecaps import FileCaps
from linuxcaps.exceptions import MalformedCapsError


def parse_hex(text: str) -> bytes:
    """Convert ``"0x0100000202300000..."`` style text into bytes.

    Raises:
        ValueError: If the text is not an even-length hex string.
    """
    cleaned = "".join(text.split())
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


@click.command("decode")
@click.argument("hex_data")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def decode_command(hex_data: str, output_format: str) -> None:
    """Decode a hex-encoded security.capability value."""
    try:
        data = parse_hex(hex_data)
    except ValueError:
        exit_with_error(f"Not a hex string: {hex_data}", output_format, 2)

    try:
        fcaps = FileCaps.unpack_attrs(data)
    except MalformedCapsError as exc:
        exit_with_error(str(exc), output_format, 2)

    if output_format == "json":
        click.echo(json.dumps(fcaps.to_dict(), indent=2))
    else:
        print_filecaps(fcaps, title="Decoded file capabilities")
