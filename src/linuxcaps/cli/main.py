"""linuxcaps CLI -- Inspect and edit Linux file capabilities.

Entry point for the ``linuxcaps`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    list    -- List known capabilities and their bit positions.
    show    -- Show the file capabilities of a file.
    decode  -- Decode a hex security.capability value.
    encode  -- Encode capabilities into a hex security.capability value.
    set     -- Attach file capabilities to a file.
    remove  -- Remove file capabilities from a file.

Usage::

    linuxcaps list
    linuxcaps show /usr/bin/ping
    linuxcaps decode 0x0100000202300000023000000000000000000000
    linuxcaps encode -p cap_net_raw,cap_net_admin --effective
    linuxcaps set ./tool -p cap_net_bind_service --effective
    linuxcaps remove ./tool
"""

from __future__ import annotations

import logging

import click

from linuxcaps import __version__
from linuxcaps.cli.decode_cmd import decode_command
from linuxcaps.cli.encode_cmd import encode_command
from linuxcaps.cli.list_cmd import list_command
from linuxcaps.cli.remove_cmd import remove_command
from linuxcaps.cli.set_cmd import set_command
from linuxcaps.cli.show_cmd import show_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """linuxcaps: Inspect and edit Linux file capabilities.

    Decode, encode, read, write and remove the security.capability
    extended attribute that grants capabilities to executables.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Register all subcommands
cli.add_command(list_command)
cli.add_command(show_command)
cli.add_command(decode_command)
cli.add_command(encode_command)
cli.add_command(set_command)
cli.add_command(remove_command)
