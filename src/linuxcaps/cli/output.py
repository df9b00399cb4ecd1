"""Rich output formatting helpers for the linuxcaps CLI.

Provides consistent terminal output for the capability catalog and for
file capabilities, plus the error reporter shared by every command.
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from linuxcaps.core.caps import Cap, CapSet
from linuxcaps.core.filecaps import FileCaps

console = Console()


def format_capset(caps: CapSet) -> str:
    """Render a set in libcap style: ``cap_chown,cap_net_raw`` or ``-``."""
    if caps.is_empty():
        return "-"
    return ",".join(cap.cap_name for cap in caps)


def print_catalog() -> None:
    """Print every known capability with its bit position."""
    table = Table(title="Linux Capabilities", show_header=True, header_style="bold")
    table.add_column("Bit", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Mask", style="dim")
    for cap in Cap:
        table.add_row(str(cap.value), cap.cap_name, f"{cap.bitmask:#x}")
    console.print(table)


def print_filecaps(fcaps: FileCaps, title: str) -> None:
    """Print a FileCaps as a titled panel followed by a set table.

    Args:
        fcaps: The decoded file capabilities.
        title: Panel title, usually the file path.
    """
    effective = (
        Text("yes", style="bold yellow") if fcaps.effective else Text("no", style="dim")
    )
    rootid = "-" if fcaps.rootid is None else str(fcaps.rootid)
    header = Text.assemble(
        ("Version: ", "bold"), (str(fcaps.version), ""),
        ("  Effective: ", "bold"), effective,
        ("  Root ID: ", "bold"), (rootid, ""),
    )
    console.print(Panel(header, title=title))

    table = Table(show_header=True)
    table.add_column("Set", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("Capabilities")
    table.add_row("permitted", str(fcaps.permitted.size()), format_capset(fcaps.permitted))
    table.add_row("inheritable", str(fcaps.inheritable.size()), format_capset(fcaps.inheritable))
    console.print(table)


def exit_with_error(message: str, output_format: str, code: int) -> NoReturn:
    """Report an error in the requested format and exit with ``code``."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(code)
