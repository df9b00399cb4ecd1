"""Shared Click options for commands that build file capabilities.

``encode`` and ``set`` both describe a FileCaps on the command line:

    --permitted cap_chown,cap_net_raw --inheritable net_raw --effective --rootid 1000

Capability lists are comma-separated; names are case-insensitive and the
``cap_`` prefix is optional. An unknown name is a usage error (exit 2).
"""

from __future__ import annotations

from typing import Any, Callable

import click

from linuxcaps.core.caps import CapSet
from linuxcaps.core.filecaps import FileCaps


class CapSetParamType(click.ParamType):
    """Click parameter type converting ``"cap_a,cap_b"`` into a CapSet."""

    name = "caps"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> CapSet:
        if isinstance(value, CapSet):
            return value
        names = [part for part in str(value).split(",") if part.strip()]
        try:
            return CapSet.from_names(names)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


CAPSET = CapSetParamType()


def filecaps_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a command with --permitted/--inheritable/--effective/--rootid."""
    func = click.option(
        "--rootid",
        type=click.IntRange(0, 0xFFFFFFFF),
        default=None,
        help="Namespace root user ID (produces a version 3 attribute).",
    )(func)
    func = click.option(
        "--effective/--no-effective",
        default=False,
        help="Set the effective flag.",
    )(func)
    func = click.option(
        "--inheritable", "-i",
        type=CAPSET,
        default="",
        help="Comma-separated inheritable capabilities.",
    )(func)
    func = click.option(
        "--permitted", "-p",
        type=CAPSET,
        default="",
        help="Comma-separated permitted capabilities.",
    )(func)
    return func


def build_filecaps(
    permitted: CapSet,
    inheritable: CapSet,
    effective: bool,
    rootid: int | None,
) -> FileCaps:
    """Assemble a FileCaps from parsed option values."""
    return FileCaps(
        effective=effective,
        permitted=permitted,
        inheritable=inheritable,
        rootid=rootid,
    )
