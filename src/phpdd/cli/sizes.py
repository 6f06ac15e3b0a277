# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command exposing the human readable size formatter."""

from __future__ import annotations

from typing import Annotated

import typer

from ..utils.sizes import format_size

BYTES_ARGUMENT = Annotated[int, typer.Argument(metavar="BYTES", help="Byte count to format.")]
TEMPLATE_OPTION = Annotated[
    str,
    typer.Option("--template", help="printf-style template; U is the unit placeholder, a trailing i selects 1024."),
]
UNIT_OPTION = Annotated[str, typer.Option("--unit", help="Force a unit such as kb, mb or gb.")]


def format_size_command(
    byte_count: BYTES_ARGUMENT,
    template: TEMPLATE_OPTION = "%.3F U",
    unit: UNIT_OPTION = "",
) -> None:
    """Print ``BYTES`` as a human readable size."""

    try:
        rendered = format_size(template, byte_count, unit)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--template") from exc
    typer.echo(rendered)


__all__ = ["format_size_command"]
