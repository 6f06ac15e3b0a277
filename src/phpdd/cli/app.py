# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .render import render
from .sizes import format_size_command

app = typer.Typer(help="Render PHP deprecation analysis results.", no_args_is_help=True)
app.command("render")(render)
app.command("format-size")(format_size_command)

__all__ = ["app"]
