# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures for the render CLI command."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer

PHP_VERSION_ENV: Final[str] = "PHP_VERSION"
OUTPUT_PANEL: Final[str] = "Output"
FILTER_PANEL: Final[str] = "Filters"
DISPLAY_PANEL: Final[str] = "Display"

ANALYSIS_ARGUMENT = Annotated[
    Path,
    typer.Argument(metavar="ANALYSIS", help="Analysis document exported by the analyzer."),
]
OUTPUT_OPTION = Annotated[
    str,
    typer.Option(
        "--output",
        "-o",
        rich_help_panel=OUTPUT_PANEL,
        help="Output type: stdout, json or junit.",
    ),
]
OUTPUT_FILE_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--output-file",
        rich_help_panel=OUTPUT_PANEL,
        help="File receiving json or junit output.",
    ),
]
TARGET_OPTION = Annotated[
    str | None,
    typer.Option(
        "--target",
        "-t",
        rich_help_panel=FILTER_PANEL,
        help="Newest PHP version to report on.",
    ),
]
AFTER_OPTION = Annotated[
    str | None,
    typer.Option(
        "--after",
        "-a",
        rich_help_panel=FILTER_PANEL,
        help="Oldest PHP version to report on.",
    ),
]
MAX_SIZE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--max-size",
        "-s",
        rich_help_panel=FILTER_PANEL,
        help="Largest file size considered, e.g. 1mb.",
    ),
]
EXCLUDE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--exclude",
        "-e",
        rich_help_panel=FILTER_PANEL,
        help="Comma separated files or directories to exclude.",
    ),
]
FILE_EXTENSIONS_OPTION = Annotated[
    str | None,
    typer.Option(
        "--file-extensions",
        rich_help_panel=FILTER_PANEL,
        help="Comma separated file extensions to keep.",
    ),
]
SKIP_CHECKS_OPTION = Annotated[
    str | None,
    typer.Option(
        "--skip-checks",
        rich_help_panel=FILTER_PANEL,
        help="Comma separated fragments of checks to skip.",
    ),
]
PHP_VERSION_OPTION = Annotated[
    str | None,
    typer.Option(
        "--php-version",
        rich_help_panel=DISPLAY_PANEL,
        help="Running PHP version used for satisfied-version notes.",
    ),
]
PATH_WIDTH_OPTION = Annotated[
    int,
    typer.Option(
        "--path-width",
        min=1,
        rich_help_panel=DISPLAY_PANEL,
        help="Maximum width of the file column.",
    ),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        rich_help_panel=DISPLAY_PANEL,
        help="Print option notices, totals and memory usage.",
    ),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option(
        "--color/--no-color",
        rich_help_panel=DISPLAY_PANEL,
        help="Toggle ANSI colour output.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", rich_help_panel=DISPLAY_PANEL, help="Toggle emoji output."),
]


def default_php_version() -> str:
    """Return ``major.minor`` of ``$PHP_VERSION``, or an empty string when unset."""

    return os.environ.get(PHP_VERSION_ENV, "").strip()[:3]


@dataclass(slots=True)
class RenderCLIOptions:
    """Normalised CLI inputs for the render command."""

    analysis: Path
    output: str
    output_file: Path | None
    target: str | None
    after: str | None
    max_size: str | None
    exclude: str | None
    file_extensions: str | None
    skip_checks: str | None
    php_version: str
    path_width: int
    verbose: bool
    color: bool
    emoji: bool


def build_render_options(
    analysis: Path,
    *,
    output: str,
    output_file: Path | None,
    target: str | None,
    after: str | None,
    max_size: str | None,
    exclude: str | None,
    file_extensions: str | None,
    skip_checks: str | None,
    php_version: str | None,
    path_width: int,
    verbose: bool,
    color: bool,
    emoji: bool,
) -> RenderCLIOptions:
    """Construct ``RenderCLIOptions`` from Typer parameters."""

    return RenderCLIOptions(
        analysis=analysis.expanduser(),
        output=output,
        output_file=output_file.expanduser() if output_file else None,
        target=target,
        after=after,
        max_size=max_size,
        exclude=exclude,
        file_extensions=file_extensions,
        skip_checks=skip_checks,
        php_version=default_php_version() if php_version is None else php_version.strip(),
        path_width=path_width,
        verbose=verbose,
        color=color,
        emoji=emoji,
    )


__all__ = [
    "AFTER_OPTION",
    "ANALYSIS_ARGUMENT",
    "COLOR_OPTION",
    "DISPLAY_PANEL",
    "EMOJI_OPTION",
    "EXCLUDE_OPTION",
    "FILTER_PANEL",
    "FILE_EXTENSIONS_OPTION",
    "MAX_SIZE_OPTION",
    "OUTPUT_FILE_OPTION",
    "OUTPUT_OPTION",
    "OUTPUT_PANEL",
    "PATH_WIDTH_OPTION",
    "PHP_VERSION_OPTION",
    "RenderCLIOptions",
    "SKIP_CHECKS_OPTION",
    "TARGET_OPTION",
    "VERBOSE_OPTION",
    "build_render_options",
    "default_php_version",
]
