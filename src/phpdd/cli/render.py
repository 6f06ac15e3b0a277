# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command rendering an exported analysis document."""

from __future__ import annotations

import typer
from rich.console import Console

from ..config import ConfigurationError, OutputConfig, OutputMode, build_output_config, build_scan_options
from ..config.constants import DEFAULT_PATH_WIDTH
from ..core.logging import fail, info
from ..core.serialization import AnalysisDocumentError, load_analysis
from ..reporting import RenderContext, dispatch_render
from ..runtime.console import get_console_manager
from ._render_cli_models import (
    AFTER_OPTION,
    ANALYSIS_ARGUMENT,
    COLOR_OPTION,
    EMOJI_OPTION,
    EXCLUDE_OPTION,
    FILE_EXTENSIONS_OPTION,
    MAX_SIZE_OPTION,
    OUTPUT_FILE_OPTION,
    OUTPUT_OPTION,
    PATH_WIDTH_OPTION,
    PHP_VERSION_OPTION,
    SKIP_CHECKS_OPTION,
    TARGET_OPTION,
    VERBOSE_OPTION,
    build_render_options,
)


def _notice_console(cfg: OutputConfig) -> Console:
    """Return the console for notices; stderr while a document owns stdout."""

    to_stderr = cfg.mode is not OutputMode.STDOUT and cfg.output_file is None
    return get_console_manager().get(color=cfg.color, emoji=cfg.emoji, stderr=to_stderr)


def render(
    analysis: ANALYSIS_ARGUMENT,
    output: OUTPUT_OPTION = OutputMode.STDOUT.value,
    output_file: OUTPUT_FILE_OPTION = None,
    target: TARGET_OPTION = None,
    after: AFTER_OPTION = None,
    max_size: MAX_SIZE_OPTION = None,
    exclude: EXCLUDE_OPTION = None,
    file_extensions: FILE_EXTENSIONS_OPTION = None,
    skip_checks: SKIP_CHECKS_OPTION = None,
    php_version: PHP_VERSION_OPTION = None,
    path_width: PATH_WIDTH_OPTION = DEFAULT_PATH_WIDTH,
    verbose: VERBOSE_OPTION = False,
    color: COLOR_OPTION = True,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Render an analysis document to the terminal, JSON or JUnit XML.

    Raises:
        typer.Exit: With status 1 on invalid options, unreadable input or when
            issues were rendered; status 0 otherwise.
    """

    options = build_render_options(
        analysis,
        output=output,
        output_file=output_file,
        target=target,
        after=after,
        max_size=max_size,
        exclude=exclude,
        file_extensions=file_extensions,
        skip_checks=skip_checks,
        php_version=php_version,
        path_width=path_width,
        verbose=verbose,
        color=color,
        emoji=emoji,
    )

    try:
        output_config = build_output_config(
            options.output,
            options.output_file,
            verbose=options.verbose,
            color=options.color,
            emoji=options.emoji,
            path_width=options.path_width,
        )
        scan_options = build_scan_options(
            target=options.target,
            after=options.after,
            max_size=options.max_size,
            exclude=options.exclude,
            file_extensions=options.file_extensions,
            skip_checks=options.skip_checks,
        )
    except ConfigurationError as exc:
        fail(str(exc), use_emoji=options.emoji, use_color=options.color)
        raise typer.Exit(code=1) from exc

    console = _notice_console(output_config)
    try:
        document = load_analysis(options.analysis)
    except AnalysisDocumentError as exc:
        fail(str(exc), use_emoji=options.emoji, use_color=options.color, console=console)
        raise typer.Exit(code=1) from exc

    if output_config.verbose:
        for notice in scan_options.describe():
            info(notice, use_emoji=False, use_color=output_config.color, console=console)

    reports, scanned_files = scan_options.apply(document.reports, document.scanned_files)
    try:
        outcome = dispatch_render(
            reports,
            RenderContext(config=output_config),
            scanned_files=scanned_files,
            current_version=options.php_version,
        )
    except OSError as exc:
        fail(f"Unable to write report: {exc}", use_emoji=options.emoji, use_color=options.color, console=console)
        raise typer.Exit(code=1) from exc
    raise typer.Exit(code=outcome.exit_code)


__all__ = ["render"]
