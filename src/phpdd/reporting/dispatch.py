# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the renderer for a run and report aggregate results to the caller."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, TextIO

from rich.console import Console

from ..config import OutputConfig, OutputMode
from ..core.logging import banner, info
from ..core.models import Report
from ..runtime.console.manager import get_console_manager
from ..runtime.memory import peak_memory_bytes
from ..utils.sizes import format_size
from .aggregate import NormalizedView, aggregate
from .output.console import render_stdout
from .presenters.json_report import render_json
from .presenters.junit import render_junit

LOGGER = logging.getLogger(__name__)

MEMORY_TEMPLATE: Final[str] = "%.3F U"
MEMORY_UNIT: Final[str] = "mb"
TOTAL_PROBLEMS_LABEL: Final[str] = "Total problems"
NO_PROBLEMS_BANNER: Final[str] = "Analyzer has not detected any problems in your code."

DocumentRenderer = Callable[..., tuple[int, bool]]

_DOCUMENT_RENDERERS: Final[dict[OutputMode, DocumentRenderer]] = {
    OutputMode.JSON: render_json,
    OutputMode.JUNIT: render_junit,
}


@dataclass(slots=True)
class RenderContext:
    """Per-invocation rendering state.

    Attributes:
        config: Output configuration selecting the renderer and destination.
        total_issues: Issues rendered during the pass.
        has_issue: Whether the pass rendered at least one issue.
    """

    config: OutputConfig
    total_issues: int = 0
    has_issue: bool = False

    @property
    def output_mode(self) -> OutputMode:
        """Return the configured output mode."""

        return self.config.mode

    @property
    def output_file(self) -> Path | None:
        """Return the configured document destination."""

        return self.config.output_file

    @property
    def verbose(self) -> bool:
        """Return whether summaries and memory usage are printed."""

        return self.config.verbose


@dataclass(frozen=True, slots=True)
class RenderOutcome:
    """Aggregate result of a render pass."""

    total_issues: int
    has_issue: bool

    @property
    def exit_code(self) -> int:
        """Return the process exit status matching the outcome."""

        return 1 if self.has_issue else 0


def memory_usage_line() -> str:
    """Return the peak memory usage notice."""

    return f"Peak memory usage: {format_size(MEMORY_TEMPLATE, peak_memory_bytes(), MEMORY_UNIT)}"


def _summary_console(cfg: OutputConfig, console: Console | None) -> Console:
    """Return the console used for summaries printed next to a document.

    Documents written to standard output keep that stream to themselves, so
    the summary goes to standard error.
    """

    if console is not None:
        return console
    return get_console_manager().get(color=cfg.color, emoji=cfg.emoji, stderr=cfg.output_file is None)


def _print_document_summary(view: NormalizedView, cfg: OutputConfig, console: Console) -> None:
    if view.has_issue:
        banner(f"{TOTAL_PROBLEMS_LABEL}: {view.total_issues}", success=False, use_color=cfg.color, console=console)
    else:
        banner(NO_PROBLEMS_BANNER, success=True, use_color=cfg.color, console=console)
    info(memory_usage_line(), use_emoji=False, use_color=cfg.color, console=console)


def dispatch_render(
    reports: Sequence[Report],
    context: RenderContext,
    *,
    scanned_files: Iterable[str] = (),
    current_version: str = "",
    console: Console | None = None,
    stream: TextIO | None = None,
) -> RenderOutcome:
    """Render ``reports`` with the renderer selected by ``context``.

    Args:
        reports: Analyzer reports in scan order.
        context: Per-invocation render context; its accumulators are populated.
        scanned_files: Paths visited by the analyzer, used for JUnit pass entries.
        current_version: Running PHP version for the terminal "already satisfied" notes.
        console: Optional console for terminal output and summaries.
        stream: Optional stream replacing ``sys.stdout`` for JSON and JUnit documents.

    Returns:
        RenderOutcome: Issue total and pass/fail signal for the exit status.

    Raises:
        OSError: If the document cannot be written to its destination.
    """

    cfg = context.config
    view = aggregate(reports, scanned_files)
    LOGGER.debug(
        "rendering mode=%s reports=%d issues=%d clean_files=%d",
        cfg.mode.value,
        len(view.reports),
        view.total_issues,
        len(view.partition.clean),
    )

    if cfg.mode is OutputMode.STDOUT:
        total, has_issue = render_stdout(view, cfg, console=console, current_version=current_version)
        if cfg.verbose:
            target = console or get_console_manager().get(color=cfg.color, emoji=cfg.emoji)
            info(memory_usage_line(), use_emoji=False, use_color=cfg.color, console=target)
    else:
        renderer = _DOCUMENT_RENDERERS[cfg.mode]
        total, has_issue = renderer(view, cfg.output_file, stream=stream)
        if cfg.output_file is not None:
            LOGGER.debug("wrote %s report to %s", cfg.mode.value, cfg.output_file)
        if cfg.verbose:
            _print_document_summary(view, cfg, _summary_console(cfg, console))

    context.total_issues = total
    context.has_issue = has_issue
    return RenderOutcome(total_issues=total, has_issue=has_issue)


__all__ = [
    "NO_PROBLEMS_BANNER",
    "RenderContext",
    "RenderOutcome",
    "dispatch_render",
    "memory_usage_line",
]
