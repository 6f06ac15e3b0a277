# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Terminal rendering of normalised analysis results."""

from __future__ import annotations

from typing import Final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...config import OutputConfig
from ...core.logging import banner
from ...core.models import InfoKind, IssueCategory, IssueType
from ...filesystem.paths import truncate_path
from ...runtime.console.manager import get_console_manager
from ..aggregate import IssueEntry, NormalizedView, ReportView, SuggestionKind, VersionBucket

TABLE_HEADERS: Final[tuple[str, str, str]] = ("File (Line:Column)", "Type", "Issue")
NO_ISSUES_BANNER: Final[str] = "Analyzer has not detected any issues in your code."
TOTAL_ISSUES_LABEL: Final[str] = "Total issues"
SATISFIED_NOTE: Final[str] = " - your version is greater or equal"

DEFAULT_TYPE_STYLE: Final[str] = "yellow"
ISSUE_TYPE_STYLES: Final[dict[str, str]] = {
    IssueType.FUNCTION.value: "yellow",
    IssueType.FUNCTION_USAGE.value: "yellow",
    IssueType.VARIABLE.value: "red",
    IssueType.INI.value: "green",
    IssueType.IDENTIFIER.value: "blue",
    IssueType.CONSTANT.value: "grey50",
}
CATEGORY_STYLES: Final[dict[str, str]] = {
    IssueCategory.REMOVED.value: "red",
    IssueCategory.CHANGED.value: "yellow",
    IssueCategory.VIOLATION.value: "bold red",
}
INFO_STYLES: Final[dict[InfoKind, str]] = {
    InfoKind.INFO: "yellow",
    InfoKind.WARNING: "red",
}
TITLE_STYLE: Final[str] = "white"
VERSION_STYLE: Final[str] = "yellow"
FILE_STYLE: Final[str] = "yellow"
NOTE_STYLE: Final[str] = "yellow"
REPLACEMENT_STYLE: Final[str] = "green"


def type_style(issue_type: str) -> str:
    """Return the decoration applied to an issue type label."""

    return ISSUE_TYPE_STYLES.get(issue_type, DEFAULT_TYPE_STYLE)


def category_style(category: str) -> str | None:
    """Return the decoration applied to the offending symbol of a ``category`` issue."""

    return CATEGORY_STYLES.get(category.casefold())


def _styled(value: str, style: str | None, color: bool) -> Text:
    """Return ``value`` as Rich text, styled only when colour output is enabled."""

    return Text(value, style=style) if style and color else Text(value)


def format_issue_text(entry: IssueEntry, *, color: bool) -> Text:
    """Return the decorated sentence describing ``entry``.

    Args:
        entry: Normalised issue entry.
        color: Whether styles should be applied.

    Returns:
        Text: ``"<Type> <symbol> is <category>."`` plus an optional advice line.
    """

    issue = entry.issue
    text = _styled(entry.type_label, type_style(issue.type), color)
    text.append(" ")
    text.append_text(_styled(entry.display_text, category_style(issue.category), color))
    text.append(f" is {entry.verb_phrase}.")
    suggestion = entry.suggestion
    if suggestion is None:
        return text
    text.append("\n")
    if suggestion.kind is SuggestionKind.NOTE:
        text.append_text(_styled(suggestion.text, NOTE_STYLE, color))
    else:
        text.append("Consider replacing with ")
        text.append_text(_styled(suggestion.text, REPLACEMENT_STYLE, color))
    return text


def format_location(entry: IssueEntry, *, path_width: int, color: bool) -> Text:
    """Return the ``file (line:column)`` cell with the file shortened to ``path_width``."""

    issue = entry.issue
    text = _styled(truncate_path(issue.file, path_width), FILE_STYLE, color)
    text.append(f" ({issue.line}:{issue.column})")
    return text


def version_header(bucket: VersionBucket, current_version: str) -> str:
    """Return the heading printed above a version bucket.

    ``current_version`` compares as a plain string, matching bucket order.
    """

    header = f"- PHP {bucket.version} ({bucket.count})"
    if current_version and current_version >= bucket.version:
        header += SATISFIED_NOTE
    return header


def build_bucket_table(bucket: VersionBucket, cfg: OutputConfig) -> Table:
    """Return the Rich table listing every issue of ``bucket``.

    Args:
        bucket: Version bucket to render.
        cfg: Output configuration describing formatting preferences.

    Returns:
        Table: Table with one row per issue.
    """

    table = Table(box=box.SQUARE if cfg.color else box.ASCII, show_lines=True)
    for header in TABLE_HEADERS:
        table.add_column(header, overflow="fold")
    for entry in bucket.entries:
        table.add_row(
            format_location(entry, path_width=cfg.path_width, color=cfg.color),
            Text(entry.issue.category),
            format_issue_text(entry, color=cfg.color),
        )
    return table


def _render_report(
    console: Console,
    report: ReportView,
    cfg: OutputConfig,
    current_version: str,
) -> None:
    """Print the title, notices and version buckets of a single report."""

    console.print()
    console.print(_styled(report.title, TITLE_STYLE, cfg.color))
    for message in report.info_messages:
        console.print(_styled(message.text, INFO_STYLES.get(message.kind), cfg.color))
    for bucket in report.buckets:
        console.print(_styled(version_header(bucket, current_version), VERSION_STYLE, cfg.color))
        if bucket.entries:
            console.print(build_bucket_table(bucket, cfg))
        console.print()


def render_stdout(
    view: NormalizedView,
    cfg: OutputConfig,
    *,
    console: Console | None = None,
    current_version: str = "",
) -> tuple[int, bool]:
    """Print ``view`` as an interactive terminal report.

    Args:
        view: Aggregated analysis results.
        cfg: Output configuration controlling colour and table layout.
        console: Optional console overriding the managed instance.
        current_version: Running PHP version, compared as a string with each bucket.

    Returns:
        tuple[int, bool]: Total issue count and whether any issue was found.
    """

    target = console or get_console_manager().get(color=cfg.color, emoji=cfg.emoji)
    # Output stays buffered until the block exits.
    with target:
        for report in view.reports:
            _render_report(target, report, cfg, current_version)

        target.print()
        if view.has_issue:
            banner(f"{TOTAL_ISSUES_LABEL}: {view.total_issues}", success=False, use_color=cfg.color, console=target)
        else:
            banner(NO_ISSUES_BANNER, success=True, use_color=cfg.color, console=target)
    return view.total_issues, view.has_issue


__all__ = [
    "CATEGORY_STYLES",
    "ISSUE_TYPE_STYLES",
    "NO_ISSUES_BANNER",
    "TABLE_HEADERS",
    "build_bucket_table",
    "category_style",
    "format_issue_text",
    "format_location",
    "render_stdout",
    "type_style",
    "version_header",
]
