# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for terminal rendering of analysis results."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias
from io import StringIO

from rich.console import Console

from phpdd.config import OutputConfig
from phpdd.core.models import InfoKind, InfoMessage, Issue, Report
from phpdd.reporting.aggregate import VersionBucket, aggregate, build_entry
from phpdd.reporting.output.console import (
    NO_ISSUES_BANNER,
    category_style,
    format_issue_text,
    format_location,
    render_stdout,
    type_style,
    version_header,
)

IssueFactory: TypeAlias = Callable[..., Issue]


def _plain_config(**overrides: object) -> OutputConfig:
    return OutputConfig(color=False, emoji=False, **overrides)


def test_removed_function_row_is_rendered(
    capture_console: tuple[Console, StringIO],
    make_issue: IssueFactory,
) -> None:
    console, buffer = capture_console
    report = Report(title="File legacy.php", issues_by_version={"7.2": (make_issue("create_function"),)})

    total, has_issue = render_stdout(aggregate([report]), _plain_config(), console=console)

    output = buffer.getvalue()
    assert (total, has_issue) == (1, True)
    assert "File legacy.php" in output
    assert "- PHP 7.2 (1)" in output
    assert "File (Line:Column)" in output
    assert "Function create_function() is REMOVED." in output
    assert "lib/legacy.php (3:5)" in output
    assert "Total issues: 1" in output


def test_empty_run_prints_no_issues_banner(capture_console: tuple[Console, StringIO]) -> None:
    console, buffer = capture_console

    total, has_issue = render_stdout(aggregate([]), _plain_config(), console=console)

    assert (total, has_issue) == (0, False)
    assert NO_ISSUES_BANNER in buffer.getvalue()


def test_info_messages_precede_buckets(
    capture_console: tuple[Console, StringIO],
    make_issue: IssueFactory,
) -> None:
    console, buffer = capture_console
    report = Report(
        title="Folder /srv/app",
        info_messages=(InfoMessage(kind=InfoKind.WARNING, text="Skipping huge.php"),),
        issues_by_version={"8.0": (make_issue("each"),)},
    )

    render_stdout(aggregate([report]), _plain_config(), console=console)

    output = buffer.getvalue()
    assert output.index("Skipping huge.php") < output.index("- PHP 8.0 (1)")


def test_buckets_render_in_string_order(capture_console: tuple[Console, StringIO], sample_report: Report) -> None:
    console, buffer = capture_console

    render_stdout(aggregate([sample_report]), _plain_config(), console=console)

    output = buffer.getvalue()
    assert output.index("- PHP 7.0 (1)") < output.index("- PHP 8.0 (2)")
    assert "Consider replacing with foreach()" in output
    assert "Use mysqli_connect with explicit charset" in output


def test_satisfied_version_note() -> None:
    bucket = VersionBucket(version="7.4", entries=())

    assert version_header(bucket, "8.0") == "- PHP 7.4 (0) - your version is greater or equal"
    assert version_header(bucket, "7.4").endswith("greater or equal")
    assert version_header(bucket, "7.3") == "- PHP 7.4 (0)"
    assert version_header(bucket, "") == "- PHP 7.4 (0)"


def test_current_version_note_in_output(capture_console: tuple[Console, StringIO], sample_report: Report) -> None:
    console, buffer = capture_console

    render_stdout(aggregate([sample_report]), _plain_config(), console=console, current_version="7.4")

    output = buffer.getvalue()
    assert "- PHP 7.0 (1) - your version is greater or equal" in output
    assert "- PHP 8.0 (2) - your version" not in output


def test_location_is_truncated_to_path_width(make_issue: IssueFactory) -> None:
    entry = build_entry("7.0", make_issue(file="src/vendor/library/module/File.php", line=7, column=2), "")

    text = format_location(entry, path_width=30, color=False)

    assert text.plain == "src/vendor/lib../mo../File.php (7:2)"


def test_issue_text_is_styled_only_with_colour(make_issue: IssueFactory) -> None:
    entry = build_entry("7.0", make_issue("each", replacement="foreach"), "")

    coloured = format_issue_text(entry, color=True)
    plain = format_issue_text(entry, color=False)

    assert coloured.plain == plain.plain == "Function each() is REMOVED.\nConsider replacing with foreach()"
    assert coloured.spans
    assert not plain.spans


def test_style_lookups() -> None:
    assert type_style("function") == "yellow"
    assert type_style("variable") == "red"
    assert type_style("something_new") == "yellow"
    assert category_style("REMOVED") == "red"
    assert category_style("unknown") is None
