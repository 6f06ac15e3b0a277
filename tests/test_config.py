# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for output configuration and analyzer option models."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias
from pathlib import Path

import pytest
from pydantic import ValidationError

from phpdd.config import (
    ConfigurationError,
    OutputConfig,
    OutputMode,
    ScanOptions,
    build_output_config,
    build_scan_options,
)
from phpdd.core.models import Issue, Report

IssueFactory: TypeAlias = Callable[..., Issue]


def test_output_mode_defaults_to_stdout() -> None:
    cfg = build_output_config(None)

    assert cfg.mode is OutputMode.STDOUT
    assert cfg.output_file is None
    assert cfg.path_width == 60


def test_output_mode_is_case_insensitive_and_file_is_stripped() -> None:
    cfg = build_output_config("JSON", " out.json ", verbose=True)

    assert cfg.mode is OutputMode.JSON
    assert cfg.output_file == Path("out.json")
    assert cfg.verbose


def test_blank_output_file_is_ignored() -> None:
    assert build_output_config("junit", "   ").output_file is None


def test_unknown_output_mode_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Output is not valid. Available outputs: stdout, json, junit"):
        build_output_config("xml")


def test_output_file_requires_document_mode() -> None:
    with pytest.raises(ConfigurationError, match="An output file can only be provided for: json, junit"):
        build_output_config("stdout", "report.txt")


def test_output_config_model_rejects_file_for_stdout() -> None:
    with pytest.raises(ValidationError):
        OutputConfig(mode=OutputMode.STDOUT, output_file=Path("report.txt"))


def test_output_config_is_frozen() -> None:
    cfg = OutputConfig()

    with pytest.raises(ValidationError):
        cfg.verbose = True  # type: ignore[misc]


def test_scan_option_defaults() -> None:
    options = build_scan_options()

    assert options.target is None
    assert options.after is None
    assert options.max_size == 1024 * 1024
    assert options.file_extensions is None
    assert options.describe() == ["Max file size set to: 1.000 MiB"]


def test_invalid_target_lists_available_versions() -> None:
    with pytest.raises(ConfigurationError, match=r"Target version is not valid\. Available target versions: 5\.3, "):
        build_scan_options(target="9.9")


def test_invalid_after_lists_available_versions() -> None:
    with pytest.raises(ConfigurationError, match=r"After version is not valid\. Available after versions: "):
        build_scan_options(after="4.0")


def test_invalid_max_size_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="Max size is not valid"):
        build_scan_options(max_size="huge")


def test_list_options_are_normalised() -> None:
    options = build_scan_options(
        exclude="/vendor/, Cache\\ ,",
        file_extensions="PHP, inc",
        skip_checks="Each, MYSQL_",
        max_size="2mb",
    )

    assert options.exclude == ("vendor", "cache")
    assert options.file_extensions == ("php", "inc")
    assert options.skip_checks == ("each", "mysql_")
    assert options.describe() == [
        "Max file size set to: 2.000 MiB",
        "Excluding following files / directories: vendor, cache",
        "File extensions set to: php, inc",
        "Skipping checks containing any of the following values: each, mysql_",
    ]


def test_default_extensions_disable_filtering() -> None:
    assert build_scan_options(file_extensions="php,php5, phtml").file_extensions is None


def test_version_window_is_inclusive_string_range() -> None:
    options = ScanOptions(after="7.0", target="7.4")

    assert [v for v in ("5.6", "7.0", "7.10", "7.4", "8.0") if options.version_selected(v)] == ["7.0", "7.10", "7.4"]


def test_scan_options_reject_unknown_versions() -> None:
    with pytest.raises(ValidationError):
        ScanOptions(target="6.0")


def test_apply_filters_reports_without_mutating_them(make_issue: IssueFactory) -> None:
    report = Report(
        title="Folder /srv/app",
        issues_by_version={
            "5.6": (make_issue("split"),),
            "7.0": (
                make_issue("each"),
                make_issue("mysql_query", file="vendor/db.php"),
                make_issue("ereg", file="lib/tpl.phtml"),
            ),
        },
    )
    options = build_scan_options(after="7.0", exclude="vendor", file_extensions="php", skip_checks="ere")

    (filtered,), files = options.apply(
        [report],
        ["/srv/app/lib/legacy.php", "/srv/app/vendor/db.php", "/srv/app/lib/tpl.phtml"],
    )

    assert list(filtered.issues_by_version) == ["7.0"]
    assert [issue.text for issue in filtered.issues_by_version["7.0"]] == ["each"]
    assert files == ("/srv/app/lib/legacy.php",)
    assert report.issue_count == 4


def test_apply_drops_emptied_buckets(make_issue: IssueFactory) -> None:
    report = Report(title="File a.php", issues_by_version={"8.0": (make_issue("each"),)})

    (filtered,), _ = build_scan_options(skip_checks="each").apply([report])

    assert filtered.issues_by_version == {}
    assert filtered.issue_count == 0
