# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the JSON renderer."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TypeAlias
from io import StringIO
from pathlib import Path

from phpdd.core.models import InfoKind, InfoMessage, Issue, Report
from phpdd.reporting.aggregate import aggregate
from phpdd.reporting.presenters.json_report import build_json_payload, render_json

IssueFactory: TypeAlias = Callable[..., Issue]


def test_removed_function_without_replacement(make_issue: IssueFactory) -> None:
    report = Report(title="File a.php", base_path="/srv/app/", issues_by_version={"7.2": (make_issue(),)})

    payload = build_json_payload(aggregate([report]))

    assert payload == {
        "problems": [
            {
                "version": "7.2",
                "file": "lib/legacy.php",
                "path": "/srv/app/lib/legacy.php",
                "line": 3,
                "column": 5,
                "category": "REMOVED",
                "type": "function",
                "checker": "create_function",
            },
        ],
    }


def test_suggestions_split_by_category(sample_report: Report) -> None:
    payload = build_json_payload(aggregate([sample_report]))

    assert payload["replace_suggestions"] == [{"type": "function", "problem": "each()", "replacement": "foreach()"}]
    assert payload["notes"] == [
        {
            "type": "function_usage",
            "problem": "mysql_connect",
            "note": "Use mysqli_connect with explicit charset",
        },
    ]
    assert [problem["version"] for problem in payload["problems"]] == ["7.0", "8.0", "8.0"]


def test_info_messages_are_exported() -> None:
    report = Report(
        title="Folder /srv/app",
        info_messages=(InfoMessage(kind=InfoKind.WARNING, text="Skipping huge.php"),),
    )

    payload = build_json_payload(aggregate([report]))

    assert payload == {"info_messages": [{"type": "warning", "message": "Skipping huge.php"}], "problems": []}


def test_empty_run_keeps_problem_list() -> None:
    stream = StringIO()

    total, has_issue = render_json(aggregate([]), stream=stream)

    assert (total, has_issue) == (0, False)
    assert json.loads(stream.getvalue()) == {"problems": []}


def test_render_json_writes_file(tmp_path: Path, sample_report: Report) -> None:
    destination = tmp_path / "report.json"

    total, has_issue = render_json(aggregate([sample_report]), destination)

    assert (total, has_issue) == (3, True)
    document = destination.read_text(encoding="utf-8")
    assert document.startswith('{\n    "problems"')
    assert len(json.loads(document)["problems"]) == 3
    assert [path.name for path in tmp_path.iterdir()] == ["report.json"]


def test_non_ascii_text_is_kept_verbatim(make_issue: IssueFactory) -> None:
    report = Report(title="File ü.php", issues_by_version={"8.0": (make_issue("ereg", file="ü.php"),)})
    stream = StringIO()

    render_json(aggregate([report]), stream=stream)

    assert '"file": "ü.php"' in stream.getvalue()
