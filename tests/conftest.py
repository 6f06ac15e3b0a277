# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias
from io import StringIO

import pytest
from rich.console import Console

from phpdd.core.models import Issue, Report

IssueFactory: TypeAlias = Callable[..., Issue]


def build_issue(
    text: str = "create_function",
    *,
    file: str = "lib/legacy.php",
    path: str | None = None,
    line: int = 3,
    column: int = 5,
    type: str = "function",
    category: str = "REMOVED",
    replacement: str | None = None,
) -> Issue:
    """Return an issue with sensible defaults for rendering tests."""

    return Issue(
        file=file,
        path=path if path is not None else f"/srv/app/{file}",
        line=line,
        column=column,
        type=type,
        category=category,
        text=text,
        replacement=replacement,
    )


@pytest.fixture
def make_issue() -> IssueFactory:
    """Return the issue factory."""
    return build_issue


@pytest.fixture
def sample_report() -> Report:
    """Return a report with two versions and one suggestion of each kind."""

    return Report(
        title="Folder /srv/app",
        base_path="/srv/app/",
        issues_by_version={
            "8.0": (
                build_issue("each", line=10, replacement="foreach"),
                build_issue("create_function", line=3),
            ),
            "7.0": (
                build_issue(
                    "mysql_connect",
                    file="db/connect.php",
                    type="function_usage",
                    category="CHANGED",
                    replacement="Use mysqli_connect with explicit charset",
                ),
            ),
        },
    )


@pytest.fixture
def capture_console() -> tuple[Console, StringIO]:
    """Return a plain-text console writing into an in-memory buffer."""

    buffer = StringIO()
    console = Console(
        file=buffer,
        force_terminal=False,
        color_system=None,
        emoji=False,
        width=200,
        soft_wrap=True,
    )
    return console, buffer
