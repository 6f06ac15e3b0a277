# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JUnit XML rendering of analysis results.

Each ``(path, version)`` pair with issues becomes a failing test suite and
every clean scanned file becomes a suite holding one passing test case.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, TextIO

from ...config.constants import TOOL_NAME, TOOL_VERSION
from ..aggregate import IssueEntry, NormalizedView
from .emitters import write_document

XML_DECLARATION: Final[str] = '<?xml version="1.0" encoding="UTF-8"?>'
XML_INDENT: Final[str] = "  "


@dataclass(slots=True)
class SuiteGroup:
    """Failures collected for one ``(path, version)`` pair."""

    name: str
    failures: list[IssueEntry] = field(default_factory=list)

    def sorted_failures(self) -> list[IssueEntry]:
        """Return failures ordered by line, then column."""

        return sorted(self.failures, key=lambda entry: (entry.issue.line, entry.issue.column))


def suite_name(path: str, version: str) -> str:
    """Return the test suite name for issues of ``path`` under ``version``."""

    return f"{path} (PHP {version})"


def case_name(entry: IssueEntry) -> str:
    """Return the test case name of a failing ``entry``."""

    issue = entry.issue
    return f"{issue.text} at {issue.path} ({issue.line}:{issue.column})"


def group_failures(view: NormalizedView) -> dict[tuple[str, str], SuiteGroup]:
    """Return failing suites keyed by ``(path, version)`` in first-seen order.

    Args:
        view: Aggregated analysis results.

    Returns:
        dict[tuple[str, str], SuiteGroup]: Suite groups preserving report and version order.
    """

    groups: dict[tuple[str, str], SuiteGroup] = {}
    for entry in view.entries():
        key = (entry.issue.path, entry.version)
        if key not in groups:
            groups[key] = SuiteGroup(name=suite_name(entry.issue.path, entry.version))
        groups[key].failures.append(entry)
    return groups


def _failing_suite(group: SuiteGroup) -> ET.Element:
    count = str(len(group.failures))
    suite = ET.Element("testsuite", {"name": group.name, "errors": "0", "tests": count, "failures": count})
    for entry in group.sorted_failures():
        case = ET.SubElement(suite, "testcase", {"name": case_name(entry)})
        ET.SubElement(case, "failure", {"type": entry.issue.type, "message": entry.failure_message})
    return suite


def _passing_suite(path: str) -> ET.Element:
    suite = ET.Element("testsuite", {"name": path, "errors": "0", "tests": "1", "failures": "0"})
    ET.SubElement(suite, "testcase", {"name": path})
    return suite


def build_junit_tree(view: NormalizedView) -> ET.Element:
    """Return the ``<testsuites>`` element describing ``view``.

    Args:
        view: Aggregated analysis results.

    Returns:
        ET.Element: Root element carrying grand totals and one child per suite.
    """

    groups = group_failures(view)
    clean = view.partition.clean
    root = ET.Element(
        "testsuites",
        {
            "name": f"{TOOL_NAME} {TOOL_VERSION}",
            "errors": "0",
            "tests": str(view.total_issues + len(clean)),
            "failures": str(view.total_issues),
        },
    )
    root.extend([_failing_suite(group) for group in groups.values()])
    root.extend([_passing_suite(path) for path in clean])
    return root


def build_junit_document(view: NormalizedView) -> str:
    """Return the indented JUnit XML document for ``view``, declaration included."""

    root = build_junit_tree(view)
    ET.indent(root, space=XML_INDENT)
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"


def render_junit(
    view: NormalizedView,
    destination: Path | None = None,
    *,
    stream: TextIO | None = None,
) -> tuple[int, bool]:
    """Write the JUnit document for ``view``.

    Args:
        view: Aggregated analysis results.
        destination: Output file, or ``None`` for the standard output stream.
        stream: Optional stream replacing ``sys.stdout``.

    Returns:
        tuple[int, bool]: Total issue count and whether any issue was found.
    """

    write_document(build_junit_document(view), destination, stream=stream)
    return view.total_issues, view.has_issue


__all__ = [
    "SuiteGroup",
    "build_junit_document",
    "build_junit_tree",
    "group_failures",
    "render_junit",
    "suite_name",
    "case_name",
]
