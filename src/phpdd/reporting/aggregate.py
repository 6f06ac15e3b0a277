# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalise analyzer reports into the view shared by every renderer.

The wording rules common to terminal, JSON and JUnit output live here: the
``()`` suffix for removed functions, the split between notes (changed
behaviour) and replacement suggestions, and the ordering of version
buckets. Renderers only serialise the resulting :class:`NormalizedView`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from ..core.models import RESERVED_IDENTIFIER, InfoMessage, Issue, Report

CALLABLE_SUFFIX: Final[str] = "()"
RESERVED_PHRASE: Final[str] = "reserved by PHP core"


class SuggestionKind(StrEnum):
    """Flavours of follow-up advice attached to an issue."""

    NOTE = "note"
    REPLACEMENT = "replacement"


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Advice derived from an issue replacement.

    Attributes:
        kind: ``NOTE`` for changed behaviour, ``REPLACEMENT`` otherwise.
        problem: Offending symbol as worded next to the advice.
        text: Note or replacement text.
    """

    kind: SuggestionKind
    problem: str
    text: str


@dataclass(frozen=True, slots=True)
class IssueEntry:
    """Issue decorated with the derivations every output format shares."""

    version: str
    issue: Issue
    full_path: str
    display_text: str
    verb_phrase: str
    suggestion: Suggestion | None

    @property
    def type_label(self) -> str:
        """Return the issue type as a capitalised phrase, e.g. ``Function usage``."""

        label = self.issue.type.replace("_", " ")
        return label[:1].upper() + label[1:]

    @property
    def message(self) -> str:
        """Return the plain-text sentence describing the issue."""

        sentence = f"{self.type_label} {self.display_text} is {self.verb_phrase}."
        if self.suggestion is None:
            return sentence
        if self.suggestion.kind is SuggestionKind.NOTE:
            return f"{sentence}\n{self.suggestion.text}"
        return f"{sentence}\nConsider replacing with {self.suggestion.text}"

    @property
    def failure_message(self) -> str:
        """Return the message used by JUnit failures."""

        if self.suggestion is None:
            return self.issue.category
        if self.suggestion.kind is SuggestionKind.NOTE:
            return f"Problem: {self.suggestion.problem}; Note: {self.suggestion.text}"
        return f"Problem: {self.suggestion.problem}; Replacement: {self.suggestion.text}"


@dataclass(frozen=True, slots=True)
class VersionBucket:
    """Issues reported against one PHP version."""

    version: str
    entries: tuple[IssueEntry, ...]

    @property
    def count(self) -> int:
        """Return the number of issues in the bucket."""

        return len(self.entries)


@dataclass(frozen=True, slots=True)
class ReportView:
    """Normalised form of a single :class:`Report`."""

    title: str
    base_path: str
    info_messages: tuple[InfoMessage, ...]
    buckets: tuple[VersionBucket, ...]


@dataclass(frozen=True, slots=True)
class FilePartition:
    """Scanned files split by whether they produced issues."""

    clean: tuple[str, ...]
    failing: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NormalizedView:
    """Aggregated, renderer-ready view of a complete analysis run."""

    reports: tuple[ReportView, ...]
    total_issues: int
    partition: FilePartition

    @property
    def has_issue(self) -> bool:
        """Return ``True`` when at least one issue was reported."""

        return self.total_issues > 0

    def entries(self) -> Iterator[IssueEntry]:
        """Yield every issue entry in report then version order."""

        for report in self.reports:
            for bucket in report.buckets:
                yield from bucket.entries


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Return version labels in ascending order.

    Labels compare as plain strings, so ``"7.10"`` sorts before ``"7.4"``.
    """

    return sorted(versions)


def suffix_callable(text: str, issue: Issue) -> str:
    """Append ``()`` to ``text`` when ``issue`` refers to a removed function."""

    return f"{text}{CALLABLE_SUFFIX}" if issue.is_removed_function else text


def build_suggestion(issue: Issue) -> Suggestion | None:
    """Return the advice derived from ``issue.replacement``.

    Changed behaviour yields a note quoting the bare symbol; every other
    category yields a replacement where removed functions carry ``()`` on
    both sides.

    Args:
        issue: Issue to inspect.

    Returns:
        Suggestion | None: Derived advice, or ``None`` without a replacement.
    """

    if issue.replacement is None:
        return None
    if issue.is_changed:
        return Suggestion(kind=SuggestionKind.NOTE, problem=issue.text, text=issue.replacement)
    return Suggestion(
        kind=SuggestionKind.REPLACEMENT,
        problem=suffix_callable(issue.text, issue),
        text=suffix_callable(issue.replacement, issue),
    )


def build_entry(version: str, issue: Issue, base_path: str) -> IssueEntry:
    """Return the :class:`IssueEntry` for ``issue`` reported under ``version``."""

    return IssueEntry(
        version=version,
        issue=issue,
        full_path=f"{base_path}{issue.file}",
        display_text=suffix_callable(issue.text, issue),
        verb_phrase=RESERVED_PHRASE if issue.type == RESERVED_IDENTIFIER else issue.category,
        suggestion=build_suggestion(issue),
    )


def build_report_view(report: Report) -> ReportView:
    """Return the normalised view of one report with version buckets sorted."""

    buckets = tuple(
        VersionBucket(
            version=version,
            entries=tuple(
                build_entry(version, issue, report.base_path) for issue in report.issues_by_version[version]
            ),
        )
        for version in sort_versions(report.issues_by_version)
    )
    return ReportView(
        title=report.title,
        base_path=report.base_path,
        info_messages=tuple(report.info_messages),
        buckets=buckets,
    )


def partition_files(scanned_files: Iterable[str], failing_paths: Iterable[str]) -> FilePartition:
    """Split ``scanned_files`` into clean and failing paths.

    Args:
        scanned_files: Every path the analyzer visited.
        failing_paths: Paths with at least one issue.

    Returns:
        FilePartition: Distinct paths in first-seen order.
    """

    failing = tuple(dict.fromkeys(failing_paths))
    failing_set = set(failing)
    clean = tuple(path for path in dict.fromkeys(scanned_files) if path not in failing_set)
    return FilePartition(clean=clean, failing=failing)


def aggregate(reports: Sequence[Report], scanned_files: Iterable[str] = ()) -> NormalizedView:
    """Return the :class:`NormalizedView` for ``reports``.

    Args:
        reports: Reports in the order the analyzer produced them.
        scanned_files: Paths visited by the analyzer, used for pass accounting.

    Returns:
        NormalizedView: Sorted, decorated issues together with run totals.
    """

    views = tuple(build_report_view(report) for report in reports)
    total = sum(report.issue_count for report in reports)
    failing_paths = (entry.issue.path for view in views for bucket in view.buckets for entry in bucket.entries)
    return NormalizedView(
        reports=views,
        total_issues=total,
        partition=partition_files(scanned_files, failing_paths),
    )


__all__ = [
    "CALLABLE_SUFFIX",
    "FilePartition",
    "IssueEntry",
    "NormalizedView",
    "RESERVED_PHRASE",
    "ReportView",
    "Suggestion",
    "SuggestionKind",
    "VersionBucket",
    "aggregate",
    "build_entry",
    "build_suggestion",
    "partition_files",
    "sort_versions",
    "suffix_callable",
]
