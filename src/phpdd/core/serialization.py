# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load and export analysis documents produced by the analyzer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import InfoKind, InfoMessage, Issue, JsonValue, Report

LOGGER = logging.getLogger(__name__)


class AnalysisDocumentError(RuntimeError):
    """Raised when an analysis document cannot be read or fails validation."""


class _InfoEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: InfoKind = InfoKind.INFO
    message: str


class _ReportEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    base_path: str = ""
    info: tuple[_InfoEntry, ...] = ()
    issues: dict[str, tuple[Issue, ...]] = Field(default_factory=dict)

    def to_report(self) -> Report:
        return Report(
            title=self.title,
            base_path=self.base_path,
            info_messages=tuple(InfoMessage(kind=entry.type, text=entry.message) for entry in self.info),
            issues_by_version=self.issues,
        )


class _DocumentEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    reports: tuple[_ReportEntry, ...] = ()
    scanned_files: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AnalysisDocument:
    """Reports and scanned paths restored from an analysis document."""

    reports: tuple[Report, ...]
    scanned_files: tuple[str, ...]


def parse_analysis(payload: str | bytes) -> AnalysisDocument:
    """Return the :class:`AnalysisDocument` encoded in ``payload``.

    Args:
        payload: JSON text of an analysis document.

    Returns:
        AnalysisDocument: Validated reports and scanned paths.

    Raises:
        AnalysisDocumentError: If ``payload`` is not a valid analysis document.
    """

    try:
        document = _DocumentEntry.model_validate_json(payload)
    except ValidationError as exc:
        summary = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
        )
        raise AnalysisDocumentError(f"Invalid analysis document: {summary}") from exc
    return AnalysisDocument(
        reports=tuple(entry.to_report() for entry in document.reports),
        scanned_files=document.scanned_files,
    )


def load_analysis(path: Path) -> AnalysisDocument:
    """Read and validate the analysis document stored at ``path``.

    Args:
        path: Location of the JSON document.

    Returns:
        AnalysisDocument: Validated reports and scanned paths.

    Raises:
        AnalysisDocumentError: If the file cannot be read or is invalid.
    """

    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisDocumentError(f"Unable to read analysis document {path}: {exc}") from exc
    document = parse_analysis(payload)
    LOGGER.debug(
        "loaded %d report(s) and %d scanned file(s) from %s",
        len(document.reports),
        len(document.scanned_files),
        path,
    )
    return document


def serialize_issue(issue: Issue) -> dict[str, JsonValue]:
    """Convert an issue into a JSON-friendly mapping."""
    return {
        "file": issue.file,
        "path": issue.path,
        "line": issue.line,
        "column": issue.column,
        "type": issue.type,
        "category": issue.category,
        "text": issue.text,
        "replacement": issue.replacement,
    }


def serialize_report(report: Report) -> dict[str, JsonValue]:
    """Convert a report into the mapping accepted by :func:`parse_analysis`."""
    return {
        "title": report.title,
        "base_path": report.base_path,
        "info": [{"type": message.kind.value, "message": message.text} for message in report.info_messages],
        "issues": {
            version: [serialize_issue(issue) for issue in issues]
            for version, issues in report.issues_by_version.items()
        },
    }


def serialize_document(document: AnalysisDocument) -> dict[str, JsonValue]:
    """Convert a complete analysis document into a JSON-friendly mapping."""
    return {
        "reports": [serialize_report(report) for report in document.reports],
        "scanned_files": list(document.scanned_files),
    }


__all__ = [
    "AnalysisDocument",
    "AnalysisDocumentError",
    "load_analysis",
    "parse_analysis",
    "serialize_document",
    "serialize_issue",
    "serialize_report",
]
