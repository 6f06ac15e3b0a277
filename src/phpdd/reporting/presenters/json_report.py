# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Machine-readable JSON rendering of analysis results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final, TextIO

from ...core.models import JsonValue
from ..aggregate import NormalizedView, SuggestionKind
from .emitters import write_document

JSON_INDENT: Final[int] = 4
SECTION_ORDER: Final[tuple[str, ...]] = ("info_messages", "problems", "replace_suggestions", "notes")
ALWAYS_PRESENT: Final[frozenset[str]] = frozenset({"problems"})


def build_json_payload(view: NormalizedView) -> dict[str, list[dict[str, JsonValue]]]:
    """Return the JSON payload describing ``view``.

    ``problems`` is always present, possibly empty; the other sections are
    omitted when they have no entries.

    Args:
        view: Aggregated analysis results.

    Returns:
        dict[str, list[dict[str, JsonValue]]]: Payload keyed by section name.
    """

    sections: dict[str, list[dict[str, JsonValue]]] = {name: [] for name in SECTION_ORDER}
    for report in view.reports:
        for message in report.info_messages:
            sections["info_messages"].append({"type": message.kind.value, "message": message.text})
        for bucket in report.buckets:
            for entry in bucket.entries:
                issue = entry.issue
                sections["problems"].append(
                    {
                        "version": entry.version,
                        "file": issue.file,
                        "path": entry.full_path,
                        "line": issue.line,
                        "column": issue.column,
                        "category": issue.category,
                        "type": issue.type,
                        "checker": issue.text,
                    },
                )
                suggestion = entry.suggestion
                if suggestion is None:
                    continue
                if suggestion.kind is SuggestionKind.NOTE:
                    sections["notes"].append(
                        {"type": issue.type, "problem": suggestion.problem, "note": suggestion.text},
                    )
                else:
                    sections["replace_suggestions"].append(
                        {"type": issue.type, "problem": suggestion.problem, "replacement": suggestion.text},
                    )
    return {name: entries for name, entries in sections.items() if entries or name in ALWAYS_PRESENT}


def build_json_document(view: NormalizedView) -> str:
    """Return the pretty-printed JSON document for ``view``."""

    return json.dumps(build_json_payload(view), indent=JSON_INDENT, ensure_ascii=False)


def render_json(
    view: NormalizedView,
    destination: Path | None = None,
    *,
    stream: TextIO | None = None,
) -> tuple[int, bool]:
    """Write the JSON document for ``view``.

    Args:
        view: Aggregated analysis results.
        destination: Output file, or ``None`` for the standard output stream.
        stream: Optional stream replacing ``sys.stdout``.

    Returns:
        tuple[int, bool]: Total issue count and whether any issue was found.
    """

    write_document(build_json_document(view), destination, stream=stream)
    return view.total_issues, view.has_issue


__all__ = ["build_json_document", "build_json_payload", "render_json"]
