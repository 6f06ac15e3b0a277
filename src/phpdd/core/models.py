# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable analysis records consumed by the rendering pipeline."""

from __future__ import annotations

from enum import StrEnum
from typing import Final, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"


class InfoKind(StrEnum):
    """Kinds of free-form notices attached to a report."""

    INFO = "info"
    WARNING = "warning"


class IssueType(StrEnum):
    """Issue types reported by the analyzer."""

    FUNCTION = "function"
    FUNCTION_USAGE = "function_usage"
    VARIABLE = "variable"
    INI = "ini"
    IDENTIFIER = "identifier"
    CONSTANT = "constant"


class IssueCategory(StrEnum):
    """Semantic classifications driving message phrasing."""

    REMOVED = "removed"
    CHANGED = "changed"
    VIOLATION = "violation"


# Types with special phrasing in every output format.
REMOVED_FUNCTION: Final[str] = IssueType.FUNCTION.value
RESERVED_IDENTIFIER: Final[str] = IssueType.IDENTIFIER.value


class InfoMessage(BaseModel):
    """Analyzer notice that is not tied to a specific issue."""

    model_config = ConfigDict(frozen=True)

    kind: InfoKind = InfoKind.INFO
    text: str


class Issue(BaseModel):
    """Single compatibility problem found in a scanned file."""

    model_config = ConfigDict(frozen=True)

    file: str
    path: str
    line: int = Field(ge=0)
    column: int = Field(ge=0)
    type: str
    category: str
    text: str
    replacement: str | None = None

    @field_validator("replacement", mode="before")
    @classmethod
    def _blank_replacement(cls, value: str | None) -> str | None:
        """Treat an empty replacement as no suggestion.

        Args:
            value: Replacement supplied by the analyzer.

        Returns:
            str | None: ``None`` for missing or empty replacements, otherwise ``value``.
        """

        if value is None or value == "":
            return None
        return value

    @property
    def is_changed(self) -> bool:
        """Return ``True`` when the issue describes changed behaviour."""

        return self.category.casefold() == IssueCategory.CHANGED.value

    @property
    def is_removed_function(self) -> bool:
        """Return ``True`` when the issue refers to a callable."""

        return self.type == REMOVED_FUNCTION


class Report(BaseModel):
    """Analysis result for one scanned target (file or directory)."""

    model_config = ConfigDict(frozen=True)

    title: str
    base_path: str = ""
    info_messages: tuple[InfoMessage, ...] = Field(default_factory=tuple)
    issues_by_version: dict[str, tuple[Issue, ...]] = Field(default_factory=dict)

    @property
    def issue_count(self) -> int:
        """Return the number of issues across every version bucket."""

        return sum(len(issues) for issues in self.issues_by_version.values())


__all__ = [
    "InfoKind",
    "InfoMessage",
    "Issue",
    "IssueCategory",
    "IssueType",
    "JsonScalar",
    "JsonValue",
    "REMOVED_FUNCTION",
    "RESERVED_IDENTIFIER",
    "Report",
]
