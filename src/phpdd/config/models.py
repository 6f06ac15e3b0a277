# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for rendering and analyzer options."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.models import Issue, Report
from ..filesystem.paths import has_path_segment, path_extension
from ..utils.sizes import format_size, parse_size
from .constants import (
    AVAILABLE_TARGETS,
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_MAX_SIZE,
    DEFAULT_PATH_WIDTH,
)


class ConfigurationError(ValueError):
    """Raised when user supplied options cannot be honoured."""


class OutputMode(StrEnum):
    """Supported output encodings."""

    STDOUT = "stdout"
    JSON = "json"
    JUNIT = "junit"


FILE_OUTPUT_MODES: frozenset[OutputMode] = frozenset({OutputMode.JSON, OutputMode.JUNIT})
_OUTPUT_FILE_MESSAGE = "An output file can only be provided for: json, junit"


class OutputConfig(BaseModel):
    """Configuration controlling where and how results are rendered."""

    model_config = ConfigDict(frozen=True)

    mode: OutputMode = OutputMode.STDOUT
    output_file: Path | None = None
    verbose: bool = False
    color: bool = True
    emoji: bool = True
    path_width: int = Field(default=DEFAULT_PATH_WIDTH, gt=0)

    @model_validator(mode="after")
    def _check_output_file(self) -> OutputConfig:
        """Reject an output file for modes that only print to the terminal.

        Returns:
            OutputConfig: Validated configuration.

        Raises:
            ValueError: If ``output_file`` is combined with stdout mode.
        """

        if self.output_file is not None and self.mode not in FILE_OUTPUT_MODES:
            raise ValueError(_OUTPUT_FILE_MESSAGE)
        return self


def parse_output_mode(value: str | None) -> OutputMode:
    """Return the :class:`OutputMode` named by ``value``.

    Args:
        value: Raw ``--output`` value; empty values select stdout.

    Returns:
        OutputMode: Parsed output mode.

    Raises:
        ConfigurationError: If ``value`` names an unknown mode.
    """

    if not value:
        return OutputMode.STDOUT
    try:
        return OutputMode(value.strip().lower())
    except ValueError as exc:
        available = ", ".join(mode.value for mode in OutputMode)
        raise ConfigurationError(f"Output is not valid. Available outputs: {available}") from exc


def build_output_config(
    output: str | None,
    output_file: str | Path | None = None,
    *,
    verbose: bool = False,
    color: bool = True,
    emoji: bool = True,
    path_width: int = DEFAULT_PATH_WIDTH,
) -> OutputConfig:
    """Construct an :class:`OutputConfig` from raw CLI values.

    Args:
        output: Requested output mode name.
        output_file: Optional destination for json/junit documents.
        verbose: Whether summaries and memory usage are printed.
        color: Whether terminal colours are enabled.
        emoji: Whether emoji glyphs are enabled.
        path_width: Maximum width of the file column in terminal tables.

    Returns:
        OutputConfig: Validated output configuration.

    Raises:
        ConfigurationError: If the mode is unknown or a file is given for stdout output.
    """

    mode = parse_output_mode(output)
    destination: Path | None = None
    if output_file is not None and str(output_file).strip():
        if mode not in FILE_OUTPUT_MODES:
            raise ConfigurationError(_OUTPUT_FILE_MESSAGE)
        destination = Path(str(output_file).strip())
    return OutputConfig(
        mode=mode,
        output_file=destination,
        verbose=verbose,
        color=color,
        emoji=emoji,
        path_width=path_width,
    )


def split_list(value: str | None, *, strip_chars: str | None = None) -> tuple[str, ...]:
    """Split a comma separated option into trimmed, lower-cased entries.

    Args:
        value: Raw comma separated value.
        strip_chars: Characters stripped from each entry; whitespace when ``None``.

    Returns:
        tuple[str, ...]: Non-empty entries in their original order.
    """

    if not value:
        return ()
    entries = (item.strip(strip_chars).lower() for item in value.split(","))
    return tuple(entry for entry in entries if entry)


class ScanOptions(BaseModel):
    """Analyzer options, also usable to filter an exported analysis."""

    model_config = ConfigDict(frozen=True)

    target: str | None = None
    after: str | None = None
    max_size: int = Field(default_factory=lambda: parse_size(DEFAULT_MAX_SIZE), ge=0)
    exclude: tuple[str, ...] = ()
    file_extensions: tuple[str, ...] | None = None
    skip_checks: tuple[str, ...] = ()

    @field_validator("target", "after")
    @classmethod
    def _known_version(cls, value: str | None) -> str | None:
        """Ensure version bounds name a supported PHP release.

        Args:
            value: Version label or ``None`` for an open bound.

        Returns:
            str | None: The validated label.

        Raises:
            ValueError: If ``value`` is not listed in :data:`AVAILABLE_TARGETS`.
        """

        if value is not None and value not in AVAILABLE_TARGETS:
            raise ValueError(f"unknown PHP version {value!r}")
        return value

    def describe(self) -> list[str]:
        """Return the human readable notices printed in verbose mode."""

        notices = [f"Max file size set to: {format_size('%.3F Ui', self.max_size)}"]
        if self.exclude:
            notices.append(f"Excluding following files / directories: {', '.join(self.exclude)}")
        if self.file_extensions is not None:
            notices.append(f"File extensions set to: {', '.join(self.file_extensions)}")
        if self.skip_checks:
            notices.append(
                "Skipping checks containing any of the following values: " + ", ".join(self.skip_checks),
            )
        return notices

    def version_selected(self, version: str) -> bool:
        """Return whether ``version`` lies within the ``after``..``target`` window.

        Bounds compare as plain strings, the same way version buckets are ordered.
        """

        if self.after is not None and version < self.after:
            return False
        return self.target is None or version <= self.target

    def path_selected(self, path: str) -> bool:
        """Return whether ``path`` survives the exclude list and extension filter."""

        if self.exclude and has_path_segment(path, self.exclude):
            return False
        return self.file_extensions is None or path_extension(path) in self.file_extensions

    def issue_selected(self, issue: Issue) -> bool:
        """Return whether ``issue`` survives every configured filter."""

        if not self.path_selected(issue.path):
            return False
        text = issue.text.lower()
        return not any(check in text for check in self.skip_checks)

    def apply(
        self,
        reports: Sequence[Report],
        scanned_files: Iterable[str] = (),
    ) -> tuple[tuple[Report, ...], tuple[str, ...]]:
        """Return copies of ``reports`` and ``scanned_files`` restricted by these options.

        Version buckets left without issues are dropped. Input reports are
        never modified.

        Args:
            reports: Reports produced by the analyzer.
            scanned_files: Paths the analyzer visited.

        Returns:
            tuple[tuple[Report, ...], tuple[str, ...]]: Filtered reports and scanned paths.
        """

        filtered_reports: list[Report] = []
        for report in reports:
            buckets: dict[str, tuple[Issue, ...]] = {}
            for version, issues in report.issues_by_version.items():
                if not self.version_selected(version):
                    continue
                kept = tuple(issue for issue in issues if self.issue_selected(issue))
                if kept:
                    buckets[version] = kept
            filtered_reports.append(report.model_copy(update={"issues_by_version": buckets}))
        kept_files = tuple(path for path in scanned_files if self.path_selected(path))
        return tuple(filtered_reports), kept_files


def build_scan_options(
    *,
    target: str | None = None,
    after: str | None = None,
    max_size: str | None = None,
    exclude: str | None = None,
    file_extensions: str | None = None,
    skip_checks: str | None = None,
) -> ScanOptions:
    """Construct :class:`ScanOptions` from raw comma separated CLI values.

    Args:
        target: Newest PHP version to report on.
        after: Oldest PHP version to report on.
        max_size: Size limit such as ``"1mb"``.
        exclude: Comma separated file or directory names.
        file_extensions: Comma separated extensions; the default set disables filtering.
        skip_checks: Comma separated fragments of check names to ignore.

    Returns:
        ScanOptions: Validated options.

    Raises:
        ConfigurationError: If a version or size value is invalid.
    """

    available = ", ".join(AVAILABLE_TARGETS)
    if target and target not in AVAILABLE_TARGETS:
        raise ConfigurationError(f"Target version is not valid. Available target versions: {available}")
    if after and after not in AVAILABLE_TARGETS:
        raise ConfigurationError(f"After version is not valid. Available after versions: {available}")

    try:
        size_limit = parse_size(max_size or DEFAULT_MAX_SIZE)
    except ValueError as exc:
        raise ConfigurationError(f"Max size is not valid: {exc}") from exc

    extensions: tuple[str, ...] | None = split_list(file_extensions) or None
    if extensions == DEFAULT_FILE_EXTENSIONS:
        extensions = None

    return ScanOptions(
        target=target or None,
        after=after or None,
        max_size=size_limit,
        exclude=split_list(exclude, strip_chars="/\\ "),
        file_extensions=extensions,
        skip_checks=split_list(skip_checks),
    )


__all__ = [
    "ConfigurationError",
    "FILE_OUTPUT_MODES",
    "OutputConfig",
    "OutputMode",
    "ScanOptions",
    "build_output_config",
    "build_scan_options",
    "parse_output_mode",
    "split_list",
]
