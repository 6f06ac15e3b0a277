# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about report paths."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath
from typing import Final

ELLIPSIS: Final[str] = ".."
SEPARATOR: Final[str] = "/"
_ELLIPSIS_MARGIN: Final[int] = len(ELLIPSIS)


def normalize_separators(path: str) -> str:
    """Return ``path`` with backslash separators replaced by ``/``."""

    return path.replace("\\", SEPARATOR)


def truncate_path(path: str, max_width: int) -> str:
    """Return ``path`` shortened to fit ``max_width`` characters where possible.

    Inner segments are abbreviated right to left, starting with the parent
    directory of the file, by replacing their tail with ``..``. The first and
    last segments are never modified, so the result can still exceed
    ``max_width`` when the path has too few inner segments. Segments that
    already end in ``..`` are left alone, which keeps the operation
    idempotent, and so are segments too short to shrink: the result is never
    longer than ``path``.

    Args:
        path: Slash or backslash separated path.
        max_width: Maximum number of characters available for display.

    Returns:
        str: ``path`` unchanged when it fits or nothing could be abbreviated,
        otherwise the abbreviated ``/``-separated path.

    """

    if len(path) <= max_width:
        return path

    parts = normalize_separators(path).split(SEPARATOR)
    current = SEPARATOR.join(parts)
    changed = False
    for index in range(len(parts) - 2, 0, -1):
        if len(current) <= max_width:
            break
        segment = parts[index]
        if segment.endswith(ELLIPSIS):
            continue
        overflow = len(current) - max_width
        removed = min(len(segment) - 1, overflow)
        if overflow + _ELLIPSIS_MARGIN < len(segment):
            removed += _ELLIPSIS_MARGIN
        # Too short to gain anything from the ellipsis.
        if removed <= _ELLIPSIS_MARGIN:
            continue
        parts[index] = segment[: len(segment) - removed] + ELLIPSIS
        current = SEPARATOR.join(parts)
        changed = True
    return current if changed else path


def has_path_segment(path: str, names: Iterable[str]) -> bool:
    """Return ``True`` when any segment of ``path`` matches one of ``names`` case-insensitively.

    Args:
        path: Path reported by the analyzer.
        names: Lower-cased file or directory names.

    Returns:
        bool: ``True`` when at least one segment matches.
    """

    segments = {segment.casefold() for segment in normalize_separators(path).split(SEPARATOR) if segment}
    return any(name in segments for name in names)


def path_extension(path: str) -> str:
    """Return the lower-cased extension of ``path`` without the leading dot."""

    return PurePosixPath(normalize_separators(path)).suffix.lstrip(".").casefold()


__all__ = [
    "ELLIPSIS",
    "SEPARATOR",
    "has_path_segment",
    "normalize_separators",
    "path_extension",
    "truncate_path",
]
