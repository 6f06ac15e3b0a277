# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Constants shared by configuration and reporting."""

from __future__ import annotations

from typing import Final

TOOL_NAME: Final[str] = "PhpDeprecationDetector"
TOOL_VERSION: Final[str] = "2.0.33"

AVAILABLE_TARGETS: Final[tuple[str, ...]] = (
    "5.3",
    "5.4",
    "5.5",
    "5.6",
    "7.0",
    "7.1",
    "7.2",
    "7.3",
    "7.4",
    "8.0",
)
DEFAULT_FILE_EXTENSIONS: Final[tuple[str, ...]] = ("php", "php5", "phtml")
DEFAULT_MAX_SIZE: Final[str] = "1mb"
DEFAULT_PATH_WIDTH: Final[int] = 60

__all__ = [
    "AVAILABLE_TARGETS",
    "DEFAULT_FILE_EXTENSIONS",
    "DEFAULT_MAX_SIZE",
    "DEFAULT_PATH_WIDTH",
    "TOOL_NAME",
    "TOOL_VERSION",
]
