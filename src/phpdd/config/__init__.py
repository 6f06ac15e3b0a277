# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and constants."""

from __future__ import annotations

from .constants import AVAILABLE_TARGETS, DEFAULT_FILE_EXTENSIONS, TOOL_NAME, TOOL_VERSION
from .models import (
    ConfigurationError,
    OutputConfig,
    OutputMode,
    ScanOptions,
    build_output_config,
    build_scan_options,
    parse_output_mode,
)

__all__ = [
    "AVAILABLE_TARGETS",
    "DEFAULT_FILE_EXTENSIONS",
    "TOOL_NAME",
    "TOOL_VERSION",
    "ConfigurationError",
    "OutputConfig",
    "OutputMode",
    "ScanOptions",
    "build_output_config",
    "build_scan_options",
    "parse_output_mode",
]
