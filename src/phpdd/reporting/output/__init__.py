# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Terminal renderers for analysis results."""

from __future__ import annotations

from .console import (
    CATEGORY_STYLES,
    ISSUE_TYPE_STYLES,
    NO_ISSUES_BANNER,
    format_issue_text,
    render_stdout,
    type_style,
    version_header,
)

__all__ = [
    "CATEGORY_STYLES",
    "ISSUE_TYPE_STYLES",
    "NO_ISSUES_BANNER",
    "format_issue_text",
    "render_stdout",
    "type_style",
    "version_header",
]
