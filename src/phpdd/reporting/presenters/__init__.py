# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Machine-readable presenters for analysis results."""

from __future__ import annotations

from .emitters import write_document
from .json_report import build_json_document, build_json_payload, render_json
from .junit import build_junit_document, build_junit_tree, render_junit

__all__ = [
    "build_json_document",
    "build_json_payload",
    "build_junit_document",
    "build_junit_tree",
    "render_json",
    "render_junit",
    "write_document",
]
