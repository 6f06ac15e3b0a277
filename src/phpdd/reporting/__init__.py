# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report aggregation and the terminal, JSON and JUnit renderers."""

from __future__ import annotations

from .aggregate import IssueEntry, NormalizedView, aggregate
from .dispatch import RenderContext, RenderOutcome, dispatch_render

__all__ = [
    "IssueEntry",
    "NormalizedView",
    "RenderContext",
    "RenderOutcome",
    "aggregate",
    "dispatch_render",
]
