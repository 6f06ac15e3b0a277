# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for phpdd-report."""

from __future__ import annotations

from .app import app

__all__ = ["app"]
