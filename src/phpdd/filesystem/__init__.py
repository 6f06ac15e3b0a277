# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem utilities for path handling."""

from __future__ import annotations

from .paths import ELLIPSIS, has_path_segment, path_extension, truncate_path

__all__ = [
    "ELLIPSIS",
    "has_path_segment",
    "path_extension",
    "truncate_path",
]
