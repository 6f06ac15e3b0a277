# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers shared across phpdd modules."""

from .sizes import SIZE_UNITS, format_size, parse_size

__all__ = ["SIZE_UNITS", "format_size", "parse_size"]
