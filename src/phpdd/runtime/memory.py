# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process memory statistics."""

from __future__ import annotations

import resource
import sys
from typing import Final

_KILOBYTE: Final[int] = 1024


def peak_memory_bytes() -> int:
    """Return the peak resident set size of the current process in bytes.

    ``ru_maxrss`` is reported in bytes on macOS and in kilobytes elsewhere.
    """

    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        return int(peak)
    return int(peak) * _KILOBYTE


__all__ = ["peak_memory_bytes"]
