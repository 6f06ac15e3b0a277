# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Human-readable byte size formatting and parsing."""

from __future__ import annotations

import re
from typing import Final

SIZE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
BINARY_MARKER: Final[str] = "i"
BINARY_MULTIPLIER: Final[int] = 1024
DECIMAL_MULTIPLIER: Final[int] = 1000

_FLOAT_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"%[-+ 0#]*\d*(?:\.\d+)?[FfEeGg]")
_SIZE_LITERAL: Final[re.Pattern[str]] = re.compile(r"^\s*(\d+)\s*([kmg]?b)\s*$", re.IGNORECASE)
_PARSE_UNITS: Final[tuple[str, ...]] = ("b", "kb", "mb", "gb")


def format_size(template: str, byte_count: float, default_unit: str = "") -> str:
    """Return ``byte_count`` rendered through a size ``template``.

    The template carries one printf-style float placeholder (``%F``, ``%.3F``,
    ``%10.3F``...) and a unit placeholder: ``U`` renders the unit in upper
    case, ``u`` in lower case. A trailing ``i`` switches to binary multiples
    (``KiB``, ``MiB``...) and is not part of the output.

    Examples:
        ``format_size("%.3F Ui", 1073741824)`` -> ``"1.000 GiB"``
        ``format_size("%.3F U", 632096)`` -> ``"632.096 KB"``
        ``format_size("%.3F U", 5_000_000, "mb")`` -> ``"5.000 MB"``

    Args:
        template: Format template described above.
        byte_count: Size in bytes; negative values are clamped to zero.
        default_unit: Optional unit (``B``, ``KB`` ... ``YB``) forcing the scale.
            Empty or unknown units select the largest unit keeping the value >= 1.

    Returns:
        str: Formatted size.

    Raises:
        ValueError: If ``template`` lacks a numeric placeholder.
    """

    byte_count = max(byte_count, 0)
    unit = default_unit.strip().upper()

    if template.endswith(BINARY_MARKER):
        multiplier = BINARY_MULTIPLIER
        template = template[: -len(BINARY_MARKER)]
    else:
        multiplier = DECIMAL_MULTIPLIER

    match = _FLOAT_PLACEHOLDER.search(template)
    if match is None:
        raise ValueError(f"size template {template!r} has no numeric placeholder")

    if unit in SIZE_UNITS:
        power = SIZE_UNITS.index(unit)
    else:
        power = _unit_power(byte_count, multiplier)
        unit = SIZE_UNITS[power]
    value = byte_count / multiplier**power

    if multiplier == BINARY_MULTIPLIER and len(unit) == 2:
        unit = f"{unit[0]}iB"

    prefix = template[: match.start()]
    suffix = template[match.end() :]
    if "u" in template:
        prefix, suffix = prefix.replace("u", unit.lower()), suffix.replace("u", unit.lower())
    else:
        prefix, suffix = prefix.replace("U", unit), suffix.replace("U", unit)
    return f"{prefix.replace('%%', '%')}{match.group(0) % value}{suffix.replace('%%', '%')}"


def _unit_power(byte_count: float, multiplier: int) -> int:
    """Return the ladder level ``p`` with ``multiplier**p <= byte_count < multiplier**(p + 1)``.

    Zero stays on the byte level and the result never exceeds the top of
    :data:`SIZE_UNITS`. Integer comparison keeps exact powers (``1024**3``)
    on the right level where a floored logarithm can land one short.
    """

    power = 0
    top = len(SIZE_UNITS) - 1
    while power < top and byte_count >= multiplier ** (power + 1):
        power += 1
    return power


def parse_size(value: str) -> int:
    """Return the byte count described by ``value`` such as ``"1mb"`` or ``"512 KB"``.

    Units are binary multiples: ``kb`` is 1024 bytes, ``mb`` 1024**2, ``gb`` 1024**3.

    Args:
        value: Size literal made of an integer and a ``b``/``kb``/``mb``/``gb`` unit.

    Returns:
        int: Size in bytes.

    Raises:
        ValueError: If ``value`` is not a recognised size literal.
    """

    match = _SIZE_LITERAL.match(value)
    if match is None:
        raise ValueError(f"invalid size {value!r}; expected a number followed by b, kb, mb or gb")
    amount, unit = match.groups()
    return int(amount) * BINARY_MULTIPLIER ** _PARSE_UNITS.index(unit.lower())


__all__ = [
    "BINARY_MULTIPLIER",
    "DECIMAL_MULTIPLIER",
    "SIZE_UNITS",
    "format_size",
    "parse_size",
]
