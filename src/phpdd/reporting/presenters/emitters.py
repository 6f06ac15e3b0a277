# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emit composed documents to a file or the standard output stream."""

from __future__ import annotations

import os
import stat
import sys
import tempfile
from pathlib import Path
from typing import Final, TextIO

DEFAULT_FILE_MODE: Final[int] = 0o666


def document_mode(destination: Path) -> int:
    """Return the permission bits a document written to ``destination`` should carry.

    An existing file keeps its current mode. A new file gets
    :data:`DEFAULT_FILE_MODE` filtered through the process umask, matching
    what a plain ``open(destination, "w")`` would produce.
    """

    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return DEFAULT_FILE_MODE & ~umask


def write_document(document: str, destination: Path | None, *, stream: TextIO | None = None) -> None:
    """Write a fully composed ``document`` in a single operation.

    File destinations are written to a temporary sibling first and moved into
    place, so readers never observe a partial document. The temporary file
    takes the mode returned by :func:`document_mode` before the move. Write
    failures propagate to the caller.

    Args:
        document: Complete text to emit.
        destination: Target file, or ``None`` for the standard output stream.
        stream: Stream used instead of ``sys.stdout`` when ``destination`` is ``None``.

    Raises:
        OSError: If the destination cannot be written.
    """

    if destination is None:
        target = stream or sys.stdout
        target.write(document)
        target.flush()
        return

    directory = destination.parent if str(destination.parent) else Path()
    mode = document_mode(destination)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{destination.name}.", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(document)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, destination)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


__all__ = ["DEFAULT_FILE_MODE", "document_mode", "write_document"]
