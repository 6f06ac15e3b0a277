# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from phpdd.runtime.console.manager import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    console: Console | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        console: Optional console overriding the managed instance.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    target = console or get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    target.print(text)


def banner(msg: str, *, success: bool, use_color: bool, console: Console | None = None) -> None:
    """Print a highlighted pass/fail summary line.

    Args:
        msg: Summary text.
        success: ``True`` renders the message on green, ``False`` on red.
        use_color: Flag indicating whether ANSI colour support is desired.
        console: Optional console overriding the managed instance.
    """

    style = "white on green" if success else "white on red"
    _print_line(msg, style=style, use_emoji=False, use_color=use_color, console=console)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color, console=console)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit an error message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        console: Optional console overriding the managed instance.
    """

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color, console=console)
