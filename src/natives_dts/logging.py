# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` followed by a space when emoji output is enabled."""

    return f"{symbol} " if enable else ""


@dataclass(slots=True)
class ConsoleLogger:
    """Rich-backed logger used by the generator and its CLI."""

    console: Console
    use_emoji: bool = True
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"), repr=False)

    def _line(self, symbol: str, message: str, style: str | None) -> None:
        text = Text(emoji(symbol, self.use_emoji))
        text.append(message, style=style or "")
        self.console.print(text)

    def info(self, message: str) -> None:
        """Emit an informational message.

        Args:
            message: Text describing progress.
        """

        self._line("ℹ️", message, None)

    def ok(self, message: str) -> None:
        """Emit a success message.

        Args:
            message: Text describing the successful state.
        """

        self._line("✅", message, "green")

    def warn(self, message: str) -> None:
        """Emit a warning message.

        Args:
            message: Text describing the warning condition.
        """

        self._line("⚠️", message, "yellow")

    def fail(self, message: str) -> None:
        """Emit an error message.

        Args:
            message: Text describing the failure state.
        """

        self._line("❌", message, "bold red")

    def debug(self, message: str) -> None:
        """Emit ``message`` with ``key=value`` highlighting when debug output is enabled.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_logger(*, emoji: bool = True, debug: bool = False, no_color: bool = False) -> ConsoleLogger:
    """Return a ``ConsoleLogger`` bound to a dedicated Rich console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        ConsoleLogger: Logger writing to standard output.
    """

    tty = detect_tty()
    console = Console(
        no_color=no_color or not tty,
        highlight=False,
        emoji=emoji,
        soft_wrap=True,
    )
    return ConsoleLogger(console=console, use_emoji=emoji, debug_enabled=debug)


__all__ = ["ConsoleLogger", "build_logger", "detect_tty", "emoji"]
