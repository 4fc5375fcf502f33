# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console reporting for the PHPMD hook.

Hook outcomes are styled by exit code: a clean analysis in green, violations
in red, and setup failures as a bold headline followed by the indented
reason. Analyzer output is echoed verbatim and never styled.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Final

import typer
from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from .constants import EXIT_ERRORS_FOUND, EXIT_SUCCESS

_SYMBOLS: Final[dict[str, str]] = {
    "info": "ℹ️ ",
    "ok": "✅ ",
    "warn": "⚠️ ",
    "fail": "❌ ",
    "error": "💥 ",
}
_STYLES: Final[dict[str, str]] = {
    "info": "cyan",
    "ok": "green",
    "warn": "yellow",
    "fail": "red",
    "error": "bold red",
}
_DETAIL_INDENT: Final[str] = "   "


def stdout_is_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _shared_console(color: bool, emoji: bool, tty: bool) -> Console:
    """Return a shared Rich console for one combination of presentation flags."""

    return Console(
        color_system="auto" if color else None,
        force_terminal=tty,
        no_color=not color,
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


@dataclass(slots=True)
class HookLogger:
    """Render hook messages honouring emoji, colour and debug preferences.

    ``use_color`` set to ``None`` follows TTY detection; ``False`` disables
    colour even on a terminal.
    """

    use_emoji: bool = True
    use_color: bool | None = None
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"), repr=False)

    @property
    def color_enabled(self) -> bool:
        """Return ``True`` when styled output should be produced."""

        return self.use_color is not False and stdout_is_tty()

    def _console(self) -> Console:
        return _shared_console(self.color_enabled, self.use_emoji, stdout_is_tty())

    def _line(self, kind: str, message: str) -> None:
        prefix = _SYMBOLS[kind] if self.use_emoji else ""
        text = Text(f"{prefix}{message}")
        if self.color_enabled:
            text.stylize(_STYLES[kind])
        self._console().print(text)

    def info(self, message: str) -> None:
        """Log an informational message."""

        self._line("info", message)

    def ok(self, message: str) -> None:
        """Log a success message."""

        self._line("ok", message)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        self._line("warn", message)

    def fail(self, message: str) -> None:
        """Log a failure message."""

        self._line("fail", message)

    def section(self, title: str) -> None:
        """Render a header separating hook diagnostics from other output."""

        console = self._console()
        if self.color_enabled:
            console.print()
            console.print(Rule(title))
        else:
            console.print(f"\n--- {title} ---")

    def outcome(self, message: str, exit_code: int) -> None:
        """Report the terminal hook ``message`` styled for ``exit_code``.

        Args:
            message: Outcome text. For setup failures the first line is the
                headline and the remaining lines give the reason.
            exit_code: ``0`` for a clean run, ``1`` for violations, anything
                else for a run that could not be set up or launched.
        """

        if exit_code == EXIT_SUCCESS:
            self.ok(message)
            return
        if exit_code == EXIT_ERRORS_FOUND:
            self.fail(message)
            return
        headline, _, detail = message.partition("\n")
        self._line("error", headline)
        console = self._console()
        for line in detail.splitlines():
            text = Text(f"{_DETAIL_INDENT}{line}")
            if self.color_enabled:
                text.stylize("red")
            console.print(text)

    def echo(self, message: str, *, newline: bool = True) -> None:
        """Write ``message`` to stdout verbatim using Typer's echo helper."""

        typer.echo(message, nl=newline)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple ``key=value`` highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self._console().print(text)


__all__ = ["HookLogger", "stdout_is_tty"]
