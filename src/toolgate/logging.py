# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status lines and section headers printed by the ``toolgate`` CLI."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from rich.console import Console
from rich.rule import Rule
from rich.text import Text


class Status(Enum):
    """Outcome categories for a CLI status line, paired with glyph and style."""

    INFO = ("ℹ️ ", "cyan")
    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "red")

    def __init__(self, glyph: str, style: str) -> None:
        self.glyph = glyph
        self.style = style


@lru_cache(maxsize=1)
def _console() -> Console:
    # Rich drops styling on its own when stdout is not a terminal.
    return Console(soft_wrap=True, highlight=False)


def report(status: Status, msg: str, *, use_emoji: bool) -> None:
    """Print ``msg`` as a single status line.

    Args:
        status: Category deciding the glyph prefix and colour.
        msg: Message text.
        use_emoji: Prefix the line with the status glyph when ``True``.
    """

    prefix = status.glyph if use_emoji else ""
    _console().print(Text(f"{prefix}{msg}", style=status.style))


def info(msg: str, *, use_emoji: bool) -> None:
    """Print an informational line."""

    report(Status.INFO, msg, use_emoji=use_emoji)


def ok(msg: str, *, use_emoji: bool) -> None:
    """Print a success line."""

    report(Status.OK, msg, use_emoji=use_emoji)


def warn(msg: str, *, use_emoji: bool) -> None:
    """Print a warning line."""

    report(Status.WARN, msg, use_emoji=use_emoji)


def fail(msg: str, *, use_emoji: bool) -> None:
    """Print a failure line."""

    report(Status.FAIL, msg, use_emoji=use_emoji)


def section(title: str, *, use_color: bool) -> None:
    """Print a header separating blocks of ``show`` output.

    Args:
        title: Header text.
        use_color: Draw a Rich rule instead of a plain ``--- title ---`` line.
    """

    console = _console()
    console.print()
    if use_color:
        console.print(Rule(title))
    else:
        console.print(f"--- {title} ---", markup=False)


__all__ = [
    "Status",
    "fail",
    "info",
    "ok",
    "report",
    "section",
    "warn",
]
