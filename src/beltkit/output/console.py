"""Rich Console factory, theme, and stderr printers.

Result rendering uses Consoles backed by a StringIO buffer, preserving
the ``format_result() -> str`` contract. The printers (``info``, ``warn``,
``error``, ``die``) write straight to stderr for scripts that import
beltkit as a library.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import IO, NoReturn

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

BELT_THEME = Theme(
    {
        "belt.ok": "bold green",
        "belt.error": "bold red",
        "belt.warning": "bold yellow",
        "belt.info": "bold cyan",
        "belt.op": "bold cyan",
        "belt.key": "dim",
        "belt.path": "dim",
        "belt.id": "bold blue",
        "belt.number": "magenta",
    }
)


def create_console(
    *, file: IO[str] | None = None, no_color: bool = False, width: int | None = None
) -> Console:
    """Create a themed Console, rendering to a StringIO buffer by default.

    Args:
        file: Stream to write to instead of a fresh buffer.
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=file if file is not None else StringIO(),
        theme=BELT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


# ── Printers ──────────────────────────────────────────────────────────


def _emit(label: str, style: str, message: str, file: IO[str] | None) -> None:
    console = create_console(file=file if file is not None else sys.stderr)
    console.print(Text(label, style=style), Text(message), sep=" ")


def info(message: str, *, file: IO[str] | None = None) -> None:
    _emit("INFO:", "belt.info", message, file)


def warn(message: str, *, file: IO[str] | None = None) -> None:
    _emit("WARNING:", "belt.warning", message, file)


def error(message: str, *, file: IO[str] | None = None) -> None:
    _emit("ERROR:", "belt.error", message, file)


def die(message: str, code: int = 1, *, file: IO[str] | None = None) -> NoReturn:
    """Print *message* as an error and exit with *code*."""
    error(message, file=file)
    raise SystemExit(code)
