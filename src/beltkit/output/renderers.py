"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``. Unknown ops fall through to
a generic key-value renderer. Quiet renderers print bare values so that
``$(beltkit -q home config)`` works in shell scripts.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from beltkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from beltkit.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render bare values for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    quiet = _QUIET_RENDERERS.get(result.op)
    if quiet is None:
        return f"OK: {result.op}"
    return quiet(result.data)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="belt.ok"), Text(f"  {result.op}", style="belt.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="belt.key")
    if key == "id":
        v = Text(str(value), style="belt.id")
    elif key == "path":
        v = Text(str(value), style="belt.path")
    elif isinstance(value, int | float) and not isinstance(value, bool):
        v = Text(str(value), style="belt.number")
    elif isinstance(value, dict | list):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _two_column_table(left: str, right: str, rows: dict[str, Any]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column(left, style="belt.op", no_wrap=True)
    table.add_column(right, style="belt.path")
    for key, value in rows.items():
        table.add_row(key, "-" if value is None else str(value))
    return table


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="belt.error"),
        Text(f"  {result.op}", style="belt.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_homes(result: ServiceResult, console: Console) -> None:
    console.print(_two_column_table("Kind", "Path", result.data.get("homes", {})))


def _render_commands(result: ServiceResult, console: Console) -> None:
    console.print(_two_column_table("Command", "Path", result.data.get("commands", {})))


def _render_types(result: ServiceResult, console: Console) -> None:
    console.print(_two_column_table("File", "MIME type", result.data.get("types", {})))


def _render_split(result: ServiceResult, console: Console) -> None:
    for row in result.data.get("rows", []):
        console.print("\t".join(row), markup=False, soft_wrap=True)


_OP_RENDERERS: dict[str, Renderer] = {
    "resolve_homes": _render_homes,
    "which": _render_commands,
    "mime_type": _render_types,
    "split_fields": _render_split,
}


# ── Quiet renderers ───────────────────────────────────────────────────


def _lines(values: Any) -> str:
    return "\n".join(str(v) for v in values)


_QUIET_RENDERERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "resolve_home": lambda data: str(data["path"]),
    "resolve_homes": lambda data: _lines(data["homes"].values()),
    "generate_id": lambda data: (
        str(data["id"]) if "id" in data else _lines(item["id"] for item in data["items"])
    ),
    "which": lambda data: _lines(data["commands"].values()),
    "mime_type": lambda data: _lines(data["types"].values()),
    "sum": lambda data: str(data["total"]),
    "split_fields": lambda data: _lines("\t".join(row) for row in data["rows"]),
    # The child already wrote its own output.
    "with_temp": lambda _data: "",
}
