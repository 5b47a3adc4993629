"""Command: split delimited lines into fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beltkit.commands._base import BeltCommand

if TYPE_CHECKING:
    from beltkit.commands._context import AppContext


@click.command(
    cls=BeltCommand,
    examples="""\
  beltkit split , 'a,b,c'
  cut -d: -f1,7 /etc/passwd | beltkit --json split :""",
)
@click.argument("delimiter")
@click.argument("line", required=False)
@click.pass_obj
def split(app: AppContext, delimiter: str, line: str | None) -> None:
    """Split LINE (or each stdin line) on DELIMITER."""
    from beltkit.services.tools import ToolService

    if line is not None:
        lines = [line]
    else:
        lines = click.get_text_stream("stdin").read().splitlines()
    app.emit(ToolService(app.settings).split(lines, delimiter))
