"""Command: sum numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beltkit.commands._base import BeltCommand

if TYPE_CHECKING:
    from beltkit.commands._context import AppContext


@click.command(
    "sum",
    cls=BeltCommand,
    examples="""\
  beltkit sum 1 2 3.5
  beltkit -q sum --int -- 2.5 -1""",
)
@click.argument("numbers", nargs=-1)
@click.option("--int", "as_int", is_flag=True, help="Round the total to an integer.")
@click.pass_obj
def sum_cmd(app: AppContext, numbers: tuple[str, ...], as_int: bool) -> None:
    """Add NUMBERS together."""
    from beltkit.services.tools import ToolService

    app.emit(ToolService(app.settings).sum(numbers, as_int=as_int))
