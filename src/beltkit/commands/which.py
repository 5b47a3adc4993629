"""Command: check that executables exist."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beltkit.commands._base import BeltCommand

if TYPE_CHECKING:
    from beltkit.commands._context import AppContext


@click.command(
    cls=BeltCommand,
    examples="""\
  beltkit which git
  beltkit -q which curl jq || exit 1""",
)
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def which(app: AppContext, names: tuple[str, ...]) -> None:
    """Locate NAMES on PATH; exit 1 if any is missing."""
    from beltkit.services.tools import ToolService

    app.emit(ToolService(app.settings).which(names))
