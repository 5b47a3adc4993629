"""Command: generate random identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beltkit.commands._base import BeltCommand

if TYPE_CHECKING:
    from beltkit.commands._context import AppContext


@click.command(
    "id",
    cls=BeltCommand,
    examples="""\
  beltkit id
  beltkit -q id -n 3""",
)
@click.option("-n", "--count", default=1, show_default=True, help="How many to generate.")
@click.pass_obj
def ident(app: AppContext, count: int) -> None:
    """Generate 32-character hex identifiers."""
    from beltkit.services.tools import ToolService

    app.emit(ToolService(app.settings).generate_ids(count))
