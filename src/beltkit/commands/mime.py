"""Command: MIME type lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beltkit.commands._base import BeltCommand

if TYPE_CHECKING:
    from beltkit.commands._context import AppContext


@click.command(
    cls=BeltCommand,
    examples="""\
  beltkit mime report.pdf
  beltkit -q mime archive.tar.gz""",
)
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def mime(app: AppContext, paths: tuple[str, ...]) -> None:
    """Guess the MIME type of PATHS from their names."""
    from beltkit.services.tools import ToolService

    app.emit(ToolService(app.settings).mime(paths))
