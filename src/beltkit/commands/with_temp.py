"""Command: run a command with a scoped temp file or directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beltkit.commands._base import BeltCommand
from beltkit.domain.types import TempKind

if TYPE_CHECKING:
    from beltkit.commands._context import AppContext


@click.command(
    "with-temp",
    cls=BeltCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  beltkit with-temp -- sh -c 'date > "$BELTKIT_TEMP_PATH"; cat "$BELTKIT_TEMP_PATH"'
  beltkit with-temp --dir --name build -- make -C src OUT={}""",
)
@click.option("--dir", "as_dir", is_flag=True, help="Create a directory instead of a file.")
@click.option("--name", default=None, help="Base name (default: random identifier).")
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def with_temp(app: AppContext, as_dir: bool, name: str | None, command: tuple[str, ...]) -> None:
    """Run COMMAND with a temp entry that is removed afterwards.

    The path is exported as BELTKIT_TEMP_PATH and replaces {} in arguments.
    """
    from beltkit.services.temp import TempService

    kind = TempKind.DIRECTORY if as_dir else TempKind.FILE
    app.emit(TempService(app.settings).run(command, kind=kind, name=name))
