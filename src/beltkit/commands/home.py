"""Command: resolve standard home directories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beltkit.commands._base import BeltCommand
from beltkit.domain.types import HomeKind

if TYPE_CHECKING:
    from beltkit.commands._context import AppContext


@click.command(
    cls=BeltCommand,
    examples="""\
  beltkit home config
  beltkit -q home cache
  beltkit home --all
  beltkit --json home data""",
)
@click.argument("kind", required=False, type=click.Choice([k.value for k in HomeKind]))
@click.option("--all", "show_all", is_flag=True, help="Resolve every kind.")
@click.pass_obj
def home(app: AppContext, kind: str | None, show_all: bool) -> None:
    """Print the directory for KIND (log, temp, data, cache, config, runtime)."""
    from beltkit.services.homes import HomeService

    svc = HomeService(app.settings)
    if show_all or kind is None:
        app.emit(svc.resolve_all())
    else:
        app.emit(svc.resolve(HomeKind(kind)))
