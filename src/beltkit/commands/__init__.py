"""Subcommand modules for beltkit.

register_commands() imports lazily so ``beltkit --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root CLI group."""
    from beltkit.commands.home import home
    from beltkit.commands.ident import ident
    from beltkit.commands.mime import mime
    from beltkit.commands.split import split
    from beltkit.commands.sum_cmd import sum_cmd
    from beltkit.commands.which import which
    from beltkit.commands.with_temp import with_temp

    cli.add_command(home)
    cli.add_command(ident)
    cli.add_command(split)
    cli.add_command(which)
    cli.add_command(mime)
    cli.add_command(sum_cmd)
    cli.add_command(with_temp)
