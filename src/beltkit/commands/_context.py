"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from beltkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from beltkit.config.settings import BeltSettings
    from beltkit.services.result import ServiceResult

LOG_FILENAME = "beltkit.log"


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BeltSettings) -> None:
        self.settings = settings

        from beltkit.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            log_file=self.log_file(),
        )

    def log_file(self) -> Path | None:
        """Log file from ``[log]``: explicit file, or one under the log home."""
        cfg = self.settings.log
        if cfg.file is not None:
            return cfg.file
        if cfg.use_log_home:
            from beltkit.domain.homes import resolve_home
            from beltkit.domain.types import HomeKind

            return Path(resolve_home(HomeKind.LOG, self.settings.env)) / LOG_FILENAME
        return None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute captured output.
        * Failure: writes to stderr, exits with the error's ``exit_code``
          (1 unless a wrapped child process reported its own status).
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(result.error.exit_code if result.error else 1)
