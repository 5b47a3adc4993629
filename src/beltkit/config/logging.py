"""structlog configuration for beltkit.

Output modes on stderr:
- Human (default): colored console lines when stderr is a TTY
- JSON (--log-json): one JSON object per line

An optional log file always receives JSON lines, at DEBUG when verbose.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

LOGGER_NAME = "beltkit"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _formatter(
    renderer: structlog.types.Processor, shared: list[structlog.types.Processor]
) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    log_file: Path | None = None,
) -> None:
    """Route stdlib and structlog records through one processor chain.

    Args:
        verbose: Enable DEBUG-level output for ``beltkit.*``. When False,
            only WARNING+.
        log_json: Use JSON renderer on stderr instead of console renderer.
        log_file: Also append JSON lines to this file (parents created).

    Calling again replaces previously installed handlers.
    """
    belt_level = logging.DEBUG if verbose else logging.WARNING
    shared = _shared_processors()

    structlog.configure(
        processors=[
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(_formatter(renderer, shared))
    handlers: list[logging.Handler] = [stderr_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer(), shared))
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    for old in root_logger.handlers:
        if isinstance(old, logging.FileHandler):
            old.close()
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(belt_level)
