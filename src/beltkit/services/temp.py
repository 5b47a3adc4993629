"""TempService — run a command inside the lifetime of a temp resource.

Pipeline: ACQUIRE → RUN → CLEANUP → REPORT

The temp entry is removed when the command finishes, and by the exit
handler if beltkit itself is terminated first.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from beltkit.domain.errors import BeltError, ResourceCreationError
from beltkit.domain.homes import resolve_home
from beltkit.domain.types import HomeKind, TempKind
from beltkit.infrastructure.tempfiles import CleanupRegistry, acquire_temp
from beltkit.services.base import BaseService
from beltkit.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

# Not a settings field name, so nested beltkit calls ignore it.
TEMP_ENV_VAR = "BELTKIT_TEMP_PATH"
PLACEHOLDER = "{}"
NOT_FOUND_EXIT = 127
NOT_EXECUTABLE_EXIT = 126
SIGNAL_EXIT_BASE = 128


def exit_status(returncode: int) -> int:
    """Shell-style status: a child killed by signal N reports 128+N."""
    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


class TempService(BaseService):
    """Acquires scoped temp resources according to the ``[temp]`` settings."""

    def temp_root(self) -> Path | None:
        """Parent directory for new temp entries (None: OS default)."""
        cfg = self.settings.temp
        if cfg.root is not None:
            return cfg.root
        if cfg.use_temp_home:
            return Path(resolve_home(HomeKind.TEMP, self.settings.env))
        return None

    def _ensure_root(self) -> Path | None:
        root = self.temp_root()
        if root is None:
            return None
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Cannot create temp root {root}: {exc}"
            raise ResourceCreationError(msg) from exc
        return root

    def run(
        self,
        command: Sequence[str],
        *,
        kind: TempKind = TempKind.FILE,
        name: str | None = None,
        registry: CleanupRegistry | None = None,
    ) -> ServiceResult:
        """Run *command* with a temp entry available, then remove it.

        The path is exported as ``BELTKIT_TEMP_PATH`` and substituted for
        every ``{}`` in the command's arguments. The command inherits
        beltkit's stdin, stdout and stderr, so its output streams live.
        """
        op = "with_temp"
        if not command:
            return ServiceResult.failure(op, "NO_COMMAND", "No command given")

        try:
            root = self._ensure_root()
            resource = acquire_temp(
                kind,
                name or self.settings.temp.default_name,
                directory=root,
                registry=registry,
            )
        except BeltError as exc:
            return ServiceResult.failure(op, exc.code, str(exc))

        message: str | None = None
        with resource:
            path = str(resource.path)
            argv = [arg.replace(PLACEHOLDER, path) for arg in command]
            env = {**self.settings.env, TEMP_ENV_VAR: path}
            logger.debug("Running %s with %s=%s", argv[0], TEMP_ENV_VAR, path)
            try:
                returncode = subprocess.run(argv, env=env, check=False).returncode
            except FileNotFoundError as exc:
                returncode, message = NOT_FOUND_EXIT, f"Cannot run {argv[0]}: {exc.strerror}"
            except OSError as exc:
                returncode, message = NOT_EXECUTABLE_EXIT, f"Cannot run {argv[0]}: {exc}"

        data = {
            "path": path,
            "kind": str(kind),
            "returncode": returncode,
            "removed": not resource.path.exists(),
        }
        if returncode != 0:
            status = exit_status(returncode)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="COMMAND_FAILED",
                    message=message or f"{argv[0]} exited with status {status}",
                    detail=data,
                    exit_code=status,
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)
