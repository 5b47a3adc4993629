"""Scoped temporary files and directories with guaranteed cleanup.

INVARIANT: create → register cleanup → return. A path is only handed
to the caller once its removal is registered, and a failed creation
registers nothing.

Cleanup runs at most once per resource, from whichever fires first:

- leaving a ``with acquire_temp(...)`` block, or an explicit ``cleanup()``
- the registry's exit handler (``atexit``), which SIGTERM/SIGHUP reach by
  being turned into ``SystemExit``

Removing an entry that is already gone is not an error.
"""

from __future__ import annotations

import atexit
import itertools
import logging
import os
import shutil
import signal
import tempfile
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from types import FrameType, TracebackType

from beltkit.domain.errors import ResourceCreationError
from beltkit.domain.ids import generate_identifier
from beltkit.domain.types import TempKind, TempState

logger = logging.getLogger(__name__)

EXIT_SIGNALS: tuple[int, ...] = tuple(
    getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name)
)


# ---------------------------------------------------------------------------
# Cleanup registry
# ---------------------------------------------------------------------------


class CleanupRegistry:
    """Process-wide list of cleanup actions run from one exit handler.

    Registration is lock-guarded so concurrent acquisitions never lose an
    action. Each action gets its own handle; nothing overwrites anything.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._actions: dict[int, Callable[[], None]] = {}
        self._handles = itertools.count(1)
        self._installed = False

    def register(self, action: Callable[[], None]) -> int:
        """Add *action*; returns a handle for :meth:`unregister`."""
        with self._lock:
            handle = next(self._handles)
            self._actions[handle] = action
        return handle

    def unregister(self, handle: int) -> bool:
        """Drop a pending action. Returns False if it was not pending."""
        with self._lock:
            return self._actions.pop(handle, None) is not None

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._actions)

    def run_all(self) -> int:
        """Run every pending action once, most recent first.

        A failing action is logged and does not stop the rest.
        Returns the number of actions run.
        """
        with self._lock:
            actions = list(self._actions.items())
            self._actions.clear()

        for handle, action in reversed(actions):
            try:
                action()
            except Exception:
                logger.warning("Cleanup action %d failed", handle, exc_info=True)
        return len(actions)

    def install(self, signals: Iterable[int] = EXIT_SIGNALS) -> None:
        """Hook :meth:`run_all` into process exit. Safe to call repeatedly.

        Signal handlers are only set from the main thread, and only where
        the current disposition is the default one.
        """
        with self._lock:
            if self._installed:
                return
            self._installed = True

        atexit.register(self.run_all)
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on main thread; relying on atexit only")
            return
        for signum in signals:
            if signal.getsignal(signum) is not signal.SIG_DFL:
                logger.debug("Keeping existing handler for signal %d", signum)
                continue
            signal.signal(signum, _exit_on_signal)


def _exit_on_signal(signum: int, _frame: FrameType | None) -> None:
    # SystemExit unwinds normally, so atexit handlers still run.
    raise SystemExit(128 + signum)


_default_registry: CleanupRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> CleanupRegistry:
    """The installed process-wide registry (created on first use)."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = CleanupRegistry()
            _default_registry.install()
        return _default_registry


# ---------------------------------------------------------------------------
# Scoped resource
# ---------------------------------------------------------------------------


def remove_path(path: Path, kind: TempKind | str) -> bool:
    """Delete a temp entry. Returns False if it was already absent."""
    try:
        if kind == TempKind.DIRECTORY:
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        return False
    return True


@dataclass
class ScopedTempResource:
    """A temp file or directory owned by the scope that acquired it.

    Attributes:
        path: Location of the entry; exists until cleanup runs.
        kind: File or directory.
        cleanup_registered: Whether an exit-time removal is installed.
        state: ``CREATED`` until cleanup, then ``REMOVED`` for good.
    """

    path: Path
    kind: TempKind
    cleanup_registered: bool = False
    state: TempState = TempState.CREATED
    _registry: CleanupRegistry | None = field(default=None, repr=False)
    _handle: int | None = field(default=None, repr=False)

    def cleanup(self) -> None:
        """Remove the entry. Later calls are no-ops."""
        if self.state is TempState.REMOVED:
            return
        removed = remove_path(self.path, self.kind)
        self.state = TempState.REMOVED
        if self._registry is not None and self._handle is not None:
            self._registry.unregister(self._handle)
        self.cleanup_registered = False
        logger.debug("Temp %s cleaned up: %s (present=%s)", self.kind, self.path, removed)

    def __enter__(self) -> ScopedTempResource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()


def acquire_temp(
    kind: TempKind | str = TempKind.FILE,
    name: str | None = None,
    *,
    directory: Path | str | None = None,
    registry: CleanupRegistry | None = None,
) -> ScopedTempResource:
    """Create a uniquely named temp entry and register its removal.

    Args:
        kind: Create a file or a directory; plain ``"file"`` /
            ``"directory"`` strings are accepted.
        name: Base name; a random identifier is used when omitted. The OS
            appends its own uniqueness suffix, so the final name contains
            *name* rather than equalling it.
        directory: Parent directory (default: the OS temp directory).
        registry: Registry to hold the exit-time removal (default: the
            installed process-wide one).

    Raises:
        ResourceCreationError: The OS could not create the entry.
        EntropySourceUnavailable: *name* was omitted and no random
            identifier could be generated.
        ValueError: *kind* names neither a file nor a directory.
    """
    kind = TempKind(kind)
    base = name or generate_identifier()
    prefix = f"{base}."
    parent = None if directory is None else str(directory)

    try:
        if kind is TempKind.DIRECTORY:
            path = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))
        else:
            fd, raw = tempfile.mkstemp(prefix=prefix, dir=parent)
            os.close(fd)
            path = Path(raw)
    except OSError as exc:
        msg = f"Could not create temp {kind} {prefix!r}: {exc}"
        raise ResourceCreationError(msg) from exc

    target = registry if registry is not None else default_registry()
    resource = ScopedTempResource(path=path, kind=kind, _registry=target)
    resource._handle = target.register(resource.cleanup)
    resource.cleanup_registered = True
    logger.debug("Temp %s created: %s", kind, path)
    return resource
