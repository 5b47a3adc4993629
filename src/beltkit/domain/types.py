"""Enumerations shared across beltkit."""

from __future__ import annotations

from enum import StrEnum


class HomeKind(StrEnum):
    """Purposes a standard home directory can serve."""

    LOG = "log"
    TEMP = "temp"
    DATA = "data"
    CACHE = "cache"
    CONFIG = "config"
    RUNTIME = "runtime"


class TempKind(StrEnum):
    """Filesystem entry created by a scoped temp resource."""

    FILE = "file"
    DIRECTORY = "directory"


class TempState(StrEnum):
    """Lifecycle of a scoped temp resource. REMOVED is terminal."""

    CREATED = "created"
    REMOVED = "removed"
