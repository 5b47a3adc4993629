"""Executable lookup and MIME type detection."""

from __future__ import annotations

import mimetypes
import shutil
from pathlib import Path

DEFAULT_MIME_TYPE = "application/octet-stream"


def which(name: str, path: str | None = None) -> str | None:
    """Full path of executable *name* on ``PATH`` (or *path*), else None."""
    return shutil.which(name, path=path)


def command_exists(name: str, path: str | None = None) -> bool:
    """Whether executable *name* can be found."""
    return which(name, path=path) is not None


def mime_type(path: Path | str) -> str:
    """MIME type guessed from the file name.

    Compressed files report their encoding (``application/gzip``) rather
    than the wrapped type. Unknown extensions fall back to
    ``application/octet-stream``.
    """
    guessed, encoding = mimetypes.guess_type(str(path), strict=False)
    if encoding == "gzip":
        return "application/gzip"
    if encoding is not None:
        return f"application/x-{encoding}"
    return guessed or DEFAULT_MIME_TYPE
