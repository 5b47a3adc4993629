"""Random identifiers for naming temporary resources.

An identifier is 16 bytes from the OS secure random source rendered as
32 lowercase hex characters. Uniqueness is probabilistic: nothing keeps
track of identifiers already handed out.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable

from beltkit.domain.errors import EntropySourceUnavailable

IDENTIFIER_BYTES = 16
IDENTIFIER_PATTERN: re.Pattern[str] = re.compile(r"^[0-9a-f]{32}$")


def generate_identifier(randbytes: Callable[[int], bytes] = os.urandom) -> str:
    """Return a fresh 32-char lowercase hex identifier.

    Raises:
        EntropySourceUnavailable: *randbytes* failed or returned short.
            There is no fallback to a weaker generator.
    """
    try:
        raw = randbytes(IDENTIFIER_BYTES)
    except (OSError, NotImplementedError) as exc:
        msg = f"Secure random source unavailable: {exc}"
        raise EntropySourceUnavailable(msg) from exc

    if len(raw) != IDENTIFIER_BYTES:
        msg = f"Secure random source returned {len(raw)} bytes, expected {IDENTIFIER_BYTES}"
        raise EntropySourceUnavailable(msg)
    return raw.hex()


def is_identifier(value: str) -> bool:
    """Check whether *value* has the identifier shape."""
    return IDENTIFIER_PATTERN.match(value) is not None
