"""Clock reads and duration arithmetic."""

from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta


def now_epoch() -> float:
    """Current time as seconds since the epoch."""
    return time.time()


def now_iso() -> str:
    """Current UTC time as ISO 8601."""
    return datetime.now(UTC).isoformat()


def today_iso() -> str:
    """Today's date as YYYY-MM-DD."""
    return datetime.now(UTC).strftime("%Y-%m-%d")


def elapsed_seconds(start: float, end: float | None = None) -> float:
    """Seconds between epoch timestamps *start* and *end* (default: now)."""
    stop = now_epoch() if end is None else end
    return stop - start


def add_seconds(iso: str, seconds: float) -> str:
    """Shift an ISO 8601 timestamp by *seconds* (negative moves back)."""
    moment = datetime.fromisoformat(iso)
    return (moment + timedelta(seconds=seconds)).isoformat()


def format_duration(seconds: float) -> str:
    """Render a duration compactly: ``7s``, ``2m05s``, ``1h02m03s``.

    Fractions are truncated; negative durations keep a leading ``-``.
    """
    sign = "-" if seconds < 0 else ""
    total = int(abs(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes:02d}m{secs:02d}s"
    if minutes:
        return f"{sign}{minutes}m{secs:02d}s"
    return f"{sign}{secs}s"
