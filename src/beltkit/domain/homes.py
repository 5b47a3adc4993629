"""Standard home-directory resolution.

Each :class:`HomeKind` resolves through three layers, first non-empty wins:

1. beltkit override — ``LOG_HOME``, ``CONFIG_HOME``, ...
2. desktop standard — ``XDG_CONFIG_HOME``, ``XDG_CACHE_HOME``, ...
3. fallback — ``$HOME/.config``, ``$HOME/.local/share``, ...

INVARIANT: Resolution only reads. The environment mapping is never
written back, so two calls may disagree if the environment changed
between them.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from beltkit.domain.types import HomeKind

HOME_VAR = "HOME"

# Kind-specific override variables.
OVERRIDE_VARS: dict[HomeKind, str] = {
    HomeKind.LOG: "LOG_HOME",
    HomeKind.TEMP: "TEMP_HOME",
    HomeKind.DATA: "DATA_HOME",
    HomeKind.CACHE: "CACHE_HOME",
    HomeKind.CONFIG: "CONFIG_HOME",
    HomeKind.RUNTIME: "RUNTIME_HOME",
}

# Desktop-standard variables. Temp has none.
STANDARD_VARS: dict[HomeKind, str] = {
    HomeKind.LOG: "XDG_LOG_HOME",
    HomeKind.DATA: "XDG_DATA_HOME",
    HomeKind.CACHE: "XDG_CACHE_HOME",
    HomeKind.CONFIG: "XDG_CONFIG_HOME",
    HomeKind.RUNTIME: "XDG_RUNTIME_HOME",
}

# Path under $HOME used when no variable is set.
FALLBACK_SUFFIXES: dict[HomeKind, str] = {
    HomeKind.LOG: ".log",
    HomeKind.TEMP: ".temp",
    HomeKind.DATA: ".local/share",
    HomeKind.CACHE: ".cache",
    HomeKind.CONFIG: ".config",
    HomeKind.RUNTIME: ".runtime",
}

FALLBACK_SOURCE = "fallback"


def home_sources(kind: HomeKind) -> list[str]:
    """Variable names consulted for *kind*, in precedence order."""
    names = [OVERRIDE_VARS[kind]]
    standard = STANDARD_VARS.get(kind)
    if standard is not None:
        names.append(standard)
    return names


def home_is_degenerate(env: Mapping[str, str] | None = None) -> bool:
    """True when ``HOME`` is unset or empty in *env*."""
    source = os.environ if env is None else env
    return not source.get(HOME_VAR, "")


def resolve_home_with_source(
    kind: HomeKind, env: Mapping[str, str] | None = None
) -> tuple[str, str]:
    """Resolve *kind* and report which layer produced the answer.

    Returns ``(path, source)`` where *source* is the winning variable
    name or ``"fallback"``.
    """
    source = os.environ if env is None else env
    for name in home_sources(kind):
        value = source.get(name, "")
        if value:
            return value, name

    home = source.get(HOME_VAR, "")
    return f"{home}/{FALLBACK_SUFFIXES[kind]}", FALLBACK_SOURCE


def resolve_home(kind: HomeKind, env: Mapping[str, str] | None = None) -> str:
    """Resolve the directory path for *kind*.

    *env* maps variable names to values; the live process environment is
    read when it is omitted. Never fails: with ``HOME`` unset the fallback
    is still built (``/.config``), and callers decide whether it is usable.
    """
    path, _source = resolve_home_with_source(kind, env)
    return path


def resolve_all_homes(env: Mapping[str, str] | None = None) -> dict[HomeKind, str]:
    """Resolve every :class:`HomeKind` against the same *env* snapshot."""
    snapshot = dict(os.environ if env is None else env)
    return {kind: resolve_home(kind, snapshot) for kind in HomeKind}
