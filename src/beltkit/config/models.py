"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, beltkit.toml only overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class LogConfig(BaseModel):
    """[log] section.

    ``file`` wins over ``use_log_home``, which writes ``beltkit.log``
    under the resolved log home.
    """

    model_config = {"frozen": True}

    file: Path | None = None
    use_log_home: bool = False


class TempConfig(BaseModel):
    """[temp] section.

    ``root`` wins over ``use_temp_home``; with neither set, temp entries
    go to the OS temp directory.
    """

    model_config = {"frozen": True}

    root: Path | None = None
    use_temp_home: bool = False
    default_name: str | None = None
