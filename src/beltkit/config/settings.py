"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BELTKIT_*`` prefix
  3. TOML file    — ``beltkit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The environment snapshot handed to the home resolver travels on the
settings object (``env``) so services never read ``os.environ`` directly.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, EnvSettingsSource, PydanticBaseSettingsSource

from beltkit.config.discovery import find_config
from beltkit.config.models import LogConfig, TempConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``beltkit.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class ProcessEnvSettingsSource(EnvSettingsSource):
    """``BELTKIT_*`` env source that never populates the ``env`` snapshot.

    ``env`` is the environment itself; ``BELTKIT_ENV`` or
    ``BELTKIT_ENV__HOME`` must not be decoded into it.
    """

    def prepare_field_value(
        self, field_name: str, field: Any, value: Any, value_is_complex: bool
    ) -> Any:
        if field_name == "env":
            return None
        return super().prepare_field_value(field_name, field, value, value_is_complex)


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class BeltSettings(BaseSettings):
    """Settings for the beltkit CLI and services.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        env: Variable mapping used for home resolution.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BELTKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    env: dict[str, str] = Field(default_factory=lambda: dict(os.environ), repr=False)

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    log: LogConfig = Field(default_factory=LogConfig)
    temp: TempConfig = Field(default_factory=TempConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            ProcessEnvSettingsSource(settings_cls),
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> BeltSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers ``beltkit.toml``
        by walking up from *start* (default: cwd). CLI flags override
        everything else.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
