"""Shared pytest fixtures for beltkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from beltkit.domain.homes import HOME_VAR, OVERRIDE_VARS, STANDARD_VARS
from beltkit.infrastructure.tempfiles import CleanupRegistry

HOME_ENV_VARS = [HOME_VAR, *OVERRIDE_VARS.values(), *STANDARD_VARS.values()]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handlers installed by configure_logging (the CLI calls it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    belt = logging.getLogger("beltkit")
    belt_level = belt.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers and isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
    belt.setLevel(belt_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> Generator[CleanupRegistry]:
    """A private cleanup registry, drained after the test."""
    reg = CleanupRegistry()
    yield reg
    reg.run_all()


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in a temp cwd with no home overrides and HOME=<tmp>/home.

    Also clears BELTKIT_* variables so no outside config leaks in.
    """
    home = tmp_path / "home"
    home.mkdir()
    for name in HOME_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in (
        "BELTKIT_CONFIG",
        "BELTKIT_TEMP_PATH",
        "BELTKIT_TEMP__ROOT",
        "BELTKIT_TEMP__USE_TEMP_HOME",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(HOME_VAR, str(home))
    monkeypatch.chdir(tmp_path)
    return home
