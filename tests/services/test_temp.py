"""Tests for TempService."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from beltkit.config.models import TempConfig
from beltkit.config.settings import BeltSettings
from beltkit.domain.types import TempKind
from beltkit.infrastructure.tempfiles import CleanupRegistry
from beltkit.services import temp as temp_module
from beltkit.services.temp import TEMP_ENV_VAR, TempService, exit_status

PY = sys.executable


def _svc(tmp_path: Path, **temp: object) -> TempService:
    env = {"HOME": str(tmp_path / "home"), "PATH": "/usr/bin:/bin"}
    return TempService(BeltSettings(env=env, temp=TempConfig(**temp)))


class TestTempRoot:
    def test_default_is_os_temp(self, tmp_path: Path) -> None:
        assert _svc(tmp_path).temp_root() is None

    def test_explicit_root(self, tmp_path: Path) -> None:
        assert _svc(tmp_path, root=tmp_path / "r").temp_root() == tmp_path / "r"

    def test_temp_home(self, tmp_path: Path) -> None:
        root = _svc(tmp_path, use_temp_home=True).temp_root()
        assert root == tmp_path / "home" / ".temp"

    def test_explicit_root_wins(self, tmp_path: Path) -> None:
        svc = _svc(tmp_path, root=tmp_path / "r", use_temp_home=True)
        assert svc.temp_root() == tmp_path / "r"


class TestRun:
    def test_file_exists_during_command(
        self, tmp_path: Path, registry: CleanupRegistry
    ) -> None:
        code = f"import os,sys; sys.exit(0 if os.path.isfile(os.environ['{TEMP_ENV_VAR}']) else 3)"
        result = _svc(tmp_path).run([PY, "-c", code], registry=registry)
        assert result.ok, result.error
        assert result.data["returncode"] == 0
        assert result.data["removed"] is True
        assert not Path(result.data["path"]).exists()
        assert registry.pending == 0

    def test_placeholder_substituted(
        self, tmp_path: Path, registry: CleanupRegistry, capfd: pytest.CaptureFixture[str]
    ) -> None:
        code = "import sys; print(sys.argv[1])"
        result = _svc(tmp_path).run(
            [PY, "-c", code, "{}"], kind=TempKind.DIRECTORY, registry=registry
        )
        assert capfd.readouterr().out.strip() == result.data["path"]
        assert result.data["kind"] == "directory"

    def test_name_and_root(self, tmp_path: Path, registry: CleanupRegistry) -> None:
        svc = _svc(tmp_path, root=tmp_path / "scratch")
        result = svc.run([PY, "-c", "pass"], name="build123", registry=registry)
        path = Path(result.data["path"])
        assert path.parent == tmp_path / "scratch"
        assert "build123" in path.name

    def test_default_name_from_settings(self, tmp_path: Path, registry: CleanupRegistry) -> None:
        svc = _svc(tmp_path, root=tmp_path, default_name="job")
        result = svc.run([PY, "-c", "pass"], registry=registry)
        assert Path(result.data["path"]).name.startswith("job.")

    def test_temp_home_created(self, tmp_path: Path, registry: CleanupRegistry) -> None:
        result = _svc(tmp_path, use_temp_home=True).run([PY, "-c", "pass"], registry=registry)
        assert result.ok
        assert (tmp_path / "home" / ".temp").is_dir()

    def test_command_failure(self, tmp_path: Path, registry: CleanupRegistry) -> None:
        result = _svc(tmp_path).run([PY, "-c", "raise SystemExit(4)"], registry=registry)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "COMMAND_FAILED"
        assert result.error.detail["returncode"] == 4
        assert result.error.detail["removed"] is True
        assert result.error.exit_code == 4
        assert result.error.message.endswith("exited with status 4")

    def test_missing_executable(self, tmp_path: Path, registry: CleanupRegistry) -> None:
        result = _svc(tmp_path).run(["/nonexistent/beltkit-nope"], registry=registry)
        assert result.error is not None
        assert result.error.code == "COMMAND_FAILED"
        assert result.error.detail["returncode"] == 127
        assert result.error.exit_code == 127
        assert not Path(result.error.detail["path"]).exists()

    def test_empty_command(self, tmp_path: Path) -> None:
        result = _svc(tmp_path).run([])
        assert result.error is not None
        assert result.error.code == "NO_COMMAND"

    def test_unusable_root(self, tmp_path: Path, registry: CleanupRegistry) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x")
        result = _svc(tmp_path, root=blocker / "sub").run([PY, "-c", "pass"], registry=registry)
        assert result.error is not None
        assert result.error.code == "RESOURCE_CREATION_FAILED"
        assert registry.pending == 0

    def test_creation_failure(
        self, tmp_path: Path, registry: CleanupRegistry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from beltkit.domain.errors import ResourceCreationError

        def refuse(*_args: object, **_kwargs: object) -> None:
            raise ResourceCreationError("disk full")

        monkeypatch.setattr(temp_module, "acquire_temp", refuse)
        result = _svc(tmp_path).run([PY, "-c", "pass"], registry=registry)
        assert result.error is not None
        assert result.error.code == "RESOURCE_CREATION_FAILED"
        assert result.error.message == "disk full"


class TestChildStreams:
    def test_output_is_not_captured(
        self, tmp_path: Path, registry: CleanupRegistry, capfd: pytest.CaptureFixture[str]
    ) -> None:
        code = "import sys; print('to-out'); print('to-err', file=sys.stderr)"
        result = _svc(tmp_path).run([PY, "-c", code], registry=registry)
        captured = capfd.readouterr()
        assert "to-out" in captured.out
        assert "to-err" in captured.err
        assert "stdout" not in result.data
        assert "stderr" not in result.data

    def test_stderr_shown_when_command_fails(
        self, tmp_path: Path, registry: CleanupRegistry, capfd: pytest.CaptureFixture[str]
    ) -> None:
        code = "import sys; sys.exit('bad input')"
        result = _svc(tmp_path).run([PY, "-c", code], registry=registry)
        assert result.error is not None
        assert "bad input" in capfd.readouterr().err

    def test_env_var_is_not_a_settings_field(self) -> None:
        prefix = BeltSettings.model_config["env_prefix"]
        assert TEMP_ENV_VAR.startswith(prefix)
        field = TEMP_ENV_VAR.removeprefix(prefix).lower()
        assert field not in BeltSettings.model_fields
        assert field.split("__")[0] not in BeltSettings.model_fields


class TestExitStatus:
    @pytest.mark.parametrize(("returncode", "expected"), [(0, 0), (3, 3), (-15, 143), (-9, 137)])
    def test_mapping(self, returncode: int, expected: int) -> None:
        assert exit_status(returncode) == expected

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_killed_child(self, tmp_path: Path, registry: CleanupRegistry) -> None:
        code = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
        result = _svc(tmp_path).run([PY, "-c", code], registry=registry)
        assert result.error is not None
        assert result.error.detail["returncode"] == -9
        assert result.error.exit_code == 137
        assert result.error.detail["removed"] is True
