"""Tests for BeltSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from beltkit.config.settings import BeltSettings


@pytest.mark.usefixtures("isolated")
class TestBeltSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = BeltSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.temp.root is None
        assert settings.log.use_log_home is False

    def test_env_snapshot_defaults_to_process(self, isolated: Path) -> None:
        settings = BeltSettings.from_cli()
        assert settings.env["HOME"] == str(isolated)

    def test_injected_env(self) -> None:
        settings = BeltSettings.from_cli(env={"HOME": "/x"})
        assert settings.env == {"HOME": "/x"}

    def test_frozen(self) -> None:
        settings = BeltSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


@pytest.mark.usefixtures("isolated")
class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "beltkit.toml").write_text(
            '[temp]\nroot = "/scratch"\n[log]\nuse_log_home = true\n'
        )
        settings = BeltSettings.from_cli(start=tmp_path)
        assert settings.temp.root == Path("/scratch")
        assert settings.temp.use_temp_home is False  # default preserved
        assert settings.log.use_log_home is True
        assert settings.config_path == tmp_path / "beltkit.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text('[temp]\ndefault_name = "job"\n')
        settings = BeltSettings.from_cli(config_path=str(custom))
        assert settings.temp.default_name == "job"
        assert settings.config_path == custom

    def test_explicit_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = BeltSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "beltkit.toml").write_text("[temp\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BeltSettings.from_cli(start=tmp_path)


@pytest.mark.usefixtures("isolated")
class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "beltkit.toml").write_text('[temp]\nroot = "/from-toml"\n')
        monkeypatch.setenv("BELTKIT_TEMP__ROOT", "/from-env")
        settings = BeltSettings.from_cli(start=tmp_path)
        assert settings.temp.root == Path("/from-env")

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "beltkit.toml").write_text("quiet = true\n")
        settings = BeltSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_toml_top_level_flag(self, tmp_path: Path) -> None:
        (tmp_path / "beltkit.toml").write_text("verbose = true\n")
        settings = BeltSettings.from_cli(start=tmp_path)
        assert settings.verbose is True


@pytest.mark.usefixtures("isolated")
class TestEnvSnapshotField:
    def test_prefixed_env_var_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BELTKIT_ENV", "not-json")
        monkeypatch.setenv("BELTKIT_ENV__HOME", "/elsewhere")
        settings = BeltSettings.from_cli()
        assert settings.env["BELTKIT_ENV"] == "not-json"
        assert settings.env["HOME"] != "/elsewhere"

    def test_temp_path_export_does_not_clash(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        from beltkit.services.temp import TEMP_ENV_VAR

        monkeypatch.setenv(TEMP_ENV_VAR, str(tmp_path / "abc.xyz"))
        settings = BeltSettings.from_cli()
        assert settings.temp.root is None
        assert settings.env[TEMP_ENV_VAR] == str(tmp_path / "abc.xyz")
