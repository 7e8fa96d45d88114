"""Tests for RobotSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from toyrobot.config.settings import RobotSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RobotSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert (settings.grid.width, settings.grid.height) == (5, 5)
        assert settings.output.echo_commands is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RobotSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_discovered_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "toyrobot.toml"
        toml.write_text("[grid]\nwidth = 7\n")
        settings = RobotSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.grid.width == 7
        assert settings.grid.height == 5

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "conf" / "robot.toml"
        custom.parent.mkdir()
        custom.write_text("[output]\necho_commands = true\n")
        settings = RobotSettings.from_cli(config_path=str(custom))
        assert settings.output.echo_commands is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "toyrobot.toml").write_text("[grid\nwidth = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RobotSettings.from_cli(start=tmp_path)

    def test_out_of_range_grid(self, tmp_path: Path) -> None:
        (tmp_path / "toyrobot.toml").write_text("[grid]\nwidth = 0\n")
        with pytest.raises(click.ClickException, match="Invalid settings in .*toyrobot.toml"):
            RobotSettings.from_cli(start=tmp_path)

    def test_out_of_range_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOYROBOT_GRID__HEIGHT", "0")
        with pytest.raises(click.ClickException, match="environment"):
            RobotSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "toyrobot.toml").write_text("[grid]\nwidth = 7\nheight = 7\n")
        monkeypatch.setenv("TOYROBOT_GRID__WIDTH", "9")
        settings = RobotSettings.from_cli(start=tmp_path)
        assert settings.grid.width == 9

    def test_cli_dimensions_override_one_axis(self, tmp_path: Path) -> None:
        (tmp_path / "toyrobot.toml").write_text("[grid]\nwidth = 7\nheight = 3\n")
        settings = RobotSettings.from_cli(start=tmp_path, width=12)
        assert (settings.grid.width, settings.grid.height) == (12, 3)

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = RobotSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True
