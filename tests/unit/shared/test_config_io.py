"""Tests for config file I/O helpers."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from srcfetch.shared.config_io import (
    create_default_config_file,
    get_global_config_path,
    get_local_config_path,
    load_config_data,
)


class TestGetGlobalConfigPath:
    def test_uses_xdg_config_home_when_set(self) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": "/custom/config"}):
            result = get_global_config_path()

        assert result == Path("/custom/config/srcfetch/config.toml")

    def test_defaults_to_home_config_when_xdg_not_set(self) -> None:
        with (
            patch.dict(os.environ, {}, clear=True),
            patch("srcfetch.shared.config_io.Path.home") as mock_home,
        ):
            mock_home.return_value = Path("/home/user")
            result = get_global_config_path()

        assert result == Path("/home/user/.config/srcfetch/config.toml")

    @patch("srcfetch.shared.config_io.platform.system")
    def test_uses_appdata_on_windows(self, mock_system: object) -> None:
        mock_system.return_value = "Windows"  # type: ignore[attr-defined]
        with patch.dict(os.environ, {"APPDATA": "C:\\Users\\Test\\AppData\\Roaming"}):
            result = get_global_config_path()

        assert result == Path("C:\\Users\\Test\\AppData\\Roaming/srcfetch/config.toml")


def test_local_config_path(tmp_path: Path) -> None:
    assert get_local_config_path(tmp_path) == tmp_path / ".srcfetch" / "config.toml"


def test_load_config_data_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config_data(tmp_path / "config.toml")


def test_load_config_data_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("not = [valid")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_config_data(path)


def test_create_default_config_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / ".srcfetch" / "config.toml"

    create_default_config_file(path)

    assert load_config_data(path) == {"exec": {"debug": False}, "vcs": {"default": "git"}}
