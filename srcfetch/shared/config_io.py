"""Configuration I/O utilities for reading and writing TOML config files."""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_NAME = ".srcfetch"
CONFIG_FILE_NAME = "config.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/srcfetch/config.toml or ~/.config/srcfetch/config.toml
    - Windows: %APPDATA%/srcfetch/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "srcfetch" / CONFIG_FILE_NAME
        return Path.home() / ".config" / "srcfetch" / CONFIG_FILE_NAME
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "srcfetch" / CONFIG_FILE_NAME
        return Path.home() / ".config" / "srcfetch" / CONFIG_FILE_NAME


def get_local_config_path(project_dir: Path) -> Path:
    """Get the path to the project-local config file (may not exist)."""
    return project_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def create_default_config_file(path: Path) -> None:
    """Create a default config.toml file with comments.

    Args:
        path: Destination path for config.toml
    """
    template = """\
# srcfetch configuration
# Created by: srcfetch config init

[exec]
# Print every external command and its working directory before running it
debug = false

[vcs]
# VCS used when a command does not pass --vcs: git, hg or svn
default = "git"
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(template)
