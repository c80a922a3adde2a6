"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.helpers import create_git_repo


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the user's global srcfetch config and git prompts."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")
    yield


@pytest.fixture
def upstream_repo(tmp_path: Path) -> Path:
    """A git repository acting as the remote that checkouts are cloned from."""
    return create_git_repo(
        tmp_path / "upstream",
        files={"README.md": "# upstream\n", "src/lib.py": "VALUE = 1\n"},
    )


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Empty directory checkouts are created in."""
    work = tmp_path / "work"
    work.mkdir()
    return work
