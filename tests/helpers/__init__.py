"""Test helper utilities for the srcfetch test suite."""

from tests.helpers.git_repos import (
    create_git_repo,
    git_add_and_commit,
    init_git_repo,
    run_git,
)

__all__ = [
    "create_git_repo",
    "git_add_and_commit",
    "init_git_repo",
    "run_git",
]
