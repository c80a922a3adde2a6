"""Tests for domain entities and exceptions."""

from pathlib import Path

import pytest

from srcfetch.domain.entities import RepositoryLocation, VcsKind
from srcfetch.domain.exceptions import (
    CommandFailedError,
    ExecutionError,
    HandleConsumedError,
    SrcfetchError,
    UnsupportedVcsError,
)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("git", VcsKind.GIT),
        ("GIT", VcsKind.GIT),
        (" git ", VcsKind.GIT),
        ("hg", VcsKind.MERCURIAL),
        ("Mercurial", VcsKind.MERCURIAL),
        ("svn", VcsKind.SUBVERSION),
        ("subversion", VcsKind.SUBVERSION),
    ],
)
def test_vcs_kind_parse(text: str, kind: VcsKind):
    assert VcsKind.parse(text) is kind


def test_vcs_kind_parse_unknown():
    with pytest.raises(UnsupportedVcsError, match="Unknown VCS 'cvs'") as exc_info:
        VcsKind.parse("cvs")

    assert "git, hg, svn" in exc_info.value.hint


def test_repository_location_defaults_to_git():
    location = RepositoryLocation(remote="https://example.com/r.git", path=Path("/tmp/r"))

    assert location.kind is VcsKind.GIT


def test_repository_location_is_immutable():
    location = RepositoryLocation(remote="https://example.com/r.git", path=Path("/tmp/r"))

    with pytest.raises(AttributeError):
        location.remote = "other"  # type: ignore[misc]


def test_error_hierarchy():
    assert issubclass(HandleConsumedError, ExecutionError)
    assert issubclass(CommandFailedError, SrcfetchError)
    assert issubclass(UnsupportedVcsError, SrcfetchError)


def test_command_failed_error_defaults():
    error = CommandFailedError("git fetch failed")

    assert error.message == "git fetch failed"
    assert error.exit_code is None
    assert error.command == ()
    assert error.hint is None
