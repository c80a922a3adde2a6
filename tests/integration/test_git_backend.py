"""Integration tests for the git backend.

These tests create real git repositories and exercise every VcsBackend
operation against them.
"""

import io
from pathlib import Path

import pytest

from srcfetch.adapters.process.runner import ProcessRunner
from srcfetch.adapters.vcs import GitBackend, get_backend
from srcfetch.domain.config import ExecConfig
from srcfetch.domain.entities import VcsKind
from srcfetch.domain.exceptions import CommandFailedError, PathResolutionError
from tests.helpers import create_git_repo, git_add_and_commit, run_git

pytestmark = pytest.mark.integration


@pytest.fixture
def git() -> GitBackend:
    backend = get_backend(VcsKind.GIT, ProcessRunner())
    assert isinstance(backend, GitBackend)
    return backend


@pytest.fixture
def checkout(git: GitBackend, upstream_repo: Path, work_dir: Path) -> Path:
    """A fresh clone of upstream_repo."""
    target = work_dir / "proj"
    git.checkout(str(upstream_repo), target)
    return target


def test_checkout_materializes_at_target(checkout: Path, work_dir: Path):
    assert checkout.is_dir()
    assert (checkout / ".git").is_dir()
    assert (checkout / "src" / "lib.py").read_text() == "VALUE = 1\n"
    assert [p.name for p in work_dir.iterdir()] == ["proj"]


def test_exists_true_for_matching_origin(git: GitBackend, checkout: Path, upstream_repo: Path):
    assert git.exists(str(upstream_repo), checkout) is True


def test_exists_false_for_other_remote(git: GitBackend, checkout: Path):
    assert git.exists("https://example.com/other.git", checkout) is False


def test_exists_false_for_plain_directory(git: GitBackend, work_dir: Path, upstream_repo: Path):
    assert git.exists(str(upstream_repo), work_dir) is False


def test_exists_false_inside_enclosing_checkout(
    git: GitBackend, checkout: Path, upstream_repo: Path
):
    """Test a subdirectory of a checkout is not mistaken for the checkout."""
    assert git.exists(str(upstream_repo), checkout / "src") is False


def test_exists_false_without_origin(git: GitBackend, tmp_path: Path):
    repo = create_git_repo(tmp_path / "local_only")

    assert git.exists("https://example.com/r.git", repo) is False


def test_exists_uses_origin_not_other_remotes(git: GitBackend, tmp_path: Path):
    repo = create_git_repo(tmp_path / "multi")
    run_git(repo, "remote", "add", "upstream", "https://example.com/r.git")
    run_git(repo, "remote", "add", "origin", "https://example.com/fork.git")

    assert git.exists("https://example.com/fork.git", repo) is True
    assert git.exists("https://example.com/r.git", repo) is False


def test_checkout_failure_raises(git: GitBackend, work_dir: Path, tmp_path: Path):
    with pytest.raises(CommandFailedError, match="git clone failed") as exc_info:
        git.checkout(str(tmp_path / "no-such-repo"), work_dir / "proj")

    assert exc_info.value.exit_code != 0
    assert not (work_dir / "proj").exists()


def test_checkout_into_missing_parent_raises(git: GitBackend, upstream_repo: Path, tmp_path: Path):
    with pytest.raises(PathResolutionError):
        git.checkout(str(upstream_repo), tmp_path / "missing" / "proj")


def test_fetch_leaves_working_tree_then_update_applies(
    git: GitBackend, checkout: Path, upstream_repo: Path
):
    (upstream_repo / "src" / "lib.py").write_text("VALUE = 2\n")
    git_add_and_commit(upstream_repo, message="Bump value")

    git.fetch(checkout)
    assert (checkout / "src" / "lib.py").read_text() == "VALUE = 1\n"

    git.update(checkout)
    assert (checkout / "src" / "lib.py").read_text() == "VALUE = 2\n"


def test_fetch_unreachable_remote_fails(git: GitBackend, tmp_path: Path):
    plain = tmp_path / "plain"
    plain.mkdir()
    run_git(plain, "init")
    run_git(plain, "remote", "add", "origin", str(tmp_path / "gone"))

    with pytest.raises(CommandFailedError, match="git fetch failed"):
        git.fetch(plain)


def test_update_without_upstream_fails(git: GitBackend, tmp_path: Path):
    repo = create_git_repo(tmp_path / "no_upstream")

    with pytest.raises(CommandFailedError, match="git pull failed"):
        git.update(repo)


def test_debug_trace_for_clone(upstream_repo: Path, work_dir: Path):
    trace = io.StringIO()
    git = GitBackend(ProcessRunner(ExecConfig(debug=True), trace=trace))

    git.checkout(str(upstream_repo), work_dir / "proj")

    assert trace.getvalue().splitlines() == [
        f"Exec in {work_dir.resolve()}",
        "  git",
        "     clone",
        f"     -q {upstream_repo}",
        "     proj",
    ]
