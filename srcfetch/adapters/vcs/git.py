"""Git backend implementing the VcsBackend protocol via the git CLI."""

import logging
from pathlib import Path

from srcfetch.adapters.process.runner import ProcessRunner
from srcfetch.domain.entities import VcsKind

logger = logging.getLogger(__name__)

ORIGIN_REMOTE = "origin"


class GitBackend:
    """Git checkouts managed through subprocess calls to git.

    Holds no state besides the runner it issues commands through.
    """

    kind = VcsKind.GIT

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner = runner

    def exists(self, remote: str, local_dir: Path) -> bool:
        return self.read_origin(local_dir) == str(remote)

    def checkout(self, remote: str, into: Path) -> None:
        into = Path(into)
        self._runner.prepare(
            into.parent, "git", "clone", "-q", str(remote), into.name
        ).expect_exit(0, "git clone failed")

    def fetch(self, path: Path) -> None:
        self._runner.prepare(path, "git", "fetch").expect_exit(0, "git fetch failed")

    def update(self, path: Path) -> None:
        # Plain pull; a fast-forward-only policy has not been agreed on.
        self._runner.prepare(path, "git", "pull").expect_exit(0, "git pull failed")

    def read_origin(self, root: Path) -> str:
        """Return the URL of the origin remote recorded in root.

        Args:
            root: Directory expected to contain a .git entry.

        Returns:
            The origin URL, or "" if root is not a git checkout or has no
            origin remote.
        """
        # git would search parent directories for a .git and could report
        # an unrelated enclosing checkout
        if not (Path(root) / ".git").exists():
            logger.debug("No .git in %s, not a git checkout", root)
            return ""
        for line in self._runner.prepare(root, "git", "remote", "-v").capture_stdout():
            bits = line.split()
            if len(bits) >= 2 and bits[0] == ORIGIN_REMOTE:
                return bits[1]
        return ""
