"""Core domain entities for srcfetch."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from srcfetch.domain.exceptions import UnsupportedVcsError

# Program name followed by its arguments, passed to the OS without a shell.
Command = tuple[str, ...]

# Alternate spellings accepted by VcsKind.parse, keyed by lowercase text.
_KIND_ALIASES = {
    "git": "git",
    "hg": "hg",
    "mercurial": "hg",
    "svn": "svn",
    "subversion": "svn",
}


class VcsKind(Enum):
    """Version control systems a source checkout can be managed with."""

    GIT = "git"
    MERCURIAL = "hg"
    SUBVERSION = "svn"

    @classmethod
    def parse(cls, text: str) -> "VcsKind":
        """Parse a VCS kind from user or metadata text.

        Accepts the enum value or member name in any case ("git", "HG",
        "mercurial", "svn", "Subversion").

        Raises:
            UnsupportedVcsError: If the text names no known VCS.
        """
        value = _KIND_ALIASES.get(text.strip().lower())
        if value is None:
            raise UnsupportedVcsError(
                f"Unknown VCS '{text}'",
                hint=f"Use one of: {', '.join(k.value for k in cls)}",
            )
        return cls(value)


@dataclass(frozen=True)
class RepositoryLocation:
    """A remote repository paired with the local path it is checked out to.

    Attributes:
        remote: Remote identifier (URL or path) exactly as recorded by the VCS.
        path: Local checkout directory.
        kind: VCS managing the checkout.
    """

    remote: str
    path: Path
    kind: VcsKind = VcsKind.GIT
