"""Backends for VCS kinds that srcfetch recognizes but cannot drive yet.

Every operation raises UnsupportedOperationError, including exists: a
backend that cannot inspect a checkout must not report that none is there.
"""

from pathlib import Path
from typing import NoReturn

from srcfetch.domain.entities import VcsKind
from srcfetch.domain.exceptions import UnsupportedOperationError


class UnsupportedBackend:
    """Backend whose operations all fail with UnsupportedOperationError."""

    kind: VcsKind
    label: str

    def exists(self, remote: str, local_dir: Path) -> bool:
        self._unsupported("exists")

    def checkout(self, remote: str, into: Path) -> None:
        self._unsupported("checkout")

    def fetch(self, path: Path) -> None:
        self._unsupported("fetch")

    def update(self, path: Path) -> None:
        self._unsupported("update")

    def _unsupported(self, operation: str) -> NoReturn:
        raise UnsupportedOperationError(
            f"{self.label} {operation} is not implemented",
            hint="Only git repositories are supported at the moment",
        )


class MercurialBackend(UnsupportedBackend):
    kind = VcsKind.MERCURIAL
    label = "Mercurial"


class SubversionBackend(UnsupportedBackend):
    kind = VcsKind.SUBVERSION
    label = "Subversion"
