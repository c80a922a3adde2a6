"""Version Control System (VCS) port interface.

Defines the abstract interface every VCS backend implements so that callers
can fetch and update source checkouts without knowing which tool is used.
"""

from pathlib import Path
from typing import Protocol

from srcfetch.domain.entities import VcsKind


class VcsBackend(Protocol):
    """Protocol for checkout operations on one VCS tool family."""

    kind: VcsKind

    def exists(self, remote: str, local_dir: Path) -> bool:
        """Check whether local_dir already holds a checkout of remote.

        Args:
            remote: Remote identifier the checkout should originate from.
            local_dir: Directory to inspect.

        Returns:
            True if local_dir is a checkout whose recorded origin equals
            remote exactly. A directory that is not a checkout at all, or
            does not exist, yields False.

        Raises:
            UnsupportedOperationError: If the backend cannot answer.
        """
        ...

    def checkout(self, remote: str, into: Path) -> None:
        """Create a new checkout of remote at into.

        Args:
            remote: Remote identifier to check out.
            into: Checkout directory. Its parent must exist; into itself
                  is created by the VCS tool.

        Raises:
            CommandFailedError: If the VCS tool exits non-zero.
        """
        ...

    def fetch(self, path: Path) -> None:
        """Fetch remote updates without touching the working tree.

        Raises:
            CommandFailedError: If the VCS tool exits non-zero.
        """
        ...

    def update(self, path: Path) -> None:
        """Apply previously fetched updates to the working tree.

        Raises:
            CommandFailedError: If the VCS tool exits non-zero.
        """
        ...
