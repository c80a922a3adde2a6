"""Selection of the backend that services each VCS kind."""

from collections.abc import Callable

from srcfetch.adapters.process.runner import ProcessRunner
from srcfetch.adapters.vcs.git import GitBackend
from srcfetch.adapters.vcs.unsupported import MercurialBackend, SubversionBackend
from srcfetch.domain.entities import VcsKind
from srcfetch.domain.exceptions import UnsupportedVcsError
from srcfetch.ports.vcs import VcsBackend

_BACKEND_TYPES: dict[VcsKind, Callable[[ProcessRunner], VcsBackend]] = {
    VcsKind.GIT: GitBackend,
    VcsKind.MERCURIAL: lambda runner: MercurialBackend(),
    VcsKind.SUBVERSION: lambda runner: SubversionBackend(),
}


class VcsBackends:
    """One backend instance per VcsKind, all sharing a single runner.

    Args:
        runner: ProcessRunner the backends issue their commands through.
    """

    def __init__(self, runner: ProcessRunner) -> None:
        self._backends = {kind: factory(runner) for kind, factory in _BACKEND_TYPES.items()}

    def get(self, kind: VcsKind) -> VcsBackend:
        """Return the backend for kind.

        Raises:
            UnsupportedVcsError: If kind has no backend.
        """
        try:
            return self._backends[kind]
        except (KeyError, TypeError):
            raise UnsupportedVcsError(
                f"Unknown VCS {kind!r}",
                hint=f"Use one of: {', '.join(k.value for k in VcsKind)}",
            ) from None


def get_backend(kind: VcsKind, runner: ProcessRunner) -> VcsBackend:
    """Return a backend servicing kind.

    Each call builds a fresh registry, so repeated calls return distinct
    backend instances. Hold a VcsBackends to get one instance per kind.

    Raises:
        UnsupportedVcsError: If kind has no backend.
    """
    return VcsBackends(runner).get(kind)
