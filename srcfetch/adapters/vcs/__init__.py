"""VCS backends and the selector mapping each VcsKind to one of them."""

from srcfetch.adapters.vcs.git import GitBackend
from srcfetch.adapters.vcs.registry import VcsBackends, get_backend
from srcfetch.adapters.vcs.unsupported import MercurialBackend, SubversionBackend

__all__ = [
    "GitBackend",
    "MercurialBackend",
    "SubversionBackend",
    "VcsBackends",
    "get_backend",
]
