"""Sync use case: bring a local checkout of a remote repository up to date."""

import logging
from dataclasses import dataclass
from typing import Literal

from srcfetch.core.use_case_errors import format_error_message, log_use_case_error
from srcfetch.domain.entities import RepositoryLocation
from srcfetch.ports.vcs import VcsBackend

logger = logging.getLogger(__name__)

SyncAction = Literal["checked_out", "updated"]


@dataclass
class SyncCheckoutRequest:
    """Request to sync a checkout.

    Attributes:
        location: Remote and local path to sync.
    """

    location: RepositoryLocation


@dataclass
class SyncCheckoutResponse:
    """Result of a sync.

    Attributes:
        success: Whether the checkout is now current.
        action: What was done ("checked_out" or "updated"), None on failure.
        error: Error message if the sync failed.
        hint: Optional actionable suggestion accompanying error.
    """

    success: bool
    action: SyncAction | None = None
    error: str | None = None
    hint: str | None = None

    @classmethod
    def create_error(cls, message: str, hint: str | None = None) -> "SyncCheckoutResponse":
        return cls(success=False, error=message, hint=hint)


class SyncCheckoutUseCase:
    """Check out a repository, or fetch and update it if already present.

    Args:
        backend: VCS backend matching the location's kind.
    """

    def __init__(self, backend: VcsBackend) -> None:
        self.backend = backend

    def execute(self, request: SyncCheckoutRequest) -> SyncCheckoutResponse:
        """Sync the requested location.

        A directory that exists, is not empty and is not a checkout of the
        requested remote is left untouched and reported as an error.

        Args:
            request: Location to sync.

        Returns:
            SyncCheckoutResponse describing the outcome.
        """
        location = request.location
        try:
            if self.backend.exists(location.remote, location.path):
                logger.info("Updating %s from %s", location.path, location.remote)
                self.backend.fetch(location.path)
                self.backend.update(location.path)
                return SyncCheckoutResponse(success=True, action="updated")

            if location.path.exists() and any(location.path.iterdir()):
                return SyncCheckoutResponse.create_error(
                    f"'{location.path}' exists but is not a checkout of {location.remote}",
                    hint="Remove the directory or choose another path",
                )

            logger.info("Checking out %s into %s", location.remote, location.path)
            location.path.parent.mkdir(parents=True, exist_ok=True)
            self.backend.checkout(location.remote, location.path)
            return SyncCheckoutResponse(success=True, action="checked_out")

        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception as e:
            log_use_case_error(e, "sync")
            return SyncCheckoutResponse.create_error(
                format_error_message(e, "sync"),
                hint=getattr(e, "hint", None),
            )
