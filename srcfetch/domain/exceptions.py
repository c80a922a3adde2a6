"""Domain exceptions for srcfetch.

Every failure raised by the process runner and the VCS backends derives from
SrcfetchError. They propagate unchanged to the caller, which decides how to
present them (the CLI converts them to user-facing messages).
"""

from collections.abc import Sequence


class SrcfetchError(Exception):
    """Base exception for all srcfetch errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class PathResolutionError(SrcfetchError):
    """Raised when a working directory cannot be resolved to its real path."""

    pass


class ExecutionError(SrcfetchError):
    """Raised when a process cannot be started or waiting on it is interrupted."""

    pass


class HandleConsumedError(ExecutionError):
    """Raised when a process handle is consumed more than once."""

    pass


class CommandFailedError(SrcfetchError):
    """Raised when a process exits with an unexpected code.

    Attributes:
        exit_code: Exit code the process actually returned.
        command: Command line that was run.
    """

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        command: Sequence[str] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.exit_code = exit_code
        self.command = tuple(command)


class UnsupportedOperationError(SrcfetchError):
    """Raised when a VCS backend does not implement the requested operation."""

    pass


class UnsupportedVcsError(SrcfetchError):
    """Raised when no backend exists for a VCS kind."""

    pass
