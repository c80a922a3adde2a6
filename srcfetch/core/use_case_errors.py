"""Use case error handling utilities.

Use cases return error responses rather than raising, so callers check
response.success instead of catching several exception types.
KeyboardInterrupt and SystemExit are never caught.
"""

import logging

from srcfetch.domain.exceptions import SrcfetchError

logger = logging.getLogger(__name__)


def format_error_message(exception: Exception, operation_name: str) -> str:
    """Format an exception into a user-friendly error message.

    - SrcfetchError: uses the error's message directly
    - OSError: adds context about permissions/disk space
    - ValueError/RuntimeError: includes the message with operation context
    - anything else: a generic "internal error" message

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation for error messages (e.g., "sync").

    Returns:
        User-friendly error message string.
    """
    if isinstance(exception, SrcfetchError):
        return exception.message
    elif isinstance(exception, OSError):
        return (
            f"I/O error: {exception}. "
            "Check file permissions, disk space, and filesystem access."
        )
    elif isinstance(exception, (ValueError, RuntimeError)):
        return f"{operation_name.capitalize()} error: {exception}"
    else:
        return f"Internal error during {operation_name}. Check logs for details."


def log_use_case_error(exception: Exception, operation_name: str) -> None:
    """Log an exception from a use case with appropriate severity.

    Unexpected exception types are logged with their traceback.
    """
    if isinstance(exception, SrcfetchError):
        logger.error(str(exception))
    elif isinstance(exception, OSError):
        logger.error("I/O error during %s: %s", operation_name, exception)
    elif isinstance(exception, (ValueError, RuntimeError)):
        logger.error("Error during %s: %s", operation_name, exception)
    else:
        logger.exception("Unexpected error during %s", operation_name)
