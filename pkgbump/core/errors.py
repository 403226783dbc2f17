"""Error codes for CLI exit status.

Exit statuses that pkgbump produces itself. Failures of the external release
tool are not listed here: their exit status is propagated unchanged.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the pkgbump CLI.

    These values are used as process exit codes and should remain stable.
    - 0: Success
    - 1: User error (wrong argument count, bad option)
    - 2: Environment error (tool cannot be started, package dir missing, bad config)
    - 130: Interrupted by the user (Ctrl-C)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    INTERRUPTED = 130
