"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgbump.core.errors import ErrorCode
from pkgbump.output.console import Style
from pkgbump.services.errors import BumpError

if TYPE_CHECKING:
    from pkgbump.core.config import ConfigError
    from pkgbump.output.console import ConsoleProtocol

__all__ = ["print_bump_error", "bump_error_exit_code", "print_config_error"]


def print_bump_error(error: BumpError, console: ConsoleProtocol) -> None:
    """Print a bump error, its hint, and what was already bumped."""
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)
    if error.completed:
        console.warning(f"already bumped (not rolled back): {', '.join(error.completed)}")


def bump_error_exit_code(error: BumpError) -> int:
    """Get exit code for a bump error.

    Failures of the install or release command keep the command's own exit
    status. Anything that never got to run a command is an environment error.
    """
    match error:
        case BumpError(kind="package_missing"):
            return int(ErrorCode.ENV_ERROR)
        case BumpError(returncode=rc) if rc > 0:
            return rc
    # Not started, or killed by a signal
    return int(ErrorCode.ENV_ERROR)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.path is not None:
        console.print(f"config: {error.path}", Style.DIM)
