"""Platform abstraction layer."""

from .process import (
    NOT_STARTED,
    ProcessError,
    run_silent,
)

__all__ = [
    "NOT_STARTED",
    "ProcessError",
    "run_silent",
]
