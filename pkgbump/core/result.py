"""Result type for explicit error handling.

Services return ``Ok(value)`` or ``Err(error)`` instead of raising, and the
CLI layer decides how a failure maps to an exit code.

Usage:
    match service.bump("patch"):
        case Ok(bumped):
            console.success(f"bumped {len(bumped)} packages")
        case Err(error):
            print_bump_error(error, console)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

__all__ = ["Ok", "Err", "Result"]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying ``error``."""

    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
