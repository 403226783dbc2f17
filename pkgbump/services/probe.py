"""Capability check for the external release tool.

The probe only answers "is it there?"; installing is the runner's job.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Protocol

__all__ = ["ToolProbe", "PathProbe"]


class ToolProbe(Protocol):
    """Protocol for checking that an executable can be resolved."""

    def is_available(self, name: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class PathProbe:
    """Look executables up on PATH.

    Attributes:
        path: PATH string to search instead of the process environment.
    """

    path: str | None = None

    def is_available(self, name: str) -> bool:
        return shutil.which(name, path=self.path) is not None

