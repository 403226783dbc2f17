from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True, slots=True)
class BumpError:
    """Why a bump run stopped.

    ``returncode`` is the exit status of the failing command, or NOT_STARTED
    when it could not be started. It is 0 for failures detected before
    anything ran (``package_missing``). ``completed`` names the packages
    already bumped in this run; they are not rolled back.
    """

    kind: Literal["install_failed", "bump_failed", "package_missing"]
    message: str
    returncode: int = 0
    package: Path | None = None
    completed: tuple[str, ...] = ()
    hint: str | None = None

