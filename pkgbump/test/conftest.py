from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pkgbump.core.result import Err, Ok, Result
from pkgbump.platform.process import NOT_STARTED, ProcessError


@dataclass(frozen=True)
class StaticProbe:
    """Probe that always gives the same answer."""

    available: bool

    def is_available(self, name: str) -> bool:
        return self.available


@dataclass
class RecordingRunner:
    """Runner that records calls instead of spawning processes.

    ``failures`` maps a working directory to the exit code the command run
    there should fail with (NOT_STARTED simulates a missing executable).
    """

    failures: dict[Path, int] = field(default_factory=dict)
    calls: list[tuple[list[str], Path]] = field(default_factory=list)

    def __call__(self, cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
        self.calls.append((list(cmd), cwd))
        rc = self.failures.get(cwd)
        if rc is None:
            return Ok(None)
        stderr = "No such file or directory" if rc == NOT_STARTED else ""
        return Err(ProcessError(command=tuple(cmd), returncode=rc, cwd=cwd, stderr=stderr))

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    @property
    def directories(self) -> list[Path]:
        return [cwd for _, cwd in self.calls]


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A root holding the default package directories."""
    (tmp_path / "core").mkdir()
    (tmp_path / "cli").mkdir()
    return tmp_path


@pytest.fixture
def recorder() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def present() -> StaticProbe:
    return StaticProbe(available=True)


@pytest.fixture
def absent() -> StaticProbe:
    return StaticProbe(available=False)
