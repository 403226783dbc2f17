"""Subprocess execution with Result-based error handling.

The working directory is always passed to the child process explicitly; the
parent's current directory is never changed.

Usage:
    result = run_silent(["cargo", "release", "patch"], cwd=package_dir)
    match result:
        case Ok(None):
            ...
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from pkgbump.core.result import Err, Ok, Result

__all__ = ["ProcessError", "NOT_STARTED", "run_silent"]

# Return code reported when the process could not be started at all.
NOT_STARTED = -1


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process, or NOT_STARTED.
        cwd: Working directory the command ran in.
        stderr: OS error text when the process could not be started.
    """

    command: tuple[str, ...]
    returncode: int
    cwd: Path
    stderr: str = ""

    @property
    def started(self) -> bool:
        return self.returncode != NOT_STARTED

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if not self.started:
            return f"{cmd_str} could not be started: {self.stderr}"
        return f"{cmd_str} failed (exit {self.returncode})"


def run_silent(
    cmd: list[str],
    cwd: Path,
) -> Result[None, ProcessError]:
    """Execute a command, streaming its output to the terminal.

    Blocks until the command exits; no timeout is applied.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Ok(None) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            check=False,
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=NOT_STARTED,
                cwd=cwd,
                stderr=str(e),
            )
        )

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode, cwd=cwd))

    return Ok(None)
