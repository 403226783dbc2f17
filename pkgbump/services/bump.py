"""Release runner: bump every configured package with the release tool.

The run is a strict sequence: make sure the tool is installed, then invoke it
once per package directory, in order, stopping at the first failure. Packages
bumped before a failure are left as they are.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from pkgbump.core.config import BumpConfig
from pkgbump.core.result import Err, Ok, Result
from pkgbump.output.console import ConsoleProtocol
from pkgbump.platform.process import ProcessError, run_silent
from pkgbump.services.errors import BumpError
from pkgbump.services.probe import PathProbe, ToolProbe

__all__ = ["BumpService", "BumpStep", "ProcessRunner"]


class ProcessRunner(Protocol):
    """Runs one command in a given directory, output streaming to the terminal.

    This abstraction allows replacing subprocess calls in tests.
    """

    def __call__(self, cmd: list[str], cwd: Path) -> Result[None, ProcessError]: ...


@dataclass(frozen=True, slots=True)
class BumpStep:
    """One release tool invocation."""

    name: str
    directory: Path
    argv: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BumpService:
    """Bump the configured packages to a new level.

    Attributes:
        root: Directory relative package entries resolve against.
        console: Progress output.
        config: Packages, release command and install command.
        probe: Decides whether the release tool must be installed first.
        runner: Executes commands; never changes the process working directory.
    """

    root: Path
    console: ConsoleProtocol
    config: BumpConfig = field(default_factory=BumpConfig)
    probe: ToolProbe = field(default_factory=PathProbe)
    runner: ProcessRunner = run_silent

    def plan(self, level: str) -> list[BumpStep]:
        argv = tuple(self.config.bump_argv(level))
        return [
            BumpStep(name=name, directory=directory, argv=argv)
            for name, directory in zip(
                self.config.packages, self.config.package_dirs(self.root), strict=True
            )
        ]

    def ensure_tool(self, *, dry_run: bool = False) -> Result[bool, BumpError]:
        """Install the release tool if it is not on PATH.

        The probe is consulted once. A successful install is trusted; PATH is
        not checked again afterwards.

        Returns:
            Ok(True) if an install ran (or would run, in a dry run),
            Ok(False) if the tool was already available.
        """
        tool = self.config.tool
        if self.probe.is_available(tool):
            return Ok(False)

        install = list(self.config.install_command)
        if dry_run:
            self.console.info(f"{tool} not found on PATH, would install")
            self.console.command(install)
            return Ok(True)

        self.console.info(f"{tool} not found on PATH, installing")
        self.console.command(install)

        result = self.runner(install, self.root)
        if isinstance(result, Err):
            return Err(
                BumpError(
                    kind="install_failed",
                    message=f"installing {tool} failed: {result.error}",
                    returncode=result.error.returncode,
                    hint=f"install it manually: {shlex.join(install)}",
                )
            )
        return Ok(True)

    def bump(self, level: str, *, dry_run: bool = False) -> Result[list[str], BumpError]:
        """Run the release tool for every package, stopping at the first failure.

        Args:
            level: Forwarded verbatim as the last argument of the release tool.
            dry_run: Print the commands without running anything.

        Returns:
            Ok(names of the packages bumped, or that would be bumped), or
            Err(BumpError) describing the first failure.
        """
        preflight = self.ensure_tool(dry_run=dry_run)
        if isinstance(preflight, Err):
            return preflight

        done: list[str] = []
        for step in self.plan(level):
            self.console.header(step.name)
            if not step.directory.is_dir():
                return Err(
                    BumpError(
                        kind="package_missing",
                        message=f"package directory not found: {step.directory}",
                        package=step.directory,
                        completed=tuple(done),
                    )
                )

            self.console.command(list(step.argv))
            if not dry_run:
                result = self.runner(list(step.argv), step.directory)
                if isinstance(result, Err):
                    return Err(_bump_failed(step, result.error, done))
            done.append(step.name)

        return Ok(done)


def _bump_failed(step: BumpStep, error: ProcessError, done: list[str]) -> BumpError:
    hint: str | None = None
    if not error.started:
        hint = f"is '{error.command[0]}' on PATH?"
    return BumpError(
        kind="bump_failed",
        message=f"{step.name}: {error}",
        returncode=error.returncode,
        package=step.directory,
        completed=tuple(done),
        hint=hint,
    )
