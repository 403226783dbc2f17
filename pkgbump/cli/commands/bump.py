from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

import typer

from pkgbump import __version__
from pkgbump.cli.context import CLIContext, build_context
from pkgbump.core.errors import ErrorCode
from pkgbump.core.result import Err, Ok
from pkgbump.output.errors import bump_error_exit_code, print_bump_error
from pkgbump.services.bump import BumpService, ProcessRunner
from pkgbump.services.probe import ToolProbe

PROG_NAME = "pkgbump"


def parse_level(args: Sequence[str], prog: str = PROG_NAME) -> str | None:
    """Return the single level argument, or print usage and return None."""
    if len(args) != 1:
        typer.echo(f"Usage: {prog} level", err=True)
        return None
    return args[0]


def run(
    args: Sequence[str],
    ctx: CLIContext,
    *,
    probe: ToolProbe | None = None,
    runner: ProcessRunner | None = None,
    dry_run: bool = False,
    prog: str = PROG_NAME,
) -> int:
    """Bump every configured package to the level in ``args`` and return the exit code.

    Exactly one argument is accepted; anything else prints the usage line to
    stderr and returns 1 without running a command.
    """
    level = parse_level(args, prog)
    if level is None:
        return int(ErrorCode.USER_ERROR)

    service = BumpService(root=ctx.root, console=ctx.console, config=ctx.config)
    if probe is not None:
        service = replace(service, probe=probe)
    if runner is not None:
        service = replace(service, runner=runner)

    match service.bump(level, dry_run=dry_run):
        case Err(error):
            print_bump_error(error, ctx.console)
            return bump_error_exit_code(error)
        case Ok(bumped):
            prefix = "dry run: would bump" if dry_run else "bumped"
            ctx.console.success(f"{prefix} {', '.join(bumped)} ({level})")
            return int(ErrorCode.OK)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def bump(
    level: list[str] | None = typer.Argument(
        None,
        help="Release level passed to cargo-release (patch, minor, major, ...).",
        show_default=False,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: pkgbump.toml in the root, if present).",
    ),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Directory package paths are relative to (default: current directory).",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the commands only."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Bump the version of every package with cargo-release."""
    args = level or []
    if parse_level(args) is None:
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx = build_context(root=root, config_path=config)
    try:
        code = run(args, ctx, dry_run=dry_run)
    except KeyboardInterrupt:
        ctx.console.error("interrupted")
        raise typer.Exit(code=int(ErrorCode.INTERRUPTED))

    if code != int(ErrorCode.OK):
        raise typer.Exit(code=code)
