from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from pkgbump.core.config import CONFIG_FILENAME, BumpConfig, load_config
from pkgbump.core.errors import ErrorCode
from pkgbump.core.result import Err
from pkgbump.output.console import ConsoleProtocol, RichConsole
from pkgbump.output.errors import print_config_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: BumpConfig
    console: ConsoleProtocol


def build_context(*, root: Path | None = None, config_path: Path | None = None) -> CLIContext:
    """Resolve the run root and load config.

    An explicit ``config_path`` must load; ``pkgbump.toml`` in the root is
    used when present; otherwise defaults apply.
    """
    console = RichConsole()

    try:
        resolved = (root or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid --root: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not resolved.is_dir():
        console.error(f"--root '{resolved}' is not a directory")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    path = config_path if config_path is not None else resolved / CONFIG_FILENAME
    config = BumpConfig()
    if config_path is not None or path.is_file():
        result = load_config(path)
        if isinstance(result, Err):
            print_config_error(result.error, console)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = result.value

    return CLIContext(root=resolved, config=config, console=console)
