"""Typed configuration for the bump run.

Defaults describe the workspace this tool was written for: two Rust packages
bumped with cargo-release. A ``pkgbump.toml`` file can override any of them:

    [bump]
    packages = ["core", "cli"]
    tool = "cargo-release"
    command = ["cargo", "release"]
    flags = ["--no-dev-version", "--skip-tag", "--skip-push", "--skip-publish"]
    install = ["cargo", "install", "cargo-release"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_tuple, get_table

__all__ = [
    "BumpConfig",
    "ConfigError",
    "CONFIG_FILENAME",
    "DEFAULT_COMMAND",
    "DEFAULT_FLAGS",
    "DEFAULT_INSTALL_COMMAND",
    "DEFAULT_PACKAGES",
    "DEFAULT_TOOL",
    "load_config",
]

CONFIG_FILENAME = "pkgbump.toml"

# Package directories, bumped in this order.
DEFAULT_PACKAGES: tuple[str, ...] = ("core", "cli")

# Executable looked up on PATH; `cargo release` dispatches to it.
DEFAULT_TOOL = "cargo-release"
DEFAULT_COMMAND: tuple[str, ...] = ("cargo", "release")
DEFAULT_FLAGS: tuple[str, ...] = (
    "--no-dev-version",
    "--skip-tag",
    "--skip-push",
    "--skip-publish",
)
DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("cargo", "install", "cargo-release")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class BumpConfig:
    """Everything the release runner needs besides the level.

    Attributes:
        packages: Package directories, relative to the run root or absolute.
        tool: Executable that must be on PATH before bumping.
        command: Base argv of the release tool invocation.
        flags: Fixed flags placed between ``command`` and the level.
        install_command: Argv run once when ``tool`` is not on PATH.
    """

    packages: tuple[str, ...] = DEFAULT_PACKAGES
    tool: str = DEFAULT_TOOL
    command: tuple[str, ...] = DEFAULT_COMMAND
    flags: tuple[str, ...] = DEFAULT_FLAGS
    install_command: tuple[str, ...] = DEFAULT_INSTALL_COMMAND

    def bump_argv(self, level: str) -> list[str]:
        """Build the full release tool argv for one package."""
        return [*self.command, *self.flags, level]

    def package_dirs(self, root: Path) -> list[Path]:
        """Resolve package entries against ``root``, keeping their order."""
        return [root / p for p in self.packages]

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> BumpConfig:
        """Create a BumpConfig from parsed TOML.

        Raises:
            ValueError: If a present key has the wrong type or is empty.
        """
        if "bump" in data and get_table(data, "bump") is None:
            raise ValueError("'bump' must be a table")
        bump: StrDict = get_table(data, "bump") or {}

        tool = DEFAULT_TOOL
        if "tool" in bump:
            value = get_str(bump, "tool")
            if value is None:
                raise ValueError("'tool' must be a non-empty string")
            tool = value

        return cls(
            packages=get_str_tuple(bump, "packages") or DEFAULT_PACKAGES,
            tool=tool,
            command=get_str_tuple(bump, "command") or DEFAULT_COMMAND,
            flags=get_str_tuple(bump, "flags") or DEFAULT_FLAGS,
            install_command=get_str_tuple(bump, "install") or DEFAULT_INSTALL_COMMAND,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[BumpConfig, ConfigError]:
    """Load and validate a pkgbump.toml file.

    Args:
        path: Path to the TOML file.

    Returns:
        Ok(BumpConfig) on success, Err(ConfigError) on failure.
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(BumpConfig.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
