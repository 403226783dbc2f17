"""Services: release tool preflight and package bumping."""

from .bump import BumpService, BumpStep, ProcessRunner
from .errors import BumpError
from .probe import PathProbe, ToolProbe

__all__ = [
    "BumpError",
    "BumpService",
    "BumpStep",
    "PathProbe",
    "ProcessRunner",
    "ToolProbe",
]
