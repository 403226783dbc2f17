"""Tests for pkgbump.platform.process module."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from pkgbump.core.result import Err, Ok
from pkgbump.platform.process import NOT_STARTED, ProcessError, run_silent

PY = sys.executable


class TestProcessError:
    """Test ProcessError dataclass."""

    def test_str_short_command(self, tmp_path: Path) -> None:
        error = ProcessError(command=("cargo", "release"), returncode=101, cwd=tmp_path)
        assert str(error) == "cargo release failed (exit 101)"

    def test_str_long_command_truncated(self, tmp_path: Path) -> None:
        error = ProcessError(
            command=("cargo", "release", "--no-dev-version", "--skip-tag", "patch"),
            returncode=1,
            cwd=tmp_path,
        )
        assert str(error) == "cargo release --no-dev-version ... failed (exit 1)"

    def test_str_not_started(self, tmp_path: Path) -> None:
        error = ProcessError(
            command=("cargo",),
            returncode=NOT_STARTED,
            cwd=tmp_path,
            stderr="No such file or directory",
        )
        assert error.started is False
        assert str(error) == "cargo could not be started: No such file or directory"

    def test_frozen(self, tmp_path: Path) -> None:
        error = ProcessError(("cmd",), 1, tmp_path)
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRunSilent:
    """Test run_silent function."""

    def test_success_returns_none(self, tmp_path: Path) -> None:
        result = run_silent([PY, "-c", "pass"], cwd=tmp_path)

        assert result == Ok(None)

    def test_failure_keeps_exit_code(self, tmp_path: Path) -> None:
        result = run_silent([PY, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 42
        assert result.error.started is True
        assert result.error.cwd == tmp_path

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run_silent(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == NOT_STARTED
        # Error message varies by OS and locale
        assert len(result.error.stderr) > 0

    def test_runs_in_cwd_without_changing_ours(self, tmp_path: Path) -> None:
        before = os.getcwd()

        result = run_silent(
            [PY, "-c", "open('marker.txt', 'w').close()"],
            cwd=tmp_path,
        )

        assert isinstance(result, Ok)
        assert (tmp_path / "marker.txt").exists()
        assert os.getcwd() == before
