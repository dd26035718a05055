# topmark:header:start
#
#   project      : ArgFlag
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ArgFlag through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from argflag.cli.exit_codes import ExitCode
from argflag.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI and capture its output.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "--name", "x"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["version"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
