# topmark:header:start
#
#   project      : CodegenLint
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CLI test helpers for running CodegenLint in a controlled working directory.

`run_cli_in()` changes the process working directory to the given
``tmp_path`` before invoking the Click CLI, so relative paths, the default
``.`` path and config discovery all resolve against the temporary directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from codegenlint.cli.exit_codes import ExitCode
from codegenlint.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def no_forced_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI output free of ANSI codes regardless of the developer's shell."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["check", "--apply"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["check", "--no-config", "a.ts"])
        assert res.exit_code == ExitCode.WOULD_CHANGE
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
