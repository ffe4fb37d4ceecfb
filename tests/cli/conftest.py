# topmark:header:start
#
#   project      : SchemaMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SchemaMark in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative input paths and config discovery
(``schemamark.toml`` / ``pyproject.toml``) resolve against the test directory.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from schemamark.cli.exit_codes import ExitCode
from schemamark.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["render", "a.json"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files or config in the
    working directory (e.g. ``--help`` or ``version``).

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` as a JSON document to ``path`` and return the path."""
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_RENDER_ERROR(result: Result) -> None:
    """Assert that the command exited with RENDER_ERROR (code 70)."""
    assert result.exit_code == ExitCode.RENDER_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
