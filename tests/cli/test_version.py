# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `schemamark version`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from schemamark.constants import SCHEMAMARK_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result

pytestmark = pytest.mark.cli


def test_version_prints_bare_version() -> None:
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout == f"{SCHEMAMARK_VERSION}\n"


def test_version_json() -> None:
    result: Result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload["version_info"] == {"version": SCHEMAMARK_VERSION}
    assert payload["meta"]["tool"] == "schemamark"


def test_version_ndjson() -> None:
    result: Result = run_cli(["version", "--format", "ndjson"])

    assert_SUCCESS(result)
    lines: list[str] = result.stdout.splitlines()
    assert len(lines) == 1
    record: dict[str, Any] = json.loads(lines[0])
    assert record["kind"] == "version"
    assert record["version"] == {"version": SCHEMAMARK_VERSION}


def test_version_markdown() -> None:
    result: Result = run_cli(["version", "--format", "markdown"])

    assert_SUCCESS(result)
    assert f"**SchemaMark version: {SCHEMAMARK_VERSION}**" in result.stdout


def test_invalid_output_format() -> None:
    result: Result = run_cli(["version", "--format", "yaml"])

    assert result.exit_code == 2, result.output
