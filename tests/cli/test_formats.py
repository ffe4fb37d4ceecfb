# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_formats.py
#   file_relpath : tests/cli/test_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `schemamark formats`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result

pytestmark = pytest.mark.cli

FORMAT_NAMES: list[str] = ["json-ld", "microdata", "rdfa"]


def test_text_lists_format_names() -> None:
    result: Result = run_cli(["--no-color", "formats"])

    assert_SUCCESS(result)
    names: list[str] = [line.split()[0] for line in result.stdout.splitlines()]
    assert names == FORMAT_NAMES


def test_verbose_text_shows_details() -> None:
    result: Result = run_cli(["--no-color", "-v", "formats"])

    assert_SUCCESS(result)
    assert "mime type: application/ld+json" in result.stdout
    assert "aliases:   jsonld, ld+json" in result.stdout


def test_json_envelope() -> None:
    result: Result = run_cli(["formats", "--format", "json"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.stdout)
    assert [f["name"] for f in payload["formats"]] == FORMAT_NAMES
    assert payload["formats"][1]["mime_type"] == "text/html"


def test_ndjson_has_one_record_per_format() -> None:
    result: Result = run_cli(["formats", "--format", "ndjson"])

    assert_SUCCESS(result)
    records: list[dict[str, Any]] = [json.loads(line) for line in result.stdout.splitlines()]
    assert {r["kind"] for r in records} == {"format"}
    assert [r["format"]["name"] for r in records] == FORMAT_NAMES


def test_markdown_table() -> None:
    result: Result = run_cli(["formats", "--format", "markdown"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("# Supported Formats\n")
    assert "`json-ld`" in result.stdout
