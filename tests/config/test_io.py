# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in schemamark.config.io."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from schemamark.config.io import (
    load_defaults_dict,
    load_pyproject_table,
    load_toml_dict,
    nest_toml_under_section,
    to_toml,
)

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.config


def test_nest_toml_under_section_basic() -> None:
    """Wrapping nests the document under [tool.schemamark] and keeps comments."""
    source = "# leading comment\n\nanswer = 42\n"
    wrapped: str = nest_toml_under_section(source, "tool.schemamark")

    parsed: Any = tomlkit.parse(wrapped)
    assert parsed["tool"]["schemamark"]["answer"] == 42
    assert "# leading comment" in wrapped
    assert "[tool.schemamark]" in wrapped


def test_nest_toml_under_section_keeps_subtables() -> None:
    source = 'context = "https://schema.org"\n\n[json_ld]\npretty_print = false\n'
    wrapped: str = nest_toml_under_section(source, "tool.schemamark")
    parsed: Any = tomlkit.parse(wrapped).unwrap()
    assert parsed == {
        "tool": {
            "schemamark": {
                "context": "https://schema.org",
                "json_ld": {"pretty_print": False},
            }
        }
    }


def test_nest_toml_under_section_keeps_interior_comments() -> None:
    source = (
        "# header\n"
        "\n"
        "# about a\n"
        "a = 1\n"
        "# about b\n"
        "b = 2\n"
        "\n"
        "[json_ld]\n"
        "# inner\n"
        "pretty_print = false\n"
    )
    wrapped: str = nest_toml_under_section(source, "tool.schemamark")

    for comment in ("# header", "# about a", "# about b", "# inner"):
        assert comment in wrapped
    # Only the header sits above the new section
    assert wrapped.index("# header") < wrapped.index("[tool.schemamark]")
    assert wrapped.index("[tool.schemamark]") < wrapped.index("# about a")
    assert tomlkit.parse(wrapped).unwrap() == {
        "tool": {"schemamark": {"a": 1, "b": 2, "json_ld": {"pretty_print": False}}}
    }


@pytest.mark.parametrize("section", ["", "..."])
def test_nest_toml_under_section_rejects_empty_section(section: str) -> None:
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", section)


def test_load_toml_dict_returns_none_on_errors(tmp_path: Path) -> None:
    bad: Path = tmp_path / "bad.toml"
    bad.write_text("this is = = not toml\n", encoding="utf-8")
    assert load_toml_dict(bad) is None
    assert load_toml_dict(tmp_path / "missing.toml") is None


def test_load_pyproject_table(tmp_path: Path) -> None:
    pyproject: Path = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_pyproject_table(pyproject) is None

    pyproject.write_text('[tool.schemamark]\nstrict = true\n', encoding="utf-8")
    assert load_pyproject_table(pyproject) == {"strict": True}


def test_to_toml_strips_none() -> None:
    rendered: str = to_toml({"a": 1, "b": None, "t": {"c": None, "d": [1, None]}})
    assert tomlkit.parse(rendered).unwrap() == {"a": 1, "t": {"d": [1]}}


def test_bundled_defaults_are_complete() -> None:
    defaults: dict[str, Any] = load_defaults_dict()
    assert defaults["context"] == "https://schema.org"
    assert defaults["default_format"] == "json-ld"
    assert defaults["max_depth"] == 32
    assert set(defaults) >= {"json_ld", "microdata", "rdfa"}
