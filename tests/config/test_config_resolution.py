# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_config_resolution.py
#   file_relpath : tests/config/test_config_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration discovery, merging and overrides.

Precedence, lowest to highest:

    bundled defaults -> project config (schemamark.toml, else pyproject.toml)
    -> explicit config files (in order) -> CLI/API overrides
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import tomlkit

from schemamark.config.model import CLI_OVERRIDE_STR, MutableRenderConfig, RenderConfig
from schemamark.core.diagnostics import DiagnosticLevel
from schemamark.rendering.formats import NestedContext, RenderFormat

pytestmark = pytest.mark.config


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_match_the_frozen_model() -> None:
    """The bundled TOML and the dataclass defaults agree."""
    frozen: RenderConfig = MutableRenderConfig.from_defaults().freeze()
    assert frozen.to_toml_dict() == RenderConfig().to_toml_dict()
    assert frozen.diagnostics == ()


def test_layers_merge_in_precedence_order(tmp_path: Path) -> None:
    _write(
        tmp_path / "schemamark.toml",
        'default_format = "microdata"\nmax_depth = 10\n\n[microdata]\npretty_print = false\n',
    )
    extra: Path = _write(
        tmp_path / "extra.toml", "max_depth = 5\n\n[json_ld]\ncompact_output = true\n"
    )

    draft = MutableRenderConfig.load_merged(start=tmp_path, extra_config_files=[extra])
    draft.apply_overrides({"strict": True, "max_depth": 7})
    config: RenderConfig = draft.freeze()

    assert config.default_format is RenderFormat.MICRODATA
    assert config.max_depth == 7
    assert config.strict is True
    assert config.microdata.pretty_print is False
    # Unset keys keep their defaults
    assert config.rdfa.pretty_print is True
    assert config.json_ld.compact_output is True
    assert config.config_files == (
        (tmp_path / "schemamark.toml").resolve(),
        extra,
        CLI_OVERRIDE_STR,
    )


def test_schemamark_toml_wins_over_pyproject(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", "[tool.schemamark]\nstrict = true\n")
    assert MutableRenderConfig.discover_project_config_file(tmp_path) == (
        tmp_path / "pyproject.toml"
    ).resolve()

    _write(tmp_path / "schemamark.toml", "strict = false\n")
    assert MutableRenderConfig.discover_project_config_file(tmp_path) == (
        tmp_path / "schemamark.toml"
    ).resolve()


def test_pyproject_without_table_is_ignored(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert MutableRenderConfig.discover_project_config_file(tmp_path) is None


def test_pyproject_table_is_loaded(tmp_path: Path) -> None:
    _write(
        tmp_path / "pyproject.toml",
        '[tool.schemamark]\n[tool.schemamark.rdfa]\ncontainer_element = "Section"\n',
    )
    config: RenderConfig = MutableRenderConfig.load_merged(start=tmp_path).freeze()
    assert config.rdfa.container_element == "section"


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "schemamark.toml", "strict = true\n")
    config: RenderConfig = MutableRenderConfig.load_merged(start=tmp_path, no_config=True).freeze()
    assert config.strict is False
    assert config.config_files == ()


def test_invalid_values_and_unknown_keys_are_warnings(tmp_path: Path) -> None:
    path: Path = _write(
        (tmp_path / "schemamark.toml").resolve(),
        'colour = "red"\nmax_depth = "deep"\ndefault_format = "html"\n\n'
        '[json_ld]\npretty_print = "yes"\nnested_context = "sometimes"\nbogus = 1\n\n'
        '[microdata]\ncontainer_element = "div class"\n',
    )
    config: RenderConfig = MutableRenderConfig.load_merged(start=tmp_path).freeze()

    assert all(d.level == DiagnosticLevel.WARNING for d in config.diagnostics)
    wheres: set[str] = {d.where for d in config.diagnostics}
    assert wheres == {
        f"{path}: colour",
        f"{path}: max_depth",
        f"{path}: default_format",
        f"{path}: [json_ld].pretty_print",
        f"{path}: [json_ld].nested_context",
        f"{path}: [json_ld].bogus",
        f"{path}: [microdata].container_element",
    }
    # Invalid values fall back to the defaults
    assert config.max_depth == 32
    assert config.default_format is RenderFormat.JSON_LD
    assert config.json_ld.pretty_print is True
    assert config.json_ld.nested_context is NestedContext.WHEN_CHANGED
    assert config.microdata.container_element == "div"


def test_negative_max_depth_is_sanitized() -> None:
    draft = MutableRenderConfig.from_toml_dict({"max_depth": -1})
    config: RenderConfig = draft.freeze()
    assert config.max_depth == 32
    assert [d.where for d in config.diagnostics] == ["max_depth"]


def test_unreadable_explicit_config_is_an_error(tmp_path: Path) -> None:
    bad: Path = _write(tmp_path / "bad.toml", "= nope\n")
    config: RenderConfig = MutableRenderConfig.load_merged(
        start=tmp_path, extra_config_files=[bad]
    ).freeze()
    errors = [d for d in config.diagnostics if d.level == DiagnosticLevel.ERROR]
    assert [d.where for d in errors] == [str(bad)]


def test_overrides_reject_unknown_format() -> None:
    draft = MutableRenderConfig.from_defaults()
    with pytest.raises(ValueError):
        draft.apply_overrides({"default_format": "html"})


def test_overrides_ignore_none_values() -> None:
    draft = MutableRenderConfig.from_defaults().apply_overrides(
        {"strict": None, "pretty_print": None}
    )
    assert CLI_OVERRIDE_STR not in draft.config_files


def test_pretty_print_override_applies_to_every_format() -> None:
    config: RenderConfig = MutableRenderConfig.from_defaults().apply_overrides(
        {"pretty_print": False, "default_format": RenderFormat.RDFA}
    ).freeze()
    assert not config.json_ld.pretty_print
    assert not config.microdata.pretty_print
    assert not config.rdfa.pretty_print
    assert config.options_for(RenderFormat.RDFA) is config.rdfa


def test_toml_export_round_trips() -> None:
    config: RenderConfig = MutableRenderConfig.from_defaults().apply_overrides(
        {"context": "https://example.org/vocab", "compact_output": True}
    ).freeze()
    parsed: dict[str, Any] = tomlkit.parse(config.thaw().to_toml()).unwrap()
    assert parsed == config.to_toml_dict()

    reloaded: RenderConfig = MutableRenderConfig.from_toml_dict(parsed).freeze()
    assert reloaded.to_toml_dict() == config.to_toml_dict()


def test_thaw_freeze_is_lossless() -> None:
    config: RenderConfig = MutableRenderConfig.from_defaults().freeze()
    assert config.thaw().freeze() == config
