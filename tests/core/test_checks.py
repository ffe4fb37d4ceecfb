# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_checks.py
#   file_relpath : tests/core/test_checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the structural entity checks."""

from __future__ import annotations

import pytest

from schemamark.core.checks import check_entity, ensure_well_formed
from schemamark.core.diagnostics import DiagnosticLevel, compute_diagnostic_stats, has_errors
from schemamark.core.entity import SchemaEntity
from schemamark.core.errors import MalformedEntityError


def test_well_formed_entity_has_no_diagnostics() -> None:
    entity = SchemaEntity("Person", {"name": "Ada", "knows": SchemaEntity("Person")})
    assert check_entity(entity) == []


def test_empty_type_and_context_are_errors() -> None:
    diags = check_entity(SchemaEntity("", context=""))
    assert [(d.level, d.message, d.where) for d in diags] == [
        (DiagnosticLevel.ERROR, "entity type is empty", "<root>"),
        (DiagnosticLevel.ERROR, "entity context is empty", "<root>"),
    ]
    assert has_errors(diags)


def test_nested_problems_are_located_by_path() -> None:
    entity = SchemaEntity(
        "Article",
        {"author": [SchemaEntity("Person", {"name": "x"}), SchemaEntity(" ")]},
    )
    diags = check_entity(entity)
    assert len(diags) == 1
    assert diags[0].where == "Article.author[1]"
    assert diags[0].level == DiagnosticLevel.ERROR


def test_empty_values_are_warnings() -> None:
    entity = SchemaEntity("Thing", {"name": None, "alternateName": "", "sameAs": []})
    diags = check_entity(entity)
    assert [d.where for d in diags] == ["Thing.name", "Thing.alternateName", "Thing.sameAs"]
    assert all(d.level == DiagnosticLevel.WARNING for d in diags)
    assert not has_errors(diags)


def test_empty_property_name_is_an_error() -> None:
    diags = check_entity(SchemaEntity("Thing", {"": "x"}))
    assert [d.level for d in diags] == [DiagnosticLevel.ERROR]


def test_custom_context_is_info() -> None:
    diags = check_entity(SchemaEntity("Recipe", context="https://example.org/vocab"))
    assert [d.level for d in diags] == [DiagnosticLevel.INFO]
    stats = compute_diagnostic_stats(diags)
    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (1, 0, 0, 1)


def test_depth_over_maximum_is_a_warning() -> None:
    inner = SchemaEntity("GeoCoordinates", {"latitude": 1.0})
    middle = SchemaEntity("PostalAddress", {"geo": inner})
    root = SchemaEntity("Person", {"address": middle})

    assert check_entity(root, max_depth=2) == []
    diags = check_entity(root, max_depth=1)
    assert [d.level for d in diags] == [DiagnosticLevel.WARNING]
    assert diags[0].where == "Person.address > PostalAddress.geo"
    # 0 disables the check
    assert check_entity(root, max_depth=0) == []


def test_ensure_well_formed_raises_with_errors_only() -> None:
    entity = SchemaEntity("", {"name": None})
    with pytest.raises(MalformedEntityError) as excinfo:
        ensure_well_formed(entity)
    assert [d.level for d in excinfo.value.diagnostics] == [DiagnosticLevel.ERROR]

    # Warnings alone do not raise
    ensure_well_formed(SchemaEntity("Thing", {"name": None}))
