# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_values.py
#   file_relpath : tests/core/test_values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for property value classification and text conversion."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum, IntEnum

import pytest

from schemamark.core.entity import SchemaEntity
from schemamark.core.errors import PropertyPath, UnencodableValueError
from schemamark.core.values import (
    EntityValue,
    OpaqueValue,
    ScalarValue,
    SequenceValue,
    classify_value,
    opaque_json,
    scalar_text,
    value_text,
)
from tests.conftest import parametrize


class Color(Enum):
    RED = "red"


class Level(IntEnum):
    HIGH = 3


@dataclass
class Point:
    x: int
    y: int


class GeoPoint:
    def __init__(self) -> None:
        self.lat = 51.5
        self.lon = -0.1
        self._cache: dict[str, float] = {}


_PATH = PropertyPath().child("Thing", "value")


@parametrize("raw", [True, 0, 1.5, "text", None])
def test_scalars_classify_as_scalar(raw: object) -> None:
    assert classify_value(raw) == ScalarValue(raw)  # type: ignore[arg-type]


def test_entity_and_sequence_classification() -> None:
    nested = SchemaEntity("Person")
    assert classify_value(nested) == EntityValue(nested)
    assert classify_value([1, (nested,)]) == SequenceValue(
        (ScalarValue(1), SequenceValue((EntityValue(nested),)))
    )


@parametrize(
    ("raw", "text"),
    [
        (Color.RED, "red"),
        (Level.HIGH, "3"),
        (Decimal("1.10"), "1.10"),
        (datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc), "2024-05-06T07:08:09+00:00"),
    ],
)
def test_values_with_natural_text(raw: object, text: str) -> None:
    """Enums, decimals and datetimes carry their natural textual form."""
    value = classify_value(raw)
    assert isinstance(value, OpaqueValue)
    assert value_text(value, _PATH) == text


def test_int_enum_is_not_treated_as_scalar() -> None:
    """An IntEnum member renders as its value's text, not as a native integer."""
    assert classify_value(Level.HIGH) == OpaqueValue(Level.HIGH, "3")


def test_scalar_text_spellings() -> None:
    assert scalar_text(True) == "true"
    assert scalar_text(False) == "false"
    assert scalar_text(None) == ""
    assert scalar_text(42) == "42"


def test_opaque_containers_use_json_fallback() -> None:
    """Mappings, sets and dataclasses without a textual form are JSON-encoded."""
    assert value_text(classify_value({"a": 1}), _PATH) == '{"a": 1}'  # type: ignore[arg-type]
    assert value_text(classify_value({2, 1}), _PATH) == "[1, 2]"  # type: ignore[arg-type]
    assert opaque_json(Point(1, 2), _PATH) == '{"x": 1, "y": 2}'


def test_unencodable_object_reports_path() -> None:
    with pytest.raises(UnencodableValueError) as excinfo:
        opaque_json(object(), _PATH)
    assert excinfo.value.path == _PATH
    assert "Thing.value" in excinfo.value.message


def test_cyclic_mapping_is_unencodable() -> None:
    cyclic: dict[str, object] = {}
    cyclic["self"] = cyclic
    with pytest.raises(UnencodableValueError):
        opaque_json(cyclic, _PATH)


def test_plain_object_encodes_public_attributes() -> None:
    assert opaque_json(GeoPoint(), _PATH) == '{"lat": 51.5, "lon": -0.1}'
    assert value_text(classify_value(GeoPoint()), _PATH) == '{"lat": 51.5, "lon": -0.1}'


def test_cyclic_plain_object_is_unencodable() -> None:
    node = GeoPoint()
    node.parent = node  # type: ignore[attr-defined]
    with pytest.raises(UnencodableValueError):
        opaque_json(node, _PATH)
