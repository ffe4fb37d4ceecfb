# topmark:header:start
#
#   project      : SchemaMark
#   file         : values.py
#   file_relpath : src/schemamark/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property value classification.

Entity properties hold loose Python values. Before rendering, each value is
classified into exactly one variant of the `PropertyValue` tagged union:

    - `ScalarValue`: ``bool``, ``int``, ``float``, ``str`` or ``None``.
    - `EntityValue`: a nested `SchemaEntity`.
    - `SequenceValue`: an ordered ``list``/``tuple`` of further values.
    - `OpaqueValue`: anything else. Values with a natural textual form
      (dates and times, ``Decimal``, ``UUID``, ``Enum`` members, objects whose
      class overrides ``__str__``) carry that text; all others are encoded with
      the generic JSON fallback (`opaque_json`), which spells plain objects
      as their public attributes.

Renderers pattern-match on the variants, so adding a variant is a type error
everywhere it is not handled.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, is_dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias
from uuid import UUID

from schemamark.core.entity import SchemaEntity
from schemamark.core.errors import UnencodableValueError

if TYPE_CHECKING:
    from schemamark.core.errors import PropertyPath


@dataclass(frozen=True, slots=True)
class ScalarValue:
    """A primitive value rendered natively (JSON-LD) or as text (HTML formats)."""

    value: bool | int | float | str | None


@dataclass(frozen=True, slots=True)
class EntityValue:
    """A nested entity rendered recursively."""

    entity: SchemaEntity


@dataclass(frozen=True, slots=True)
class SequenceValue:
    """An ordered sequence; each item renders under the same property name."""

    items: tuple[PropertyValue, ...]


@dataclass(frozen=True, slots=True)
class OpaqueValue:
    """Any other value.

    Attributes:
        value (object): The original value.
        text (str | None): The value's natural textual form, or ``None`` when
            the generic JSON fallback must be used.
    """

    value: object
    text: str | None


PropertyValue: TypeAlias = "ScalarValue | EntityValue | SequenceValue | OpaqueValue"


def textual_form(value: object) -> str | None:
    """Return the natural textual form of ``value``, or ``None`` if it has none.

    Args:
        value (object): Any value that is not a scalar, entity or sequence.

    Returns:
        str | None: ISO 8601 for dates/times, the member value for enums, ``str()``
            for decimals, UUIDs and objects whose class overrides ``__str__``;
            ``None`` for containers and plain objects.
    """
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return scalar_text(value.value) if _is_scalar(value.value) else str(value.value)
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, (Mapping, set, frozenset, bytes, bytearray)):
        return None
    if type(value).__str__ is not object.__str__:
        return str(value)
    return None


def _is_scalar(value: object) -> bool:
    return value is None or isinstance(value, (bool, int, float, str))


def classify_value(value: Any) -> PropertyValue:
    """Classify a raw property value into the `PropertyValue` union.

    Args:
        value (Any): The raw property value.

    Returns:
        PropertyValue: The classified value. Sequences are classified recursively.
    """
    match value:
        case SchemaEntity():
            return EntityValue(value)
        case Enum():
            # Enum members may subclass str/int; keep them out of the scalar branch
            return OpaqueValue(value, textual_form(value))
        case bool() | int() | float() | str() | None:
            return ScalarValue(value)
        case list() | tuple():
            return SequenceValue(tuple(classify_value(v) for v in value))
        case _:
            return OpaqueValue(value, textual_form(value))


def scalar_text(value: bool | int | float | str | None) -> str:
    """Return the display text of a scalar.

    Booleans use the JSON spelling (``true``/``false``) and ``None`` is empty.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str.__str__(value)
    return str(value)


def _json_default(obj: object) -> object:
    """``json.dumps`` hook used by the generic fallback."""
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, (set, frozenset)):
        # Sets have no order; sort by repr so output stays deterministic
        return sorted(obj, key=repr)
    text: str | None = textual_form(obj)
    if text is not None:
        return text
    attrs: Any = getattr(obj, "__dict__", None)
    if isinstance(attrs, dict):
        # Plain objects encode as their public attributes
        public: dict[str, Any] = {
            str(k): v for k, v in attrs.items() if not str(k).startswith("_")
        }
        if public:
            return public
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def opaque_json(value: object, path: PropertyPath) -> str:
    """Encode ``value`` with the generic structured-text (JSON) fallback.

    Args:
        value (object): The value to encode.
        path (PropertyPath): Location of the value, used in error reports.

    Returns:
        str: Compact JSON text.

    Raises:
        UnencodableValueError: If the value is cyclic, contains non-finite
            floats, or contains objects with no JSON form.
    """
    try:
        return json.dumps(value, default=_json_default, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise UnencodableValueError(str(exc), path=path, value=value) from exc


def value_text(value: ScalarValue | OpaqueValue, path: PropertyPath) -> str:
    """Return the text for a scalar or opaque value (before any escaping)."""
    match value:
        case ScalarValue(value=v):
            return scalar_text(v)
        case OpaqueValue(text=str() as text):
            return text
        case OpaqueValue(value=v):
            return opaque_json(v, path)
