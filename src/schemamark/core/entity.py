# topmark:header:start
#
#   project      : SchemaMark
#   file         : entity.py
#   file_relpath : src/schemamark/core/entity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema entity model.

A `SchemaEntity` is the typed "thing" SchemaMark renders: a vocabulary type name
(e.g. ``"Article"``), a context URI (``"https://schema.org"`` by default) and an
ordered mapping of property names to values.

Immutability:
    Entities are frozen dataclasses and their property mapping is exposed as a
    read-only `types.MappingProxyType`. Use `SchemaEntity.with_property` or
    `SchemaEntity.without_property` to derive modified copies.

Property values:
    Values are stored as given (plain Python objects). Renderers classify them
    into the `schemamark.core.values.PropertyValue` tagged union while walking
    the entity; see `SchemaEntity.iter_values`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from schemamark.constants import DEFAULT_CONTEXT, JSONLD_CONTEXT_KEY, JSONLD_TYPE_KEY

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from schemamark.core.values import PropertyValue


@dataclass(frozen=True, slots=True, init=False)
class SchemaEntity:
    """Immutable Schema.org-style entity.

    Attributes:
        type (str): Vocabulary type name, e.g. ``"Person"``.
        context (str): Base vocabulary URI, e.g. ``"https://schema.org"``.
        properties (Mapping[str, Any]): Read-only, insertion-ordered property mapping.
    """

    type: str
    context: str
    properties: Mapping[str, Any] = field(compare=False)

    def __init__(
        self,
        type: str,  # noqa: A002 - mirrors the vocabulary term
        properties: Mapping[str, Any] | None = None,
        context: str = DEFAULT_CONTEXT,
    ) -> None:
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "context", context)
        object.__setattr__(self, "properties", MappingProxyType(dict(properties or {})))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaEntity):
            return NotImplemented
        # Order is significant: it determines output order
        return (
            self.type == other.type
            and self.context == other.context
            and list(self.properties.items()) == list(other.properties.items())
        )

    def __hash__(self) -> int:
        return hash((self.type, self.context, tuple(self.properties)))

    def __repr__(self) -> str:
        return (
            f"SchemaEntity(type={self.type!r}, context={self.context!r}, "
            f"properties={dict(self.properties)!r})"
        )

    @property
    def type_uri(self) -> str:
        """Full type identifier, ``context + "/" + type`` (no doubled slash)."""
        return f"{self.context.rstrip('/')}/{self.type}"

    def get_property(self, name: str, default: Any = None) -> Any:
        """Return the value of property ``name`` or ``default`` when absent."""
        return self.properties.get(name, default)

    def has_property(self, name: str) -> bool:
        """Return True if property ``name`` is set (even to ``None``)."""
        return name in self.properties

    def with_property(self, name: str, value: Any) -> SchemaEntity:
        """Return a copy with ``name`` set to ``value``.

        Replacing an existing property keeps its position; a new property is
        appended after the existing ones.
        """
        props: dict[str, Any] = dict(self.properties)
        props[name] = value
        return SchemaEntity(self.type, props, self.context)

    def without_property(self, name: str) -> SchemaEntity:
        """Return a copy with ``name`` removed (no-op when absent)."""
        props: dict[str, Any] = {k: v for k, v in self.properties.items() if k != name}
        return SchemaEntity(self.type, props, self.context)

    def iter_values(self) -> Iterator[tuple[str, PropertyValue]]:
        """Yield ``(name, PropertyValue)`` pairs in insertion order."""
        from schemamark.core.values import classify_value

        for name, value in self.properties.items():
            yield name, classify_value(value)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-LD-shaped plain dict for this entity.

        Nested entities are converted recursively (each keeps its own
        ``@context``), sequences become lists, and dates/times become ISO 8601
        strings. Other values are returned unchanged.
        """
        data: dict[str, Any] = {
            JSONLD_CONTEXT_KEY: self.context,
            JSONLD_TYPE_KEY: self.type,
        }
        for name, value in self.properties.items():
            data[name] = _plain_value(value)
        return data


def _plain_value(value: Any) -> Any:
    if isinstance(value, SchemaEntity):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain_value(v) for v in value]
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value
