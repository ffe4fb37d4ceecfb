# topmark:header:start
#
#   project      : SchemaMark
#   file         : errors.py
#   file_relpath : src/schemamark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for SchemaMark.

Library code raises these exceptions; the CLI maps them onto Click exceptions
with exit codes (see `schemamark.cli.errors`).

Rendering errors always identify the offending property through a
`PropertyPath` (entity type + property name chain), e.g.
``Article.author[1] > Person.address > PostalAddress.geo``. Renderers assemble
their output in memory and only return it on success, so an exception never
leaves a partially written result behind.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from schemamark.core.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One step in a property path: the owning entity type and the property name."""

    entity_type: str
    name: str
    index: int | None = None

    def __str__(self) -> str:
        suffix: str = f"[{self.index}]" if self.index is not None else ""
        return f"{self.entity_type}.{self.name}{suffix}"


@dataclass(frozen=True, slots=True)
class PropertyPath:
    """Immutable chain of `PathSegment` from the root entity down to a value."""

    segments: tuple[PathSegment, ...] = ()

    def child(self, entity_type: str, name: str) -> PropertyPath:
        """Return a new path extended by ``entity_type.name``."""
        return PropertyPath((*self.segments, PathSegment(entity_type, name)))

    def item(self, index: int) -> PropertyPath:
        """Return a new path whose last segment points at sequence item ``index``."""
        if not self.segments:
            return self
        last: PathSegment = self.segments[-1]
        return PropertyPath(
            (*self.segments[:-1], PathSegment(last.entity_type, last.name, index)),
        )

    @property
    def depth(self) -> int:
        """Number of segments in the path."""
        return len(self.segments)

    def __str__(self) -> str:
        return " > ".join(str(s) for s in self.segments) or "<root>"


def _format_context_value(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        items: list[str] = [str(v) for v in value[:3]]
        return "[" + ", ".join(items) + ("..." if len(value) > 3 else "") + "]"
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return f"[{type(value).__name__} object]"


class SchemaMarkError(Exception):
    """Base class for all SchemaMark errors.

    Args:
        message (str): Human-readable error message.
        context (Mapping[str, object] | None): Optional key/value details appended to
            the message under an "Additional context" heading.
    """

    def __init__(self, message: str, *, context: Mapping[str, object] | None = None) -> None:
        self.context: dict[str, object] = dict(context or {})
        if self.context:
            message += "\n\nAdditional context:"
            for key, value in self.context.items():
                message += f"\n  {key}: {_format_context_value(value)}"
        super().__init__(message)
        self.message: str = message


class MalformedEntityError(SchemaMarkError):
    """Raised when an entity violates a structural precondition (e.g. empty type)."""

    def __init__(self, message: str, *, diagnostics: Sequence[Diagnostic] = ()) -> None:
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)
        super().__init__(
            message,
            context={"problems": [str(d) for d in self.diagnostics]} if self.diagnostics else None,
        )


class UnencodableValueError(SchemaMarkError):
    """Raised when a property value cannot be encoded (cyclic, non-serializable, too deep)."""

    def __init__(self, reason: str, *, path: PropertyPath, value: object = None) -> None:
        self.path: PropertyPath = path
        self.reason: str = reason
        self.value_type: str = type(value).__name__
        super().__init__(
            f"Cannot encode value at {path}: {reason}",
            context={"value type": self.value_type},
        )


class UnknownFormatError(SchemaMarkError):
    """Raised when a render format name does not match any registered renderer."""

    def __init__(self, name: str, *, valid: Sequence[str]) -> None:
        self.name: str = name
        super().__init__(
            f"Unknown render format: {name!r}",
            context={"valid formats": list(valid)},
        )


class EntityLoadError(SchemaMarkError):
    """Raised when an input document cannot be turned into a SchemaEntity."""
