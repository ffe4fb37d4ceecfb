# topmark:header:start
#
#   project      : SchemaMark
#   file         : checks.py
#   file_relpath : src/schemamark/core/checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural checks for schema entities.

These checks cover the preconditions the renderers rely on (non-empty type and
context, non-empty property names) and flag values that would render as empty
markup. They are *not* a vocabulary validator: property names and types are
never compared against the Schema.org vocabulary.

Levels:
    - ERROR: the entity violates a rendering precondition.
    - WARNING: the entity renders, but probably not as intended.
    - INFO: noteworthy but harmless (e.g. a custom vocabulary context).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemamark.config.logging import get_logger
from schemamark.constants import DEFAULT_CONTEXT, DEFAULT_MAX_DEPTH
from schemamark.core.diagnostics import Diagnostic, DiagnosticLevel, has_errors
from schemamark.core.errors import MalformedEntityError, PropertyPath
from schemamark.core.values import EntityValue, ScalarValue, SequenceValue

if TYPE_CHECKING:
    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.core.entity import SchemaEntity
    from schemamark.core.values import PropertyValue

logger: SchemaMarkLogger = get_logger(__name__)


def check_entity(entity: SchemaEntity, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Diagnostic]:
    """Check an entity (recursively) and return the diagnostics found.

    Args:
        entity (SchemaEntity): The entity to check.
        max_depth (int): Maximum nesting depth before a WARNING is emitted
            (``0`` disables the depth check).

    Returns:
        list[Diagnostic]: Diagnostics in traversal order.
    """
    diags: list[Diagnostic] = []
    _check(entity, PropertyPath(), diags, max_depth=max_depth, parent_context=None)
    logger.debug("check_entity(%s): %d diagnostic(s)", entity.type, len(diags))
    return diags


def ensure_well_formed(entity: SchemaEntity, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Raise `MalformedEntityError` if checking ``entity`` yields any ERROR.

    Raises:
        MalformedEntityError: With all diagnostics attached.
    """
    diags: list[Diagnostic] = check_entity(entity, max_depth=max_depth)
    if has_errors(diags):
        errors: list[Diagnostic] = [d for d in diags if d.level == DiagnosticLevel.ERROR]
        raise MalformedEntityError(
            f"Entity {entity.type or '<untyped>'!s} is malformed ({len(errors)} error(s))",
            diagnostics=errors,
        )


def _check(
    entity: SchemaEntity,
    path: PropertyPath,
    diags: list[Diagnostic],
    *,
    max_depth: int,
    parent_context: str | None,
) -> None:
    where: str = str(path) if path.segments else (entity.type or "<root>")

    if not entity.type or not entity.type.strip():
        diags.append(Diagnostic(DiagnosticLevel.ERROR, "entity type is empty", where))
    if not entity.context or not entity.context.strip():
        diags.append(Diagnostic(DiagnosticLevel.ERROR, "entity context is empty", where))
    elif entity.context != parent_context and entity.context.rstrip("/") != DEFAULT_CONTEXT:
        diags.append(
            Diagnostic(
                DiagnosticLevel.INFO,
                f"custom vocabulary context {entity.context!r}",
                where,
            )
        )

    if max_depth and path.depth > max_depth:
        diags.append(
            Diagnostic(
                DiagnosticLevel.WARNING,
                f"nesting depth {path.depth} exceeds the configured maximum ({max_depth})",
                where,
            )
        )
        # Do not descend further: the graph may be cyclic
        return

    for name, value in entity.iter_values():
        prop_path: PropertyPath = path.child(entity.type, name)
        if not name or not name.strip():
            diags.append(Diagnostic(DiagnosticLevel.ERROR, "empty property name", str(prop_path)))
            continue
        _check_value(value, prop_path, diags, max_depth=max_depth, context=entity.context)


def _check_value(
    value: PropertyValue,
    path: PropertyPath,
    diags: list[Diagnostic],
    *,
    max_depth: int,
    context: str,
) -> None:
    match value:
        case EntityValue(entity=nested):
            _check(nested, path, diags, max_depth=max_depth, parent_context=context)
        case SequenceValue(items=()):
            diags.append(
                Diagnostic(DiagnosticLevel.WARNING, "empty sequence renders nothing", str(path))
            )
        case SequenceValue(items=items):
            for index, item in enumerate(items):
                _check_value(item, path.item(index), diags, max_depth=max_depth, context=context)
        case ScalarValue(value=None) | ScalarValue(value=""):
            diags.append(
                Diagnostic(
                    DiagnosticLevel.WARNING, "empty value renders as empty markup", str(path)
                )
            )
        case _:
            pass
