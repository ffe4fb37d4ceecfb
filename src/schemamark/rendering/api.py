# topmark:header:start
#
#   project      : SchemaMark
#   file         : api.py
#   file_relpath : src/schemamark/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API for rendering entities.

High-level helpers combining the renderer registry with a `RenderConfig`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from schemamark.rendering.registry import get_renderer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from schemamark.config.model import RenderConfig
    from schemamark.core.entity import SchemaEntity
    from schemamark.rendering.base import SchemaRenderer
    from schemamark.rendering.formats import RenderFormat


def render(
    entity: SchemaEntity,
    fmt: RenderFormat | str | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render ``entity`` in ``fmt`` (default: the configured default format).

    Raises:
        UnknownFormatError: If ``fmt`` names no registered renderer.
        MalformedEntityError: If the entity is malformed.
        UnencodableValueError: If a value cannot be encoded.
    """
    return get_renderer(fmt, config).render(entity)


def render_many(
    entities: Iterable[SchemaEntity],
    fmt: RenderFormat | str | None = None,
    config: RenderConfig | None = None,
) -> list[str]:
    """Render several entities with one renderer, preserving order.

    Nothing is returned unless every entity renders.
    """
    renderer: SchemaRenderer[Any] = get_renderer(fmt, config)
    return [renderer.render(entity) for entity in entities]
