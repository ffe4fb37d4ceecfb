# topmark:header:start
#
#   project      : SchemaMark
#   file         : registry.py
#   file_relpath : src/schemamark/rendering/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer registry: maps each `RenderFormat` to its renderer class.

Renderer modules register their class with the `register_renderer` decorator
at import time. Lookup functions import the built-in renderer modules on first
use, so callers never need to import them explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from schemamark.config.logging import get_logger
from schemamark.core.errors import UnknownFormatError
from schemamark.rendering.formats import RenderFormat

if TYPE_CHECKING:
    from collections.abc import Iterator

    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.config.model import RenderConfig
    from schemamark.rendering.base import SchemaRenderer

logger: SchemaMarkLogger = get_logger(__name__)

_R = TypeVar("_R", bound="type[SchemaRenderer[Any]]")

_RENDERERS: dict[RenderFormat, type[SchemaRenderer[Any]]] = {}


@dataclass(frozen=True)
class RendererInfo:
    """Description of a registered renderer (used by the ``formats`` command)."""

    name: str
    label: str
    mime_type: str
    description: str
    aliases: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {
            "name": self.name,
            "label": self.label,
            "mime_type": self.mime_type,
            "description": self.description,
            "aliases": list(self.aliases),
        }


def register_renderer(cls: _R) -> _R:
    """Class decorator registering a renderer under its ``format``.

    Raises:
        ValueError: If another class is already registered for the same format.
    """
    fmt: RenderFormat = cls.format
    existing: type[SchemaRenderer[Any]] | None = _RENDERERS.get(fmt)
    if existing is not None and existing is not cls:
        raise ValueError(f"Renderer already registered for {fmt.key!r}: {existing.__name__}")
    _RENDERERS[fmt] = cls
    logger.debug("Registered renderer %s for %s", cls.__name__, fmt.key)
    return cls


def ensure_renderers_registered() -> None:
    """Import the built-in renderer modules (idempotent)."""
    import schemamark.rendering.jsonld  # noqa: F401
    import schemamark.rendering.microdata  # noqa: F401
    import schemamark.rendering.rdfa  # noqa: F401


def resolve_format(fmt: RenderFormat | str) -> RenderFormat:
    """Return the `RenderFormat` for a member or a (case-insensitive) name or alias.

    Raises:
        UnknownFormatError: If ``fmt`` names no known format.
    """
    if isinstance(fmt, RenderFormat):
        return fmt
    parsed: RenderFormat | None = RenderFormat.parse(fmt)
    if parsed is None:
        raise UnknownFormatError(fmt, valid=RenderFormat.keys())
    return parsed


def get_renderer_class(fmt: RenderFormat | str) -> type[SchemaRenderer[Any]]:
    """Return the renderer class registered for ``fmt``.

    Raises:
        UnknownFormatError: If ``fmt`` is unknown or has no registered renderer.
    """
    ensure_renderers_registered()
    resolved: RenderFormat = resolve_format(fmt)
    try:
        return _RENDERERS[resolved]
    except KeyError:
        raise UnknownFormatError(
            resolved.key, valid=[f.key for f in _RENDERERS]
        ) from None


def get_renderer(
    fmt: RenderFormat | str | None = None,
    config: RenderConfig | None = None,
) -> SchemaRenderer[Any]:
    """Build a renderer for ``fmt`` configured from ``config``.

    Args:
        fmt (RenderFormat | str | None): Format or name; ``None`` uses
            ``config.default_format``.
        config (RenderConfig | None): Configuration (defaults when ``None``).

    Returns:
        SchemaRenderer[Any]: A ready-to-use renderer.

    Raises:
        UnknownFormatError: If ``fmt`` names no registered renderer.
    """
    if config is None:
        from schemamark.config.model import RenderConfig

        config = RenderConfig()
    resolved: RenderFormat = resolve_format(fmt) if fmt is not None else config.default_format
    cls: type[SchemaRenderer[Any]] = get_renderer_class(resolved)
    return cls(
        config.options_for(resolved),
        max_depth=config.max_depth,
        strict=config.strict,
    )


def iter_renderer_infos() -> Iterator[RendererInfo]:
    """Yield a `RendererInfo` for every registered renderer, in format order."""
    ensure_renderers_registered()
    for fmt in RenderFormat:
        cls: type[SchemaRenderer[Any]] | None = _RENDERERS.get(fmt)
        if cls is None:
            continue
        yield RendererInfo(
            name=fmt.key,
            label=fmt.label,
            mime_type=cls().mime_type(),
            description=cls.description,
            aliases=fmt.aliases,
        )
