# topmark:header:start
#
#   project      : SchemaMark
#   file         : base.py
#   file_relpath : src/schemamark/rendering/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for entity renderers.

A `SchemaRenderer` turns a `SchemaEntity` graph into one markup string. Each
concrete renderer implements `SchemaRenderer._render_root` for its format; the
base class owns what all formats share:

- the structural precondition checks (non-empty type and context), or a full
  `schemamark.core.checks.ensure_well_formed` pass in strict mode;
- the nesting depth guard (`max_depth`), which also turns accidental cycles
  into a typed error instead of a `RecursionError`;
- DEBUG logging per top-level call.

Renderers hold only immutable options, so a single instance may be reused and
shared freely. Output is assembled in memory and returned only on success.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from schemamark.config.logging import get_logger
from schemamark.constants import DEFAULT_MAX_DEPTH
from schemamark.core.checks import ensure_well_formed
from schemamark.core.diagnostics import Diagnostic, DiagnosticLevel
from schemamark.core.errors import MalformedEntityError, PropertyPath, UnencodableValueError

if TYPE_CHECKING:
    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.core.entity import SchemaEntity
    from schemamark.rendering.formats import RenderFormat

logger: SchemaMarkLogger = get_logger(__name__)

OptionsT = TypeVar("OptionsT")


class SchemaRenderer(ABC, Generic[OptionsT]):
    """Abstract renderer for one markup format.

    Subclasses set the class attributes ``format`` and ``description`` and
    implement `_render_root`, `mime_type` and `default_options`.

    Args:
        options (OptionsT | None): Format options (``None`` uses the defaults).
        max_depth (int): Maximum entity nesting depth; ``0`` disables the guard.
        strict (bool): Run the full entity check before rendering and raise
            `MalformedEntityError` on any ERROR diagnostic.
    """

    format: ClassVar[RenderFormat]
    description: ClassVar[str] = ""

    def __init__(
        self,
        options: OptionsT | None = None,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        strict: bool = False,
    ) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self._options: OptionsT = options if options is not None else self.default_options()
        self._max_depth: int = max_depth
        self._strict: bool = strict

    @property
    def options(self) -> OptionsT:
        """The (immutable) options this renderer was built with."""
        return self._options

    @property
    def max_depth(self) -> int:
        """Maximum entity nesting depth (``0``: unlimited)."""
        return self._max_depth

    @property
    def strict(self) -> bool:
        """Whether entities are fully checked before rendering."""
        return self._strict

    @classmethod
    @abstractmethod
    def default_options(cls) -> OptionsT:
        """Return the options used when none are given."""

    @abstractmethod
    def mime_type(self) -> str:
        """Return the MIME type of the produced output."""

    def format_name(self) -> str:
        """Return the stable format identifier (``json-ld``, ``microdata``, ``rdfa``)."""
        return self.format.key

    def render(self, entity: SchemaEntity) -> str:
        """Render ``entity`` (and everything it contains) to a string.

        Args:
            entity (SchemaEntity): The root entity.

        Returns:
            str: The complete rendering.

        Raises:
            MalformedEntityError: If an entity has an empty type or context (or,
                in strict mode, if checking the entity yields any ERROR).
            UnencodableValueError: If a value cannot be encoded or the nesting
                depth exceeds ``max_depth``.
        """
        logger.debug(
            "Rendering %s entity as %s (strict=%s, max_depth=%d)",
            entity.type,
            self.format_name(),
            self._strict,
            self._max_depth,
        )
        if self._strict:
            ensure_well_formed(entity, max_depth=self._max_depth)
        try:
            return self._render_root(entity)
        except RecursionError as exc:
            # Only reachable with the depth guard disabled
            raise UnencodableValueError(
                "maximum recursion depth exceeded (cyclic entity graph?)",
                path=PropertyPath(),
                value=entity,
            ) from exc

    @abstractmethod
    def _render_root(self, entity: SchemaEntity) -> str:
        """Render the root entity; implementations recurse via `_enter_entity`."""

    def _enter_entity(self, entity: SchemaEntity, path: PropertyPath) -> None:
        """Validate an entity about to be rendered at ``path``.

        Raises:
            MalformedEntityError: If the entity's type or context is empty.
            UnencodableValueError: If ``path`` is deeper than ``max_depth``.
        """
        if self._max_depth and path.depth > self._max_depth:
            raise UnencodableValueError(
                f"nesting depth {path.depth} exceeds the configured maximum ({self._max_depth})",
                path=path,
                value=entity,
            )
        where: str = str(path)
        problems: list[Diagnostic] = []
        if not entity.type or not entity.type.strip():
            problems.append(Diagnostic(DiagnosticLevel.ERROR, "entity type is empty", where))
        if not entity.context or not entity.context.strip():
            problems.append(Diagnostic(DiagnosticLevel.ERROR, "entity context is empty", where))
        if problems:
            raise MalformedEntityError(
                f"Cannot render malformed entity at {where}",
                diagnostics=problems,
            )
