# topmark:header:start
#
#   project      : SchemaMark
#   file         : jsonld.py
#   file_relpath : src/schemamark/rendering/jsonld.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON-LD renderer.

The entity becomes a single JSON object: ``@context``, ``@type``, then one key
per property in insertion order. Nested entities become nested objects, which
omit ``@context`` when it equals their parent's (unless
``nested_context = "always"``). Sequences become arrays and scalars keep their
native JSON type. Opaque values use their textual form as a string, or the
generic JSON fallback.

Non-finite floats (``nan``, ``inf``) have no JSON representation and raise
`UnencodableValueError`.
"""

from __future__ import annotations

import json
import math
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from schemamark.config.logging import get_logger
from schemamark.config.options import JsonLdOptions
from schemamark.constants import JSONLD_CONTEXT_KEY, JSONLD_TYPE_KEY
from schemamark.core.errors import PropertyPath, UnencodableValueError
from schemamark.core.values import (
    EntityValue,
    OpaqueValue,
    ScalarValue,
    SequenceValue,
    opaque_json,
)
from schemamark.rendering.base import SchemaRenderer
from schemamark.rendering.formats import NestedContext, RenderFormat
from schemamark.rendering.registry import register_renderer

if TYPE_CHECKING:
    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.core.entity import SchemaEntity
    from schemamark.core.values import PropertyValue

logger: SchemaMarkLogger = get_logger(__name__)

JSONLD_MIME_TYPE: str = "application/ld+json"
SCRIPT_MIME_TYPE: str = "text/html"


def compact(value: Any) -> Any:
    """Recursively drop ``None``, ``""``, ``[]`` and objects that become empty.

    Keys starting with ``@`` are always kept.
    """
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for key, item in value.items():
            if key.startswith("@"):
                out[key] = item
                continue
            cleaned: Any = compact(item)
            if not _is_empty(cleaned):
                out[key] = cleaned
        return out
    if isinstance(value, list):
        items: list[Any] = [compact(item) for item in value]
        return [item for item in items if not _is_empty(item)]
    return value


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


@register_renderer
class JsonLdRenderer(SchemaRenderer[JsonLdOptions]):
    """Render entities as JSON-LD documents."""

    format = RenderFormat.JSON_LD
    description = "JSON-LD document (optionally wrapped in a <script> element)"

    @classmethod
    def default_options(cls) -> JsonLdOptions:
        return JsonLdOptions()

    def mime_type(self) -> str:
        return SCRIPT_MIME_TYPE if self._options.include_script_tag else JSONLD_MIME_TYPE

    def render_with_script_tag(self, entity: SchemaEntity) -> str:
        """Render ``entity`` wrapped in a ``<script>`` element.

        This renderer is not modified; a copy with ``include_script_tag`` set
        does the work.
        """
        wrapped: JsonLdRenderer = JsonLdRenderer(
            replace(self._options, include_script_tag=True),
            max_depth=self._max_depth,
            strict=self._strict,
        )
        return wrapped.render(entity)

    def to_data(self, entity: SchemaEntity) -> dict[str, Any]:
        """Return the JSON-LD document as plain Python data (before encoding)."""
        data: dict[str, Any] = self._entity_object(entity, PropertyPath(), parent_context=None)
        if self._options.compact_output:
            data = compact(data)
        return data

    def _render_root(self, entity: SchemaEntity) -> str:
        opts: JsonLdOptions = self._options
        data: dict[str, Any] = self.to_data(entity)
        text: str = json.dumps(
            data,
            indent=2 if opts.pretty_print else None,
            separators=None if opts.pretty_print else (",", ":"),
            ensure_ascii=not opts.unescape_unicode,
            allow_nan=False,
        )
        if not opts.unescape_slashes:
            # "/" only ever occurs inside JSON strings, where "\/" is a valid escape
            text = text.replace("/", "\\/")
        if opts.include_script_tag:
            # "<" only occurs inside JSON strings; its < escape keeps
            # "</script>" and "<!--" from ending or altering the element
            text = text.replace("<", "\\u003c")
            return f'<script type="{JSONLD_MIME_TYPE}">\n{text}\n</script>'
        return text

    def _entity_object(
        self,
        entity: SchemaEntity,
        path: PropertyPath,
        *,
        parent_context: str | None,
    ) -> dict[str, Any]:
        self._enter_entity(entity, path)
        obj: dict[str, Any] = {}
        if (
            parent_context is None
            or self._options.nested_context == NestedContext.ALWAYS
            or entity.context != parent_context
        ):
            obj[JSONLD_CONTEXT_KEY] = entity.context
        obj[JSONLD_TYPE_KEY] = entity.type
        for name, value in entity.iter_values():
            obj[name] = self._value(value, path.child(entity.type, name), context=entity.context)
        return obj

    def _value(self, value: PropertyValue, path: PropertyPath, *, context: str) -> Any:
        logger.trace("json-ld: encoding %s at %s", type(value).__name__, path)
        match value:
            case EntityValue(entity=nested):
                return self._entity_object(nested, path, parent_context=context)
            case SequenceValue(items=items):
                return [
                    self._value(item, path.item(index), context=context)
                    for index, item in enumerate(items)
                ]
            case ScalarValue(value=float() as number) if not math.isfinite(number):
                raise UnencodableValueError(
                    f"non-finite float {number!r} has no JSON representation",
                    path=path,
                    value=number,
                )
            case ScalarValue(value=scalar):
                return scalar
            case OpaqueValue(text=str() as text):
                return text
            case OpaqueValue(value=raw):
                return json.loads(opaque_json(raw, path))
