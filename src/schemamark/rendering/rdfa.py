# topmark:header:start
#
#   project      : SchemaMark
#   file         : rdfa.py
#   file_relpath : src/schemamark/rendering/rdfa.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML RDFa Lite renderer (``vocab`` / ``typeof`` / ``property``).

See https://www.w3.org/TR/rdfa-lite/ for the attribute semantics. Each scoped
container carries its own ``vocab`` so a nested entity from another vocabulary
renders correctly without any prefix declarations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemamark.rendering.formats import RenderFormat
from schemamark.rendering.html import HtmlRenderer, escape
from schemamark.rendering.registry import register_renderer

if TYPE_CHECKING:
    from schemamark.core.entity import SchemaEntity


@register_renderer
class RdfaRenderer(HtmlRenderer):
    """Render entities as HTML RDFa Lite fragments."""

    format = RenderFormat.RDFA
    description = "HTML RDFa Lite (vocab/typeof/property attributes)"

    def scope_attributes(self, entity: SchemaEntity) -> str:
        vocab: str = entity.context.rstrip("/") + "/"
        return f'vocab="{escape(vocab)}" typeof="{escape(entity.type)}"'

    def property_attribute(self, name: str) -> str:
        return f'property="{escape(name)}"'
