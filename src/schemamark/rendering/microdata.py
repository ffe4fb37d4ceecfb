# topmark:header:start
#
#   project      : SchemaMark
#   file         : microdata.py
#   file_relpath : src/schemamark/rendering/microdata.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML Microdata renderer (``itemscope`` / ``itemtype`` / ``itemprop``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemamark.rendering.formats import RenderFormat
from schemamark.rendering.html import HtmlRenderer, escape
from schemamark.rendering.registry import register_renderer

if TYPE_CHECKING:
    from schemamark.core.entity import SchemaEntity


@register_renderer
class MicrodataRenderer(HtmlRenderer):
    """Render entities as HTML Microdata fragments."""

    format = RenderFormat.MICRODATA
    description = "HTML Microdata (itemscope/itemtype/itemprop attributes)"

    def scope_attributes(self, entity: SchemaEntity) -> str:
        return f'itemscope itemtype="{escape(entity.type_uri)}"'

    def property_attribute(self, name: str) -> str:
        return f'itemprop="{escape(name)}"'
