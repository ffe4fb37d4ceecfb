# topmark:header:start
#
#   project      : SchemaMark
#   file         : html.py
#   file_relpath : src/schemamark/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared HTML rendering for the Microdata and RDFa renderers.

Both HTML formats have the same recursive shape; they differ only in the
attributes that open a scoped container and that tag a property. Pretty-printed
output for ``Person{name: "Ada <Lovelace>"}`` in Microdata:

```html
<div itemscope itemtype="https://schema.org/Person">
  <span itemprop="name">Ada &lt;Lovelace&gt;</span>
</div>
```

Rules:
    - Scalars and opaque values become escaped text in a ``span`` (or a
      semantic element, or a ``meta`` element, depending on the options).
    - A nested entity is wrapped in ``<div PROPERTY-ATTR>``; its complete
      rendering is re-indented one level deeper than the wrapper. Empty lines
      are never padded.
    - A sequence expands into one sibling block per item under the same
      property name; an empty sequence renders nothing.
    - Text and attribute values are escaped with `html.escape` (``&``, ``<``,
      ``>``, ``"`` and ``'``).
"""

from __future__ import annotations

import html
from abc import abstractmethod
from typing import TYPE_CHECKING

from schemamark.config.logging import get_logger
from schemamark.config.options import HtmlOptions
from schemamark.constants import INDENT_UNIT
from schemamark.core.errors import PropertyPath
from schemamark.core.values import (
    EntityValue,
    OpaqueValue,
    ScalarValue,
    SequenceValue,
    value_text,
)
from schemamark.rendering.base import SchemaRenderer

if TYPE_CHECKING:
    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.core.entity import SchemaEntity
    from schemamark.core.values import PropertyValue

logger: SchemaMarkLogger = get_logger(__name__)

# Properties that are not meant to be visible on the page
META_PROPERTIES: frozenset[str] = frozenset(
    {"datePublished", "dateModified", "dateCreated", "wordCount", "identifier"}
)

SEMANTIC_CONTAINERS: dict[str, str] = {"Article": "article"}

SEMANTIC_PROPERTY_ELEMENTS: dict[str, str] = {
    "headline": "h1",
    "name": "h1",
    "alternativeHeadline": "h2",
    "description": "p",
    "articleBody": "div",
    "url": "a",
    "image": "img",
}

HTML_MIME_TYPE: str = "text/html"


def escape(text: str) -> str:
    """Escape text for use in HTML element content or a quoted attribute value."""
    return html.escape(text, quote=True)


def indent_block(text: str, level: int) -> str:
    """Prefix every non-empty line of ``text`` with ``level`` indentation units."""
    prefix: str = INDENT_UNIT * level
    return "\n".join(prefix + line if line else line for line in text.split("\n"))


class HtmlRenderer(SchemaRenderer[HtmlOptions]):
    """Base class of the HTML renderers (stateless apart from its options)."""

    @classmethod
    def default_options(cls) -> HtmlOptions:
        return HtmlOptions()

    def mime_type(self) -> str:
        return HTML_MIME_TYPE

    @abstractmethod
    def scope_attributes(self, entity: SchemaEntity) -> str:
        """Return the (escaped) attributes opening the scoped container of ``entity``."""

    @abstractmethod
    def property_attribute(self, name: str) -> str:
        """Return the (escaped) attribute tagging an element with property ``name``."""

    def _render_root(self, entity: SchemaEntity) -> str:
        return self._render_entity(entity, PropertyPath())

    def _newline(self) -> str:
        return "\n" if self._options.pretty_print else ""

    def _indent(self, level: int) -> str:
        return INDENT_UNIT * level if self._options.pretty_print else ""

    def _container_element(self, entity: SchemaEntity) -> str:
        if self._options.use_semantic_elements:
            return SEMANTIC_CONTAINERS.get(entity.type, self._options.container_element)
        return self._options.container_element

    def _render_entity(self, entity: SchemaEntity, path: PropertyPath) -> str:
        self._enter_entity(entity, path)
        element: str = self._container_element(entity)
        parts: list[str] = [f"<{element} {self.scope_attributes(entity)}>{self._newline()}"]
        for name, value in entity.iter_values():
            parts.append(self._render_property(name, value, path.child(entity.type, name), 1))
        parts.append(f"</{element}>")
        return "".join(parts)

    def _render_property(
        self,
        name: str,
        value: PropertyValue,
        path: PropertyPath,
        level: int,
    ) -> str:
        logger.trace("%s: rendering %s at %s", self.format_name(), type(value).__name__, path)
        indent: str = self._indent(level)
        nl: str = self._newline()
        attr: str = self.property_attribute(name)

        match value:
            case EntityValue(entity=nested):
                inner: str = self._render_entity(nested, path)
                if self._options.pretty_print:
                    inner = indent_block(inner, level + 1)
                return f"{indent}<div {attr}>{nl}{inner}{nl}{indent}</div>{nl}"
            case SequenceValue(items=items):
                return "".join(
                    self._render_property(name, item, path.item(index), level)
                    for index, item in enumerate(items)
                )
            case ScalarValue() | OpaqueValue():
                text: str = escape(value_text(value, path))
                return f"{indent}{self._text_element(name, attr, text)}{nl}"

    def _text_element(self, name: str, attr: str, text: str) -> str:
        if self._options.include_meta_elements and name in META_PROPERTIES:
            return f'<meta {attr} content="{text}">'
        if not self._options.use_semantic_elements:
            return f"<span {attr}>{text}</span>"
        element: str = SEMANTIC_PROPERTY_ELEMENTS.get(name, "span")
        match element:
            case "a":
                return f'<a {attr} href="{text}">{text}</a>'
            case "img":
                return f'<img {attr} src="{text}" alt="">'
            case _:
                return f"<{element} {attr}>{text}</{element}>"
