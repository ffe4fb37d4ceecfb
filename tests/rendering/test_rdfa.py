# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_rdfa.py
#   file_relpath : tests/rendering/test_rdfa.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the HTML RDFa Lite renderer."""

from __future__ import annotations

from html.parser import HTMLParser

import pytest

from schemamark.config.options import HtmlOptions
from schemamark.core.entity import SchemaEntity
from schemamark.rendering.rdfa import RdfaRenderer
from tests.conftest import person

pytestmark = pytest.mark.rendering


class GeoPoint:
    def __init__(self) -> None:
        self.lat = 51.5
        self.lon = -0.1
        self._cache: dict[str, float] = {}


class _PropertyText(HTMLParser):
    """Map each `property` attribute to the text inside its element."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.current: str | None = None
        self.values: dict[str, str] = {}

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.current = dict(attrs).get("property")
        if self.current is not None:
            self.values[self.current] = ""

    def handle_endtag(self, tag: str) -> None:
        self.current = None

    def handle_data(self, data: str) -> None:
        if self.current is not None:
            self.values[self.current] += data


def test_person_uses_vocab_and_typeof() -> None:
    assert RdfaRenderer().render(person("Ada")) == (
        '<div vocab="https://schema.org/" typeof="Person">\n'
        '  <span property="name">Ada</span>\n'
        "</div>"
    )


def test_nested_entity_declares_its_own_vocab() -> None:
    org = SchemaEntity("Organization", {"name": "ACME"}, context="https://example.org/vocab/")
    rendered: str = RdfaRenderer(HtmlOptions(pretty_print=False)).render(
        person("Ada", worksFor=org)
    )
    assert rendered == (
        '<div vocab="https://schema.org/" typeof="Person">'
        '<span property="name">Ada</span>'
        '<div property="worksFor">'
        '<div vocab="https://example.org/vocab/" typeof="Organization">'
        '<span property="name">ACME</span>'
        "</div></div></div>"
    )


def test_attribute_values_are_escaped() -> None:
    rendered: str = RdfaRenderer().render(SchemaEntity("Thing", {'a"b': "x & y"}))
    assert '<span property="a&quot;b">x &amp; y</span>' in rendered


def test_semantic_elements_apply_to_rdfa() -> None:
    renderer = RdfaRenderer(HtmlOptions(use_semantic_elements=True))
    rendered: str = renderer.render(SchemaEntity("Article", {"headline": "T"}))
    assert rendered.splitlines() == [
        '<article vocab="https://schema.org/" typeof="Article">',
        '  <h1 property="headline">T</h1>',
        "</article>",
    ]


def test_escaped_text_and_attributes_parse_back() -> None:
    text = "a <b> & \"c\" 'd' </span>"
    entity = SchemaEntity("Thing", {"name": text, 'x"y<z': "&amp;"})
    parser = _PropertyText()
    parser.feed(RdfaRenderer(HtmlOptions(pretty_print=False)).render(entity))
    parser.close()
    assert parser.values == {"name": text, 'x"y<z': "&amp;"}


def test_repeated_nested_entities_get_sibling_wrappers() -> None:
    article = SchemaEntity("Article", {"author": [person("A"), person("B")]})
    assert RdfaRenderer().render(article).splitlines() == [
        '<div vocab="https://schema.org/" typeof="Article">',
        '  <div property="author">',
        '    <div vocab="https://schema.org/" typeof="Person">',
        '      <span property="name">A</span>',
        "    </div>",
        "  </div>",
        '  <div property="author">',
        '    <div vocab="https://schema.org/" typeof="Person">',
        '      <span property="name">B</span>',
        "    </div>",
        "  </div>",
        "</div>",
    ]


def test_plain_object_renders_public_attributes() -> None:
    rendered: str = RdfaRenderer().render(SchemaEntity("Place", {"geo": GeoPoint()}))
    assert (
        '<span property="geo">{&quot;lat&quot;: 51.5, &quot;lon&quot;: -0.1}</span>'
        in rendered
    )
