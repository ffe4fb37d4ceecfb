# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_microdata.py
#   file_relpath : tests/rendering/test_microdata.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the HTML Microdata renderer."""

from __future__ import annotations

from datetime import date

import pytest

from schemamark.config.options import HtmlOptions
from schemamark.core.entity import SchemaEntity
from schemamark.core.errors import MalformedEntityError
from schemamark.rendering.microdata import MicrodataRenderer
from tests.conftest import mark_rendering, parametrize, person

pytestmark = pytest.mark.rendering


class GeoPoint:
    def __init__(self) -> None:
        self.lat = 51.5
        self.lon = -0.1
        self._cache: dict[str, float] = {}


def test_person_name_is_escaped() -> None:
    rendered: str = MicrodataRenderer().render(person("Ada <Lovelace>"))
    assert rendered == (
        '<div itemscope itemtype="https://schema.org/Person">\n'
        '  <span itemprop="name">Ada &lt;Lovelace&gt;</span>\n'
        "</div>"
    )


def test_nested_entity_is_wrapped_and_indented() -> None:
    address = SchemaEntity("PostalAddress", {"addressLocality": "London"})
    rendered: str = MicrodataRenderer().render(person("Ada", address=address))
    assert rendered == (
        '<div itemscope itemtype="https://schema.org/Person">\n'
        '  <span itemprop="name">Ada</span>\n'
        '  <div itemprop="address">\n'
        '    <div itemscope itemtype="https://schema.org/PostalAddress">\n'
        '      <span itemprop="addressLocality">London</span>\n'
        "    </div>\n"
        "  </div>\n"
        "</div>"
    )


def test_sequence_repeats_the_property() -> None:
    rendered: str = MicrodataRenderer().render(person("Ada", sameAs=["a", "b"], knows=[]))
    assert rendered.splitlines() == [
        '<div itemscope itemtype="https://schema.org/Person">',
        '  <span itemprop="name">Ada</span>',
        '  <span itemprop="sameAs">a</span>',
        '  <span itemprop="sameAs">b</span>',
        "</div>",
    ]


def test_compact_output_has_no_whitespace() -> None:
    renderer = MicrodataRenderer(HtmlOptions(pretty_print=False))
    address = SchemaEntity("PostalAddress", {"postalCode": "N1"})
    assert renderer.render(person("Ada", address=address)) == (
        '<div itemscope itemtype="https://schema.org/Person">'
        '<span itemprop="name">Ada</span>'
        '<div itemprop="address">'
        '<div itemscope itemtype="https://schema.org/PostalAddress">'
        '<span itemprop="postalCode">N1</span>'
        "</div></div></div>"
    )

def test_repeated_nested_entities_get_sibling_wrappers() -> None:
    article = SchemaEntity("Article", {"author": [person("A"), person("B")]})
    assert MicrodataRenderer().render(article).splitlines() == [
        '<div itemscope itemtype="https://schema.org/Article">',
        '  <div itemprop="author">',
        '    <div itemscope itemtype="https://schema.org/Person">',
        '      <span itemprop="name">A</span>',
        "    </div>",
        "  </div>",
        '  <div itemprop="author">',
        '    <div itemscope itemtype="https://schema.org/Person">',
        '      <span itemprop="name">B</span>',
        "    </div>",
        "  </div>",
        "</div>",
    ]


def test_three_levels_of_nesting() -> None:
    geo = SchemaEntity("GeoCoordinates", {"latitude": 51.5})
    address = SchemaEntity("PostalAddress", {"geo": geo})
    rendered: str = MicrodataRenderer().render(SchemaEntity("Person", {"address": address}))
    assert rendered.splitlines() == [
        '<div itemscope itemtype="https://schema.org/Person">',
        '  <div itemprop="address">',
        '    <div itemscope itemtype="https://schema.org/PostalAddress">',
        '      <div itemprop="geo">',
        '        <div itemscope itemtype="https://schema.org/GeoCoordinates">',
        '          <span itemprop="latitude">51.5</span>',
        "        </div>",
        "      </div>",
        "    </div>",
        "  </div>",
        "</div>",
    ]


def test_plain_object_renders_public_attributes() -> None:
    rendered: str = MicrodataRenderer().render(SchemaEntity("Place", {"geo": GeoPoint()}))
    assert (
        '<span itemprop="geo">{&quot;lat&quot;: 51.5, &quot;lon&quot;: -0.1}</span>'
        in rendered
    )



def test_empty_entity_and_scalar_spellings() -> None:
    renderer = MicrodataRenderer()
    assert renderer.render(SchemaEntity("Thing")) == (
        '<div itemscope itemtype="https://schema.org/Thing">\n</div>'
    )
    rendered: str = renderer.render(
        SchemaEntity("Offer", {"available": True, "price": 9.5, "note": None})
    )
    assert '<span itemprop="available">true</span>' in rendered
    assert '<span itemprop="price">9.5</span>' in rendered
    assert '<span itemprop="note"></span>' in rendered


@mark_rendering
def test_semantic_and_meta_elements() -> None:
    renderer = MicrodataRenderer(
        HtmlOptions(use_semantic_elements=True, include_meta_elements=True)
    )
    article = SchemaEntity(
        "Article",
        {
            "headline": "Title",
            "description": "Intro",
            "url": "https://example.org/a?b=1&c=2",
            "image": "cover.png",
            "datePublished": date(2024, 1, 2),
            "genre": "Tech",
        },
    )
    assert renderer.render(article).splitlines() == [
        '<article itemscope itemtype="https://schema.org/Article">',
        '  <h1 itemprop="headline">Title</h1>',
        '  <p itemprop="description">Intro</p>',
        '  <a itemprop="url" href="https://example.org/a?b=1&amp;c=2">'
        "https://example.org/a?b=1&amp;c=2</a>",
        '  <img itemprop="image" src="cover.png" alt="">',
        '  <meta itemprop="datePublished" content="2024-01-02">',
        '  <span itemprop="genre">Tech</span>',
        "</article>",
    ]


def test_meta_elements_without_semantic_elements() -> None:
    renderer = MicrodataRenderer(HtmlOptions(include_meta_elements=True))
    rendered: str = renderer.render(SchemaEntity("Article", {"wordCount": 250}))
    assert '  <meta itemprop="wordCount" content="250">' in rendered.splitlines()


def test_custom_container_element() -> None:
    renderer = MicrodataRenderer(HtmlOptions(container_element="section"))
    assert renderer.render(SchemaEntity("Thing")).startswith("<section itemscope")


def test_invalid_container_element_is_rejected() -> None:
    with pytest.raises(ValueError):
        HtmlOptions(container_element='div onclick="x"')


@parametrize("name", ["div\n", "div ", "", "1div"])
def test_container_element_must_be_a_whole_name(name: str) -> None:
    with pytest.raises(ValueError):
        HtmlOptions(container_element=name)


def test_malformed_nested_entity_raises() -> None:
    with pytest.raises(MalformedEntityError) as excinfo:
        MicrodataRenderer().render(person("Ada", knows=SchemaEntity("")))
    assert excinfo.value.diagnostics[0].where == "Person.knows"


def test_renderer_metadata() -> None:
    renderer = MicrodataRenderer()
    assert renderer.format_name() == "microdata"
    assert renderer.mime_type() == "text/html"
