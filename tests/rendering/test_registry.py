# topmark:header:start
#
#   project      : SchemaMark
#   file         : test_registry.py
#   file_relpath : tests/rendering/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the renderer registry and the rendering facade."""

from __future__ import annotations

from typing import ClassVar

import pytest

from schemamark.core.entity import SchemaEntity
from schemamark.core.errors import UnknownFormatError
from schemamark.rendering.api import render, render_many
from schemamark.rendering.formats import RenderFormat
from schemamark.rendering.jsonld import JsonLdRenderer
from schemamark.rendering.microdata import MicrodataRenderer
from schemamark.rendering.rdfa import RdfaRenderer
from schemamark.rendering.registry import (
    get_renderer,
    get_renderer_class,
    iter_renderer_infos,
    register_renderer,
    resolve_format,
)
from tests.conftest import make_config, parametrize, person


@parametrize(
    ("token", "expected"),
    [
        ("json-ld", RenderFormat.JSON_LD),
        ("JSONLD", RenderFormat.JSON_LD),
        ("ld+json", RenderFormat.JSON_LD),
        ("json_ld", RenderFormat.JSON_LD),
        ("Microdata", RenderFormat.MICRODATA),
        ("rdfa-lite", RenderFormat.RDFA),
        (RenderFormat.RDFA, RenderFormat.RDFA),
    ],
)
def test_resolve_format_accepts_names_and_aliases(
    token: str | RenderFormat, expected: RenderFormat
) -> None:
    assert resolve_format(token) is expected


@parametrize("token", ["html", "", "turtle"])
def test_unknown_formats_are_rejected(token: str) -> None:
    with pytest.raises(UnknownFormatError) as excinfo:
        resolve_format(token)
    assert "json-ld" in excinfo.value.message


def test_registered_classes() -> None:
    assert get_renderer_class("json-ld") is JsonLdRenderer
    assert get_renderer_class(RenderFormat.MICRODATA) is MicrodataRenderer
    assert get_renderer_class("rdfa") is RdfaRenderer


def test_duplicate_registration_is_rejected() -> None:
    class OtherJsonLd(JsonLdRenderer):
        format: ClassVar[RenderFormat] = RenderFormat.JSON_LD

    with pytest.raises(ValueError, match="already registered"):
        register_renderer(OtherJsonLd)
    # Re-registering the same class is a no-op
    assert register_renderer(JsonLdRenderer) is JsonLdRenderer


def test_get_renderer_uses_config() -> None:
    config = make_config(default_format="microdata", pretty_print=False, max_depth=3)
    renderer = get_renderer(config=config)
    assert isinstance(renderer, MicrodataRenderer)
    assert renderer.max_depth == 3
    assert not renderer.options.pretty_print
    assert isinstance(get_renderer("rdfa", config), RdfaRenderer)


def test_renderer_infos_in_format_order() -> None:
    infos = list(iter_renderer_infos())
    assert [i.name for i in infos] == ["json-ld", "microdata", "rdfa"]
    assert infos[0].mime_type == "application/ld+json"
    assert infos[0].to_dict()["aliases"] == ["jsonld", "ld+json"]


def test_render_facade() -> None:
    config = make_config(pretty_print=False)
    assert render(person("Ada"), "rdfa", config) == (
        '<div vocab="https://schema.org/" typeof="Person"><span property="name">Ada</span></div>'
    )
    outputs = render_many([person("A"), SchemaEntity("Thing")], "json-ld", config)
    assert outputs == [
        '{"@context":"https://schema.org","@type":"Person","name":"A"}',
        '{"@context":"https://schema.org","@type":"Thing"}',
    ]
