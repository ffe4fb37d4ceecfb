# topmark:header:start
#
#   project      : SchemaMark
#   file         : formats.py
#   file_relpath : src/schemamark/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup formats SchemaMark renders entities to.

`RenderFormat` names the three registered renderers. Parsing is
case-insensitive and accepts a few common spellings of JSON-LD; the bare
token ``html`` is deliberately not an alias since both Microdata and RDFa are
HTML.
"""

from __future__ import annotations

from schemamark.core.enum_mixins import KeyedStrEnum


class RenderFormat(KeyedStrEnum):
    """Structured data markup formats."""

    JSON_LD = ("json-ld", "JSON-LD document", ("jsonld", "ld+json"))
    MICRODATA = ("microdata", "HTML Microdata fragment")
    RDFA = ("rdfa", "HTML RDFa Lite fragment", ("rdfa-lite",))


class NestedContext(KeyedStrEnum):
    """When a nested JSON-LD object repeats ``@context``."""

    WHEN_CHANGED = (
        "when-changed",
        "Emit @context on a nested object only when it differs from its parent's",
    )
    ALWAYS = ("always", "Emit @context on every nested object")
