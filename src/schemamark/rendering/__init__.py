# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup renderers for SchemaMark.

Public modules:
    - schemamark.rendering.api: `render()` / `render_many()`
    - schemamark.rendering.registry: renderer lookup and registration
    - schemamark.rendering.formats: `RenderFormat`, `NestedContext`
    - schemamark.rendering.jsonld / microdata / rdfa: the renderers

This package initializer stays import-light; the configuration layer imports
`schemamark.rendering.formats` and must not pull in the renderers.
"""

from __future__ import annotations
