# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across SchemaMark.

Included modules:

- ``entity``: the immutable `SchemaEntity` model.
- ``values``: the `PropertyValue` tagged union and value classification.
- ``errors``: the exception hierarchy and `PropertyPath`.
- ``diagnostics``: leveled diagnostics and aggregation.
- ``checks``: structural entity checks.
- ``loaders``: JSON-LD-like documents to entities.
- ``enum_mixins`` / ``formats``: enum helpers and report output formats.
- ``machine``: JSON/NDJSON serialization for machine output.

Keep this package free of UI dependencies and side effects.
"""

from __future__ import annotations
