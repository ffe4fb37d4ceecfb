# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark package.

SchemaMark renders Schema.org-style entities (a type, a vocabulary context and an
ordered set of properties) as JSON-LD, HTML Microdata or HTML RDFa. It exposes
both a CLI and a small typed API (see `schemamark.api`).
"""

from __future__ import annotations
