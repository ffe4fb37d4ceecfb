# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark CLI subcommands."""

from __future__ import annotations
