# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for SchemaMark.

Entry point: `schemamark.cli.main.cli` (installed as the ``schemamark`` script).
"""

from __future__ import annotations
