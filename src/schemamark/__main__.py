# topmark:header:start
#
#   project      : SchemaMark
#   file         : __main__.py
#   file_relpath : src/schemamark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SchemaMark via ``python -m schemamark``.

It delegates directly to :func:`schemamark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how SchemaMark is launched.

Examples:
    Render an entity document as Microdata::

        python -m schemamark render --format microdata person.json
"""

from __future__ import annotations

from schemamark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
