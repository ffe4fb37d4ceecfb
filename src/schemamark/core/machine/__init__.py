# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/core/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON/NDJSON) output for SchemaMark.

Modules:
    - ``schemas``: canonical keys/kinds and payload normalization.
    - ``payloads``: small global payloads (``meta``).
    - ``shapes``: JSON envelopes and NDJSON records around payloads.
    - ``serializers``: envelopes/records to strings.

Everything here is Click-free and console-free.
"""

from __future__ import annotations
