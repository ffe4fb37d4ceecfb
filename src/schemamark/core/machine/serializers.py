# topmark:header:start
#
#   project      : SchemaMark
#   file         : serializers.py
#   file_relpath : src/schemamark/core/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure JSON/NDJSON serialization utilities for machine output.

Conventions:
- `serialize_json_object()` does not append a trailing newline.
- `serialize_ndjson()` returns a string that *does* end with a final `\\n`,
  which is convenient for CLI printing and piping.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from schemamark.core.machine.schemas import MetaPayload, normalize_payload
from schemamark.core.machine.shapes import build_json_envelope

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline)."""
    return json.dumps(normalize_payload(obj), indent=2, ensure_ascii=False)


def serialize_json_envelope(meta: MetaPayload, **payloads: object) -> str:
    """Serialize a JSON envelope with `meta` plus named payloads."""
    return serialize_json_object(build_json_envelope(meta=meta, **payloads))


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    """Serialize shaped NDJSON records into per-line JSON strings."""
    for record in records:
        yield json.dumps(record, ensure_ascii=False)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize NDJSON record mappings into a newline-delimited string.

    Returns:
        One JSON object per line, ending with a trailing newline.
    """
    return "\n".join(iter_ndjson_strings(records)) + "\n"
