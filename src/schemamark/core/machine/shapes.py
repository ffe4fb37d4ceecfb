# topmark:header:start
#
#   project      : SchemaMark
#   file         : shapes.py
#   file_relpath : src/schemamark/core/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Envelope and record shaping utilities for machine output.

- JSON envelopes (single JSON objects) contain `"meta"` plus named payloads.
- NDJSON records contain `"kind"`, `"meta"`, and a payload container whose key
  defaults to the kind.

This module is serialization-free (no `json.dumps`).
"""

from __future__ import annotations

from schemamark.core.machine.schemas import MachineKey, MetaPayload, normalize_payload


def build_json_envelope(
    *,
    meta: MetaPayload,
    **payloads: object,
) -> dict[str, object]:
    """Build a JSON envelope with `meta` plus one or more named payloads."""
    out: dict[str, object] = {MachineKey.META: dict(meta)}
    for name, payload in payloads.items():
        out[name] = normalize_payload(payload)
    return out


def build_ndjson_record(
    *,
    kind: str,
    meta: MetaPayload,
    container_key: str | None = None,
    payload: object,
) -> dict[str, object]:
    """Build a single NDJSON record.

    Shape:
        `{"kind": <kind>, "meta": <meta>, <container_key>: <payload>}`
    """
    return {
        MachineKey.KIND: kind,
        MachineKey.META: dict(meta),
        container_key or kind: normalize_payload(payload),
    }
