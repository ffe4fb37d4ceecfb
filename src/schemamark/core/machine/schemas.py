# topmark:header:start
#
#   project      : SchemaMark
#   file         : schemas.py
#   file_relpath : src/schemamark/core/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical schema primitives for SchemaMark machine output.

This module centralizes:
- canonical *keys* used in JSON envelopes and NDJSON records (`MachineKey`)
- canonical NDJSON *kinds* (`MachineKind`)
- the `MetaPayload` shape
- payload normalization (`normalize_payload`)

Normalization rules:
- `Path` -> `str`
- `KeyedStrEnum` -> its key; other `Enum` -> `Enum.name`
- objects with `.to_dict()` -> normalize of that mapping
- mappings -> dict with stringified keys and normalized values
- sequences/sets -> lists of normalized values
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Final, TypedDict, cast

from schemamark.core.enum_mixins import KeyedStrEnum


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON envelopes."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    CONFIG: Final[str] = "config"
    CONFIG_FILES: Final[str] = "config_files"
    DIAGNOSTIC: Final[str] = "diagnostic"
    DIAGNOSTICS: Final[str] = "diagnostics"
    SUMMARY: Final[str] = "summary"
    ENTITIES: Final[str] = "entities"
    FORMATS: Final[str] = "formats"
    VERSION_INFO: Final[str] = "version_info"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    DIAGNOSTIC: Final[str] = "diagnostic"
    SUMMARY: Final[str] = "summary"
    FORMAT: Final[str] = "format"
    VERSION: Final[str] = "version"


class MetaPayload(TypedDict):
    """Metadata describing the SchemaMark runtime for machine output."""

    tool: str
    version: str
    platform: str


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Args:
        obj: The payload object to normalize.

    Returns:
        A JSON-serializable representation of `obj`.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, KeyedStrEnum):
        return obj.key

    if isinstance(obj, Enum):
        return obj.name

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterator[object] = cast("Iterator[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj
