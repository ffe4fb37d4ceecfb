# topmark:header:start
#
#   project      : SchemaMark
#   file         : payloads.py
#   file_relpath : src/schemamark/core/machine/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload builders shared by several commands."""

from __future__ import annotations

import sys
from functools import lru_cache

from schemamark.constants import SCHEMAMARK, SCHEMAMARK_VERSION
from schemamark.core.machine.schemas import MetaPayload


@lru_cache(maxsize=1)
def build_meta_payload() -> MetaPayload:
    """Build the ``{tool, version, platform}`` metadata payload (cached)."""
    return MetaPayload(
        tool=SCHEMAMARK,
        version=SCHEMAMARK_VERSION,
        platform=sys.platform,
    )
