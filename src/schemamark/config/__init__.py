# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for SchemaMark.

Public API:
    - `RenderConfig` / `MutableRenderConfig` (`schemamark.config.model`)
    - `JsonLdOptions` / `HtmlOptions` (`schemamark.config.options`)

TOML I/O helpers live in `schemamark.config.io`; logging setup lives in
`schemamark.config.logging`.
"""

from __future__ import annotations

from schemamark.config.model import MutableRenderConfig, RenderConfig
from schemamark.config.options import HtmlOptions, JsonLdOptions

__all__: list[str] = [
    "HtmlOptions",
    "JsonLdOptions",
    "MutableRenderConfig",
    "RenderConfig",
]
