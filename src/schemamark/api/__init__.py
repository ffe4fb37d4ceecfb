# topmark:header:start
#
#   project      : SchemaMark
#   file         : __init__.py
#   file_relpath : src/schemamark/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public SchemaMark API (stable surface).

This module exposes a **small, typed API** for creating, checking and
rendering entities programmatically without going through the CLI.

Versioning policy
-----------------
- The signatures exported here follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Configuration contract
----------------------
- `SchemaManager` accepts a frozen `RenderConfig`, or a plain mapping mirroring
  the ``schemamark.toml`` shape, which is layered over the bundled defaults.
- `render` accepts a `RenderConfig` only; build one with
  `MutableRenderConfig.load_merged().freeze()` to honor project config files.
"""

from __future__ import annotations

from schemamark.api.manager import SchemaManager
from schemamark.config.model import MutableRenderConfig, RenderConfig
from schemamark.core.checks import check_entity, ensure_well_formed
from schemamark.core.entity import SchemaEntity
from schemamark.core.errors import (
    EntityLoadError,
    MalformedEntityError,
    SchemaMarkError,
    UnencodableValueError,
    UnknownFormatError,
)
from schemamark.core.loaders import entity_from_mapping, load_entities_file, load_entity_file
from schemamark.rendering.api import render, render_many
from schemamark.rendering.formats import RenderFormat
from schemamark.rendering.registry import get_renderer, iter_renderer_infos

__all__: list[str] = [
    "EntityLoadError",
    "MalformedEntityError",
    "MutableRenderConfig",
    "RenderConfig",
    "RenderFormat",
    "SchemaEntity",
    "SchemaManager",
    "SchemaMarkError",
    "UnencodableValueError",
    "UnknownFormatError",
    "check_entity",
    "ensure_well_formed",
    "entity_from_mapping",
    "get_renderer",
    "iter_renderer_infos",
    "load_entities_file",
    "load_entity_file",
    "render",
    "render_many",
]
