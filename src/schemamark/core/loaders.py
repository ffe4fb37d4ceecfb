# topmark:header:start
#
#   project      : SchemaMark
#   file         : loaders.py
#   file_relpath : src/schemamark/core/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load entities from JSON-LD-like documents.

A document is a mapping shaped like the JSON-LD output of SchemaMark:

```json
{
  "@context": "https://schema.org",
  "@type": "Article",
  "headline": "Hello",
  "author": {"@type": "Person", "name": "Ada"}
}
```

Rules:
    - ``@type`` is required on the root (a list uses its first element).
    - ``@context`` is optional and inherited from the enclosing entity (or the
      default context at the root).
    - Other ``@`` keys (e.g. ``@id``) are kept as ordinary properties.
    - Nested mappings with ``@type`` become entities; lists are converted item
      by item; mappings without ``@type`` are kept as plain (opaque) values.

Supported files: ``.json`` / ``.jsonld`` (via `json`) and ``.toml`` (via
`tomlkit`). A top-level JSON array holds several entities; a TOML document may
hold several entities as an array of tables named ``entity``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from tomlkit.exceptions import ParseError as TomlkitParseError

from schemamark.config.io import parse_toml_text
from schemamark.config.logging import get_logger
from schemamark.constants import DEFAULT_CONTEXT, JSONLD_CONTEXT_KEY, JSONLD_TYPE_KEY
from schemamark.core.entity import SchemaEntity
from schemamark.core.errors import EntityLoadError

if TYPE_CHECKING:
    from pathlib import Path

    from schemamark.config.logging import SchemaMarkLogger

logger: SchemaMarkLogger = get_logger(__name__)

JSON_SUFFIXES: frozenset[str] = frozenset({".json", ".jsonld"})
TOML_SUFFIXES: frozenset[str] = frozenset({".toml"})

# Array-of-tables key holding several entities in one TOML document
TOML_ENTITIES_KEY: str = "entity"


def _type_name(raw: Any, where: str) -> str:
    if isinstance(raw, list) and raw:
        raw = raw[0]
    if not isinstance(raw, str) or not raw.strip():
        raise EntityLoadError(
            f"Invalid {JSONLD_TYPE_KEY} at {where}: expected a non-empty string",
            context={"value": repr(raw)},
        )
    return raw


def _convert(value: Any, context: str, where: str) -> Any:
    if isinstance(value, Mapping):
        if JSONLD_TYPE_KEY in value:
            return _entity(value, context, where)
        return {str(k): _convert(v, context, f"{where}.{k}") for k, v in value.items()}
    if isinstance(value, list):
        return [_convert(v, context, f"{where}[{i}]") for i, v in enumerate(value)]
    return value


def _entity(data: Mapping[str, Any], parent_context: str, where: str) -> SchemaEntity:
    entity_type: str = _type_name(data.get(JSONLD_TYPE_KEY), where)
    raw_context: Any = data.get(JSONLD_CONTEXT_KEY, parent_context)
    if not isinstance(raw_context, str) or not raw_context.strip():
        raise EntityLoadError(
            f"Invalid {JSONLD_CONTEXT_KEY} at {where}: expected a non-empty string",
            context={"value": repr(raw_context)},
        )
    properties: dict[str, Any] = {}
    for key, value in data.items():
        if key in (JSONLD_TYPE_KEY, JSONLD_CONTEXT_KEY):
            continue
        properties[str(key)] = _convert(value, raw_context, f"{entity_type}.{key}")
    return SchemaEntity(entity_type, properties, raw_context)


def entity_from_mapping(data: Mapping[str, Any], *, context: str | None = None) -> SchemaEntity:
    """Convert a JSON-LD-like mapping into a `SchemaEntity`.

    Args:
        data (Mapping[str, Any]): The document.
        context (str | None): Context used when the document has no ``@context``
            (default: ``https://schema.org``).

    Returns:
        SchemaEntity: The entity, with nested entities converted recursively.

    Raises:
        EntityLoadError: If ``@type`` is missing or invalid, or a context is not a
            non-empty string.
    """
    if not isinstance(data, Mapping):
        raise EntityLoadError(
            f"Expected a mapping, got {type(data).__name__}",
        )
    if JSONLD_TYPE_KEY not in data:
        raise EntityLoadError(f"Missing {JSONLD_TYPE_KEY} at <root>")
    return _entity(data, context or DEFAULT_CONTEXT, "<root>")


def entities_from_data(data: Any, *, context: str | None = None) -> list[SchemaEntity]:
    """Convert a parsed document (a mapping or a list of mappings) into entities."""
    if isinstance(data, list):
        if not data:
            raise EntityLoadError("Document contains no entities")
        return [entity_from_mapping(item, context=context) for item in data]
    if isinstance(data, Mapping) and JSONLD_TYPE_KEY not in data:
        items: Any = data.get(TOML_ENTITIES_KEY)
        if isinstance(items, list):
            return entities_from_data(items, context=context)
    return [entity_from_mapping(data, context=context)]


def entities_from_json_text(
    text: str,
    *,
    source: str = "<stdin>",
    context: str | None = None,
) -> list[SchemaEntity]:
    """Parse JSON text (one object or an array of objects) into entities.

    Raises:
        EntityLoadError: If the text is not valid JSON or not a valid document.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EntityLoadError(
            f"Invalid JSON in {source}: {exc.msg}",
            context={"line": exc.lineno, "column": exc.colno},
        ) from exc
    return entities_from_data(data, context=context)


def load_entities_file(path: Path, *, context: str | None = None) -> list[SchemaEntity]:
    """Load all entities from a ``.json``, ``.jsonld`` or ``.toml`` file.

    Raises:
        EntityLoadError: If the file cannot be read, has an unsupported suffix or
            does not hold a valid document.
    """
    suffix: str = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | TOML_SUFFIXES:
        raise EntityLoadError(
            f"Unsupported input file type: {path.name}",
            context={"supported suffixes": sorted(JSON_SUFFIXES | TOML_SUFFIXES)},
        )
    logger.debug("Loading entities from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EntityLoadError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    if suffix in JSON_SUFFIXES:
        return entities_from_json_text(text, source=str(path), context=context)
    try:
        data: Any = parse_toml_text(text)
    except TomlkitParseError as exc:
        raise EntityLoadError(f"Invalid TOML in {path}: {exc}") from exc
    return entities_from_data(data, context=context)


def load_entity_file(path: Path, *, context: str | None = None) -> SchemaEntity:
    """Load a file holding exactly one entity.

    Raises:
        EntityLoadError: If the file is invalid or holds more than one entity.
    """
    entities: list[SchemaEntity] = load_entities_file(path, context=context)
    if len(entities) != 1:
        raise EntityLoadError(f"Expected exactly one entity in {path}, found {len(entities)}")
    return entities[0]
