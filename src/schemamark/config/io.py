# topmark:header:start
#
#   project      : SchemaMark
#   file         : io.py
#   file_relpath : src/schemamark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for SchemaMark configuration.

This module centralizes **pure** helpers for reading and writing TOML used by
SchemaMark's configuration layer. Keeping these utilities separate avoids import
cycles and keeps the model classes small and focused.

Typical flow:
    1. Load defaults from the packaged resource (`load_defaults_dict`).
    2. Load project/user TOML files (`load_toml_dict`), or the
       ``[tool.schemamark]`` table of a ``pyproject.toml`` (`load_pyproject_table`).
    3. Serialize back to TOML when needed (`to_toml`), optionally nested under
       ``[tool.schemamark]`` with `nest_toml_under_section`.

Parsing and rendering both use `tomlkit`; TOML has no ``null``, so ``None``
entries are stripped when rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table, Whitespace

from schemamark.config.logging import get_logger
from schemamark.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PYPROJECT_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit.items import Comment, Item

    from schemamark.config.logging import SchemaMarkLogger

logger: SchemaMarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "load_defaults_text",
    "load_defaults_dict",
    "load_toml_dict",
    "load_pyproject_table",
    "parse_toml_text",
    "to_toml",
    "nest_toml_under_section",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict[str, Any]``.
    """
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into plain Python containers.

    Raises:
        TomlkitParseError: If the text is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_defaults_text() -> str:
    """Return the bundled default configuration document as text.

    Raises:
        RuntimeError: If the bundled resource cannot be read.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        return resource.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Returns:
        TomlTable: The parsed default configuration.

    Raises:
        RuntimeError: If the bundled default config resource cannot be read or
            parsed as TOML.
    """
    text: str = load_defaults_text()
    try:
        return parse_toml_text(text)
    except TomlkitParseError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc


def load_toml_dict(path: Path) -> TomlTable | None:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``schemamark.toml``).

    Returns:
        TomlTable | None: The parsed TOML content, or ``None`` when the file
            cannot be read or parsed (the error is logged).

    Notes:
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        return parse_toml_text(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return None
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return None


def load_pyproject_table(path: Path) -> TomlTable | None:
    """Return the ``[tool.schemamark]`` table of a ``pyproject.toml``.

    Returns:
        TomlTable | None: The table, or ``None`` when the file is unreadable or
            has no such table.
    """
    data: TomlTable | None = load_toml_dict(path)
    if data is None:
        return None
    table: TomlTable = data
    for key in PYPROJECT_SECTION.split("."):
        table = get_table_value(table, key)
    return table or None


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return a new TOML document nested under a dotted section path.

    For example ``nest_toml_under_section("a = 1\\n", "tool.schemamark")`` yields
    a document equivalent to::

        [tool.schemamark]
        a = 1

    Comments and blank lines are preserved because tomlkit nodes are re-used
    when constructing the nested table. Leading comments separated from the
    first key by a blank line stay above the new section header.

    Args:
        toml_doc (str): Original TOML document to nest.
        section_keys (str): Dotted section path such as ``"tool.schemamark"``.

    Returns:
        str: A new TOML document where the original content lives under the
        final section table.

    Raises:
        ValueError: If ``section_keys`` is empty or only contains dots.
        RuntimeError: If the TOML document cannot be parsed.
    """
    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    body: list[tuple[Any, Item]] = doc.body
    first_key: int = next((i for i, (k, _) in enumerate(body) if k is not None), len(body))
    # The preamble runs up to the last blank line before the first key; comments
    # directly above that key move into the section with it
    split: int = first_key
    while split > 0 and not isinstance(body[split - 1][1], Whitespace):
        split -= 1
    for _, item in body[:split]:
        new_doc.add(cast("Comment | Whitespace", item))

    current_level: tomlkit.TOMLDocument | Table = new_doc
    for key in keys:
        # Intermediate levels only hold subtables, so keep them implicit
        table: Table = tomlkit.table(is_super_table=key != keys[-1])
        current_level.add(key, table)
        current_level = table

    for item_key, item_value in body[split:]:
        if item_key is None:
            current_level.add(cast("Comment | Whitespace", item_value))
        else:
            current_level.add(item_key, item_value)

    return new_doc.as_string()
