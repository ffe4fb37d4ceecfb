# topmark:header:start
#
#   project      : SchemaMark
#   file         : constants.py
#   file_relpath : src/schemamark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SCHEMAMARK: str = "schemamark"
SCHEMAMARK_VERSION: str = get_version(SCHEMAMARK)

# Name of the bundled default config inside the package `schemamark.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "schemamark.config"
DEFAULT_TOML_CONFIG_NAME: str = "schemamark-default.toml"

# Project-level config discovery
PROJECT_CONFIG_NAME: str = "schemamark.toml"
PYPROJECT_CONFIG_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.schemamark"

DEFAULT_CONTEXT: str = "https://schema.org"

# Reserved JSON-LD keys
JSONLD_CONTEXT_KEY: str = "@context"
JSONLD_TYPE_KEY: str = "@type"

# Two spaces per nesting level in pretty-printed output
INDENT_UNIT: str = "  "

# Recursion guard for nested entities (0 disables the guard)
DEFAULT_MAX_DEPTH: int = 32

LOG_LEVEL_ENV_VAR: str = "SCHEMAMARK_LOG_LEVEL"
