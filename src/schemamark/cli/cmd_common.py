# topmark:header:start
#
#   project      : SchemaMark
#   file         : cmd_common.py
#   file_relpath : src/schemamark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands.
They intentionally avoid policy (exit code rules, messages) and only
encapsulate plumbing such as resolving configuration and reading inputs.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from schemamark.cli.console import ClickConsole
from schemamark.cli.errors import (
    SchemaMarkConfigError,
    SchemaMarkFileNotFoundError,
    SchemaMarkUsageError,
    translate_errors,
)
from schemamark.config.logging import get_logger
from schemamark.config.model import MutableRenderConfig
from schemamark.core.diagnostics import DiagnosticLevel
from schemamark.core.loaders import entities_from_json_text, load_entities_file

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from schemamark.cli.console_api import ConsoleLike
    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.config.model import RenderConfig
    from schemamark.core.diagnostics import Diagnostic
    from schemamark.core.entity import SchemaEntity

logger: SchemaMarkLogger = get_logger(__name__)

# Path argument meaning "read one JSON document from STDIN"
STDIN_MARKER: str = "-"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context (or a fresh default one)."""
    obj: Any = ctx.find_root().obj
    if isinstance(obj, dict) and obj.get("console") is not None:
        return obj["console"]
    return ClickConsole()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` terse, ``>0`` verbose)."""
    obj: Any = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def build_config(
    ctx: click.Context,
    *,
    config_files: Iterable[str] = (),
    no_config: bool = False,
    overrides: Mapping[str, Any] | None = None,
) -> RenderConfig:
    """Resolve the effective configuration for a command.

    Layers are merged as defaults, discovered project config, ``--config``
    files (in order) and finally the CLI ``overrides``.
    Config WARNINGs are printed on stderr unless ``-q`` was given.

    Raises:
        SchemaMarkConfigError: If a layer could not be loaded.
        SchemaMarkUsageError: If an override value is invalid.
    """
    draft: MutableRenderConfig = MutableRenderConfig.load_merged(
        extra_config_files=[Path(p) for p in config_files],
        no_config=no_config,
    )
    if overrides:
        try:
            draft.apply_overrides(overrides)
        except ValueError as exc:
            raise SchemaMarkUsageError(str(exc)) from exc
    config: RenderConfig = draft.freeze()
    logger.debug("Effective config sources: %s", [str(p) for p in config.config_files])

    report_config_diagnostics(ctx, config.diagnostics)
    errors: list[Diagnostic] = [d for d in config.diagnostics if d.level == DiagnosticLevel.ERROR]
    if errors:
        raise SchemaMarkConfigError(
            "; ".join(f"{d.message}: {d.where}" if d.where else d.message for d in errors)
        )
    return config


def report_config_diagnostics(ctx: click.Context, diagnostics: Iterable[Diagnostic]) -> None:
    """Print configuration WARNINGs on stderr (suppressed by ``-q``)."""
    if get_effective_verbosity(ctx) < 0:
        return
    console: ConsoleLike = get_console(ctx)
    for diag in diagnostics:
        if diag.level == DiagnosticLevel.WARNING:
            console.warn(f"Config warning: {diag}")


def read_input_entities(
    paths: Iterable[str],
    *,
    context: str | None = None,
) -> list[tuple[str, SchemaEntity]]:
    """Load the entities named on the command line.

    Args:
        paths (Iterable[str]): File paths, or ``-`` for one JSON document on STDIN.
        context (str | None): Vocabulary context for entities that declare none.

    Returns:
        list[tuple[str, SchemaEntity]]: ``(source, entity)`` pairs in input order.

    Raises:
        SchemaMarkUsageError: If no input was given or ``-`` was given twice.
        SchemaMarkFileNotFoundError: If a path does not exist.
        SchemaMarkDataError: If an input cannot be parsed into entities.
    """
    sources: list[str] = list(paths)
    if not sources:
        raise SchemaMarkUsageError("No input given. Pass one or more files, or '-' for STDIN.")
    if sources.count(STDIN_MARKER) > 1:
        raise SchemaMarkUsageError("STDIN ('-') can only be read once.")

    out: list[tuple[str, SchemaEntity]] = []
    for source in sources:
        with translate_errors():
            if source == STDIN_MARKER:
                text: str = click.get_text_stream("stdin").read()
                entities: list[SchemaEntity] = entities_from_json_text(text, context=context)
            else:
                path = Path(source)
                if not path.is_file():
                    raise SchemaMarkFileNotFoundError(f"No such file: {source}")
                entities = load_entities_file(path, context=context)
        logger.debug("Loaded %d entit(y/ies) from %s", len(entities), source)
        out.extend((source, entity) for entity in entities)
    return out
