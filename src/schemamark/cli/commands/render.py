# topmark:header:start
#
#   project      : SchemaMark
#   file         : render.py
#   file_relpath : src/schemamark/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark `render` command.

Renders entity documents (JSON or TOML files, or JSON on STDIN) to JSON-LD,
Microdata or RDFa and writes the markup to stdout. When several entities are
rendered, their outputs are separated by a blank line.

Examples:
    schemamark render article.json
    schemamark render --format microdata --no-pretty person.toml
    cat event.json | schemamark render --format json-ld --script-tag -
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from schemamark.cli.cli_types import KeyedEnumParam
from schemamark.cli.cmd_common import build_config, get_console, read_input_entities
from schemamark.cli.errors import translate_errors
from schemamark.cli.options import common_config_options
from schemamark.config.logging import get_logger
from schemamark.rendering.formats import RenderFormat
from schemamark.rendering.registry import get_renderer

if TYPE_CHECKING:
    from schemamark.cli.console_api import ConsoleLike
    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.config.model import RenderConfig
    from schemamark.core.entity import SchemaEntity
    from schemamark.rendering.base import SchemaRenderer

logger: SchemaMarkLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render entity documents to JSON-LD, Microdata or RDFa.",
)
@click.argument("paths", nargs=-1, metavar="[PATHS]... | -")
@click.option(
    "--format",
    "-f",
    "render_format",
    type=KeyedEnumParam(RenderFormat),
    default=None,
    help=f"Markup format ({', '.join(RenderFormat.keys())}); default from config.",
)
@click.option(
    "--pretty/--no-pretty",
    "pretty_print",
    default=None,
    help="Pretty-print (indent) the output.",
)
@click.option(
    "--script-tag/--no-script-tag",
    "include_script_tag",
    default=None,
    help="Wrap JSON-LD in a <script type=\"application/ld+json\"> element.",
)
@click.option(
    "--compact/--no-compact",
    "compact_output",
    default=None,
    help="Drop empty values from JSON-LD output.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Check entities first and refuse to render malformed ones.",
)
@click.option(
    "--context",
    "context",
    default=None,
    help="Vocabulary context for entities that declare none.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum entity nesting depth (0 disables the guard).",
)
@common_config_options
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    render_format: RenderFormat | None,
    pretty_print: bool | None,
    include_script_tag: bool | None,
    compact_output: bool | None,
    strict: bool | None,
    context: str | None,
    max_depth: int | None,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Render entity documents to markup.

    Args:
        ctx (click.Context): Click context.
        paths (tuple[str, ...]): Input files, or ``-`` for STDIN.
        render_format (RenderFormat | None): Requested format (config default if None).
        pretty_print (bool | None): Override for pretty-printing.
        include_script_tag (bool | None): Override for the JSON-LD script wrapper.
        compact_output (bool | None): Override for JSON-LD compaction.
        strict (bool | None): Refuse malformed entities.
        context (str | None): Default vocabulary context.
        max_depth (int | None): Nesting depth guard override.
        config_files (tuple[str, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
    """
    console: ConsoleLike = get_console(ctx)
    overrides: dict[str, Any] = {
        "default_format": render_format,
        "pretty_print": pretty_print,
        "include_script_tag": include_script_tag,
        "compact_output": compact_output,
        "strict": strict,
        "context": context,
        "max_depth": max_depth,
    }
    config: RenderConfig = build_config(
        ctx,
        config_files=config_files,
        no_config=no_config,
        overrides=overrides,
    )

    entities: list[tuple[str, SchemaEntity]] = read_input_entities(paths, context=config.context)
    with translate_errors():
        renderer: SchemaRenderer[Any] = get_renderer(config=config)
        outputs: list[str] = []
        for source, entity in entities:
            logger.debug("Rendering %s from %s as %s", entity.type, source, renderer.format_name())
            outputs.append(renderer.render(entity))

    console.print("\n\n".join(outputs))
