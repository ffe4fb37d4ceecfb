# topmark:header:start
#
#   project      : SchemaMark
#   file         : check.py
#   file_relpath : src/schemamark/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark `check` command.

Checks entity documents for structural problems that would prevent rendering
(empty types, contexts or property names) or that would render as empty
markup. Exits with status 1 when any ERROR is found.

Output formats:
    text      One line per diagnostic, colorized by level, then a summary.
    markdown  A table of diagnostics followed by the summary.
    json      One envelope with ``meta``, ``diagnostics`` and ``summary``.
    ndjson    One ``diagnostic`` record per finding, then one ``summary`` record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from schemamark.cli.cli_types import EnumChoiceParam
from schemamark.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    read_input_entities,
)
from schemamark.cli.exit_codes import ExitCode
from schemamark.cli.options import common_config_options
from schemamark.core.checks import check_entity
from schemamark.core.diagnostics import (
    Diagnostic,
    DiagnosticLevel,
    compute_diagnostic_stats,
    has_errors,
)
from schemamark.core.formats import OutputFormat, render_markdown_table
from schemamark.core.machine.payloads import build_meta_payload
from schemamark.core.machine.schemas import MachineKey, MachineKind
from schemamark.core.machine.serializers import serialize_json_envelope, serialize_ndjson
from schemamark.core.machine.shapes import build_ndjson_record

if TYPE_CHECKING:
    from schemamark.cli.console_api import ConsoleLike
    from schemamark.config.model import RenderConfig
    from schemamark.core.diagnostics import DiagnosticStats
    from schemamark.core.entity import SchemaEntity
    from schemamark.core.machine.schemas import MetaPayload


def _qualify(source: str, diag: Diagnostic) -> Diagnostic:
    """Prefix a diagnostic's location with its input source."""
    where: str = f"{source}:{diag.where}" if diag.where else source
    return Diagnostic(diag.level, diag.message, where)


def _emit_text(console: ConsoleLike, diags: list[Diagnostic], stats: DiagnosticStats) -> None:
    for diag in diags:
        label: str = f"[{diag.level.value}]"
        if console.enable_color:
            label = diag.level.color(label)
        console.print(f"{label} {diag.where}: {diag.message}")
    console.print(f"{stats.n_error} error(s), {stats.n_warning} warning(s), {stats.n_info} info")


def _emit_markdown(console: ConsoleLike, diags: list[Diagnostic], stats: DiagnosticStats) -> None:
    console.print("# SchemaMark check\n")
    if diags:
        rows: list[list[str]] = [[d.level.value, f"`{d.where}`", d.message] for d in diags]
        console.print(render_markdown_table(["Level", "Where", "Message"], rows))
    console.print(
        f"**{stats.n_error}** error(s), **{stats.n_warning}** warning(s), "
        f"**{stats.n_info}** info"
    )


@click.command(
    name="check",
    help="Check entity documents for structural problems.",
)
@click.argument("paths", nargs=-1, metavar="[PATHS]... | -")
@click.option(
    "--output-format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Report format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Nesting depth above which a warning is reported (0 disables).",
)
@click.option(
    "--context",
    "context",
    default=None,
    help="Vocabulary context for entities that declare none.",
)
@common_config_options
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    output_format: OutputFormat | None,
    max_depth: int | None,
    context: str | None,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Check entity documents and report diagnostics.

    Args:
        ctx (click.Context): Click context.
        paths (tuple[str, ...]): Input files, or ``-`` for STDIN.
        output_format (OutputFormat | None): Report format (text if None).
        max_depth (int | None): Depth warning threshold override.
        context (str | None): Default vocabulary context.
        config_files (tuple[str, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
    """
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    config: RenderConfig = build_config(
        ctx,
        config_files=config_files,
        no_config=no_config,
        overrides={"max_depth": max_depth, "context": context},
    )

    entities: list[tuple[str, SchemaEntity]] = read_input_entities(paths, context=config.context)
    diags: list[Diagnostic] = []
    for source, entity in entities:
        diags.extend(_qualify(source, d) for d in check_entity(entity, max_depth=config.max_depth))

    if get_effective_verbosity(ctx) < 0 and fmt == OutputFormat.TEXT:
        # Quiet text mode only reports errors
        diags = [d for d in diags if d.level == DiagnosticLevel.ERROR]
    stats: DiagnosticStats = compute_diagnostic_stats(diags)

    if fmt == OutputFormat.JSON:
        meta: MetaPayload = build_meta_payload()
        console.print(
            serialize_json_envelope(
                meta,
                **{
                    MachineKey.DIAGNOSTICS: [d.to_dict() for d in diags],
                    MachineKey.SUMMARY: stats.to_dict(),
                },
            )
        )
    elif fmt == OutputFormat.NDJSON:
        meta = build_meta_payload()
        records = [
            build_ndjson_record(kind=MachineKind.DIAGNOSTIC, meta=meta, payload=d.to_dict())
            for d in diags
        ]
        records.append(
            build_ndjson_record(kind=MachineKind.SUMMARY, meta=meta, payload=stats.to_dict())
        )
        console.print(serialize_ndjson(records), nl=False)
    elif fmt == OutputFormat.MARKDOWN:
        _emit_markdown(console, diags, stats)
    else:
        _emit_text(console, diags, stats)

    if has_errors(diags):
        ctx.exit(ExitCode.FAILURE)
