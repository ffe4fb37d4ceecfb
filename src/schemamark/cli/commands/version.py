# topmark:header:start
#
#   project      : SchemaMark
#   file         : version.py
#   file_relpath : src/schemamark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark `version` command.

Prints the current SchemaMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from schemamark.cli.cli_types import EnumChoiceParam
from schemamark.cli.cmd_common import get_console, get_effective_verbosity
from schemamark.constants import SCHEMAMARK_VERSION
from schemamark.core.formats import OutputFormat
from schemamark.core.machine.payloads import build_meta_payload
from schemamark.core.machine.schemas import MachineKey, MachineKind
from schemamark.core.machine.serializers import serialize_json_envelope, serialize_ndjson
from schemamark.core.machine.shapes import build_ndjson_record

if TYPE_CHECKING:
    from schemamark.cli.console_api import ConsoleLike
    from schemamark.core.machine.schemas import MetaPayload


@click.command(
    name="version",
    help="Show the current version of SchemaMark.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SchemaMark.

    Args:
        ctx (click.Context): Click context.
        output_format (OutputFormat | None): Optional output format.
    """
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    payload: dict[str, str] = {"version": SCHEMAMARK_VERSION}

    if fmt == OutputFormat.JSON:
        meta: MetaPayload = build_meta_payload()
        console.print(serialize_json_envelope(meta, **{MachineKey.VERSION_INFO: payload}))
    elif fmt == OutputFormat.NDJSON:
        meta = build_meta_payload()
        record = build_ndjson_record(kind=MachineKind.VERSION, meta=meta, payload=payload)
        console.print(serialize_ndjson([record]), nl=False)
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# SchemaMark Version\n")
        console.print(f"**SchemaMark version: {SCHEMAMARK_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("SchemaMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SCHEMAMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(SCHEMAMARK_VERSION, bold=True))
