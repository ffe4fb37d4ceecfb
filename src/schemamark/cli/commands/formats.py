# topmark:header:start
#
#   project      : SchemaMark
#   file         : formats.py
#   file_relpath : src/schemamark/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark `formats` command.

Lists the registered markup renderers with their MIME types and aliases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from schemamark.cli.cli_types import EnumChoiceParam
from schemamark.cli.cmd_common import get_console, get_effective_verbosity
from schemamark.constants import SCHEMAMARK_VERSION
from schemamark.core.formats import OutputFormat, render_markdown_table
from schemamark.core.machine.payloads import build_meta_payload
from schemamark.core.machine.schemas import MachineKey, MachineKind
from schemamark.core.machine.serializers import serialize_json_envelope, serialize_ndjson
from schemamark.core.machine.shapes import build_ndjson_record
from schemamark.rendering.registry import iter_renderer_infos

if TYPE_CHECKING:
    from schemamark.cli.console_api import ConsoleLike
    from schemamark.core.machine.schemas import MetaPayload
    from schemamark.rendering.registry import RendererInfo


@click.command(
    name="formats",
    help="List the supported markup formats.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def formats_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """List the supported markup formats.

    Args:
        ctx (click.Context): Click context.
        output_format (OutputFormat | None): Output format (text if None).
    """
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    infos: list[RendererInfo] = list(iter_renderer_infos())

    if fmt == OutputFormat.JSON:
        meta: MetaPayload = build_meta_payload()
        console.print(
            serialize_json_envelope(meta, **{MachineKey.FORMATS: [i.to_dict() for i in infos]})
        )
        return
    if fmt == OutputFormat.NDJSON:
        meta = build_meta_payload()
        console.print(
            serialize_ndjson(
                build_ndjson_record(kind=MachineKind.FORMAT, meta=meta, payload=i.to_dict())
                for i in infos
            ),
            nl=False,
        )
        return
    if fmt == OutputFormat.MARKDOWN:
        console.print("# Supported Formats\n")
        console.print(f"SchemaMark version **{SCHEMAMARK_VERSION}** renders:\n")
        rows: list[list[str]] = [
            [f"`{i.name}`", i.label, f"`{i.mime_type}`", ", ".join(i.aliases)] for i in infos
        ]
        console.print(render_markdown_table(["Format", "Label", "MIME type", "Aliases"], rows))
        return

    vlevel: int = get_effective_verbosity(ctx)
    width: int = max((len(i.name) for i in infos), default=0)
    for info in infos:
        console.print(f"{console.styled(info.name.ljust(width), bold=True)}  {info.label}")
        if vlevel > 0:
            console.print(f"{' ' * width}  mime type: {info.mime_type}")
            if info.aliases:
                console.print(f"{' ' * width}  aliases:   {', '.join(info.aliases)}")
            console.print(f"{' ' * width}  {info.description}")
