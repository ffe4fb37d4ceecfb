# topmark:header:start
#
#   project      : SchemaMark
#   file         : config.py
#   file_relpath : src/schemamark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark `config` command group.

Subcommands:
    dump      Print the effective (merged) configuration as TOML.
    defaults  Print the bundled default configuration document (with comments).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from schemamark.cli.cmd_common import build_config, get_console
from schemamark.cli.options import common_config_options
from schemamark.config.io import nest_toml_under_section, to_toml
from schemamark.config.model import MutableRenderConfig
from schemamark.constants import PYPROJECT_SECTION

if TYPE_CHECKING:
    from schemamark.cli.console_api import ConsoleLike
    from schemamark.config.model import RenderConfig


@click.group(
    name="config",
    help="Inspect SchemaMark configuration.",
)
def config_group() -> None:
    """Group for the configuration subcommands."""


@config_group.command(
    name="dump",
    help="Print the effective configuration as TOML.",
)
@click.option(
    "--pyproject",
    "as_pyproject",
    is_flag=True,
    help=f"Nest the output under [{PYPROJECT_SECTION}] for pasting into pyproject.toml.",
)
@click.option(
    "--show-sources",
    is_flag=True,
    help="Include the list of merged config sources as `config_files`.",
)
@common_config_options
@click.pass_context
def dump_command(
    ctx: click.Context,
    *,
    as_pyproject: bool,
    show_sources: bool,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Print the effective configuration after discovery and merging.

    Args:
        ctx (click.Context): Click context.
        as_pyproject (bool): Nest the document under ``[tool.schemamark]``.
        show_sources (bool): Include the provenance list.
        config_files (tuple[str, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
    """
    console: ConsoleLike = get_console(ctx)
    config: RenderConfig = build_config(ctx, config_files=config_files, no_config=no_config)
    toml_doc: str = to_toml(config.to_toml_dict(include_files=show_sources))
    if as_pyproject:
        toml_doc = nest_toml_under_section(toml_doc, PYPROJECT_SECTION)
    console.print(toml_doc, nl=False)


@config_group.command(
    name="defaults",
    help="Print the bundled default configuration (with comments).",
)
@click.option(
    "--pyproject",
    "as_pyproject",
    is_flag=True,
    help=f"Nest the output under [{PYPROJECT_SECTION}].",
)
@click.pass_context
def defaults_command(ctx: click.Context, *, as_pyproject: bool) -> None:
    """Print the bundled default configuration document.

    Args:
        ctx (click.Context): Click context.
        as_pyproject (bool): Nest the document under ``[tool.schemamark]``.
    """
    console: ConsoleLike = get_console(ctx)
    toml_doc: str = MutableRenderConfig.get_default_config_toml()
    if as_pyproject:
        toml_doc = nest_toml_under_section(toml_doc, PYPROJECT_SECTION)
    console.print(toml_doc, nl=False)
