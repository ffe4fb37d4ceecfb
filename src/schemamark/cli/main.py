# topmark:header:start
#
#   project      : SchemaMark
#   file         : main.py
#   file_relpath : src/schemamark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark command-line interface.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Subcommands share the config and input helpers from `schemamark.cli.cmd_common`.
- Internal logging goes to stderr and is controlled by ``SCHEMAMARK_LOG_LEVEL``
  or by repeating ``-v`` (``-vv`` DEBUG, ``-vvv`` TRACE).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from schemamark.cli.commands.check import check_command
from schemamark.cli.commands.config import config_group
from schemamark.cli.commands.formats import formats_command
from schemamark.cli.commands.render import render_command
from schemamark.cli.commands.version import version_command
from schemamark.cli.console import ClickConsole
from schemamark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from schemamark.config.logging import TRACE_LEVEL, get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from schemamark.cli.console_api import ConsoleLike
    from schemamark.config.logging import SchemaMarkLogger

logger: SchemaMarkLogger = get_logger(__name__)


def _log_level_for(verbosity: int) -> int | None:
    """Map the ``-v`` count to an internal log level (``None`` keeps the default)."""
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    return None


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # Program-output verbosity
    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging: the environment wins over -vv/-vvv
    level_log: int | None = resolve_env_log_level() or _log_level_for(level_cli)
    ctx.obj["log_level"] = level_log
    setup_logging(level=level_log)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SchemaMark: render Schema.org entities as JSON-LD, Microdata or RDFa.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the SchemaMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'schemamark render [PATHS]...' to render entity documents.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(check_command)

cli.add_command(formats_command)

cli.add_command(config_group)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
