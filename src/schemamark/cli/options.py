# topmark:header:start
#
#   project      : SchemaMark
#   file         : options.py
#   file_relpath : src/schemamark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config files) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import ParamSpec, TypeVar

import click

from schemamark.cli.errors import SchemaMarkUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v``/``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, else the number of ``-v`` flags.

    Raises:
        SchemaMarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SchemaMarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings on stderr.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON/NDJSON output formats.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` and ``--no-config`` options."""
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False),
        multiple=True,
        help="Merge this TOML config file after project discovery (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore schemamark.toml / pyproject.toml in the working directory.",
    )(f)
    return f
