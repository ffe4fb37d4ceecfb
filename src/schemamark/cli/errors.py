# topmark:header:start
#
#   project      : SchemaMark
#   file         : errors.py
#   file_relpath : src/schemamark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SchemaMark CLI.

Usage:
    Commands raise these exceptions (directly, or via `translate_errors`) to
    signal errors with standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any

import click

from schemamark.cli.exit_codes import ExitCode
from schemamark.core.errors import (
    EntityLoadError,
    MalformedEntityError,
    SchemaMarkError,
    UnencodableValueError,
    UnknownFormatError,
)


class SchemaMarkCliError(click.ClickException):
    """Base class for all SchemaMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SchemaMarkUsageError(SchemaMarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SchemaMarkDataError(SchemaMarkCliError):
    """Error for invalid input documents or malformed entities."""

    exit_code = ExitCode.DATA_ERROR


class SchemaMarkFileNotFoundError(SchemaMarkCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SchemaMarkRenderError(SchemaMarkCliError):
    """Error for values that cannot be encoded while rendering."""

    exit_code = ExitCode.RENDER_ERROR


class SchemaMarkConfigError(SchemaMarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


@contextmanager
def translate_errors() -> Iterator[None]:
    """Map library exceptions raised in the block onto CLI errors."""
    try:
        yield
    except (EntityLoadError, MalformedEntityError) as exc:
        raise SchemaMarkDataError(exc.message) from exc
    except UnencodableValueError as exc:
        raise SchemaMarkRenderError(exc.message) from exc
    except UnknownFormatError as exc:
        raise SchemaMarkUsageError(exc.message) from exc
    except SchemaMarkError as exc:
        raise SchemaMarkCliError(exc.message) from exc
