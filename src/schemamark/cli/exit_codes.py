# topmark:header:start
#
#   project      : SchemaMark
#   file         : exit_codes.py
#   file_relpath : src/schemamark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SchemaMark CLI.

SchemaMark aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. ``FAILURE = 1`` is used by
``check`` to report entities with ERROR diagnostics.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SchemaMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: ``check`` found ERROR diagnostics (or another generic failure).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Invalid input document or malformed entity. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        RENDER_ERROR: A value could not be encoded while rendering. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Configuration error (unreadable/malformed config). Mirrors
            BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    RENDER_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
