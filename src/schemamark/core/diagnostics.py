# topmark:header:start
#
#   project      : SchemaMark
#   file         : diagnostics.py
#   file_relpath : src/schemamark/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected while checking entities or loading config.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a message and an optional location."""

    level: DiagnosticLevel
    message: str
    where: str = ""

    def __str__(self) -> str:
        prefix: str = f"{self.where}: " if self.where else ""
        return f"[{self.level.value}] {prefix}{self.message}"

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping for machine output."""
        return {"level": self.level.value, "where": self.where, "message": self.message}


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping for machine output."""
        return {
            "info": self.n_info,
            "warning": self.n_warning,
            "error": self.n_error,
            "total": self.total,
        }


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_info: int = sum(1 for d in diags if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def has_errors(diags: Sequence[Diagnostic]) -> bool:
    """Return True if any diagnostic has ERROR level."""
    return any(d.level == DiagnosticLevel.ERROR for d in diags)
