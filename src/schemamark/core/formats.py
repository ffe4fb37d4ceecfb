# topmark:header:start
#
#   project      : SchemaMark
#   file         : formats.py
#   file_relpath : src/schemamark/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across SchemaMark frontends.

This module centralizes the `OutputFormat` enum so CLI commands and machine
emitters agree on the same report format vocabulary without introducing
`Click` or console dependencies.

`OutputFormat` describes how *reports* are printed (diagnostics, format
listings, version info). The markup formats an entity is rendered to are a
separate vocabulary: see `schemamark.rendering.formats.RenderFormat`.

Machine formats (JSON, NDJSON) are intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class OutputFormat(str, Enum):
    """Output format for CLI reports.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable).
        NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).

    Notes:
        - Machine formats (``JSON`` and ``NDJSON``) must not include ANSI color.
        - Use with `schemamark.cli.cli_types.EnumChoiceParam` to parse
          ``--output-format`` from Click.
    """

    # Human formats:
    TEXT = "text"
    MARKDOWN = "markdown"

    # Machine formats:
    JSON = "json"
    NDJSON = "ndjson"


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
      headers: Column headers.
      rows: A sequence of row sequences (each row same length as ``headers``).
      align: Optional mapping of column index to alignment: ``"left"`` (default),
        ``"right"``, or ``"center"``.

    Returns:
      The Markdown table as a single string (ending with a newline).

    Raises:
      ValueError: If a row does not have one cell per header.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = max(1, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if style == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    lines: list[str] = [_line(headers), "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"
