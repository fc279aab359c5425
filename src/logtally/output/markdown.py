# topmark:header:start
#
#   project      : LogTally
#   file         : markdown.py
#   file_relpath : src/logtally/output/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Markdown report output."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

from logtally.output.base import BaseOutput
from logtally.output.console import format_cell

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


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
        align: Optional mapping of column index to ``"left"`` (default),
            ``"right"`` or ``"center"``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(str(h))) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = widths[i]
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    lines: list[str] = [_line(headers), _line([_sep_for(i) for i in range(ncols)])]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"


class MarkdownOutput(BaseOutput):
    """Write reports as Markdown.

    Args:
        out (TextIO | None): Destination stream (defaults to `sys.stdout`).
    """

    def __init__(self, *, out: TextIO | None = None) -> None:
        super().__init__()
        self.out: TextIO = out or sys.stdout

    def puts(self, text: str = "") -> None:
        self.out.write(f"{text}\n")

    def write(self, text: str) -> None:
        self.out.write(text)

    def title(self, text: str) -> None:
        self.puts()
        self.puts(f"## {text}")
        self.puts()

    def link(self, url: str, text: str | None = None) -> str:
        return f"[{text or url}]({url})"

    def render_table(
        self,
        columns: Sequence[Mapping[str, Any]],
        rows: Sequence[Sequence[Any]],
        style: Mapping[str, Any],
    ) -> None:
        ncols: int = max([len(columns)] + [len(row) for row in rows])
        cols: list[Mapping[str, Any]] = [
            columns[i] if i < len(columns) else {} for i in range(ncols)
        ]
        headers: list[str] = [str(col.get("title", "")) for col in cols]
        cells: list[list[str]] = [
            [format_cell(row[i], cols[i]) if i < len(row) else "" for i in range(ncols)]
            for row in rows
        ]
        align: dict[int, str] = {
            i: str(col["align"]) for i, col in enumerate(cols) if col.get("align")
        }
        self.write(render_markdown_table(headers, cells, align=align))
