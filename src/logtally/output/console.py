# topmark:header:start
#
#   project      : LogTally
#   file         : console.py
#   file_relpath : src/logtally/output/console.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Fixed-width terminal output for reports.

`ConsoleOutput` writes plain text through ``click.echo`` and applies ANSI
styles with ``click.style`` when color is enabled. It is independent from the
logging subsystem: reports go to the configured stream, diagnostics go to the
logger.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

from logtally.output.base import BaseOutput

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def format_cell(value: Any, column: Mapping[str, Any]) -> str:
    """Return the text of a table cell according to the column ``type``."""
    if column.get("type") == "ratio" and isinstance(value, (int, float)):
        return f"{value * 100:.1f}%"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


class ConsoleOutput(BaseOutput):
    """Fixed-width report output.

    Args:
        out (TextIO | None): Destination stream (defaults to `sys.stdout`).
        enable_color (bool): If True, emit ANSI styles.
        width (int): Width of title rules.

    Style options (``with_style()`` / ``table(**style)``):
        cell_separator (bool): Separate columns with ``" | "`` (default: True).
    """

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        enable_color: bool = False,
        width: int = 80,
    ) -> None:
        super().__init__()
        self.out: TextIO = out or sys.stdout
        self.enable_color: bool = enable_color
        self.width: int = width

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def puts(self, text: str = "") -> None:
        click.echo(text, file=self.out, color=self.enable_color)

    def write(self, text: str) -> None:
        click.echo(text, nl=False, file=self.out, color=self.enable_color)

    def title(self, text: str) -> None:
        self.puts()
        self.puts(self.styled(text, bold=True))
        self.puts(self.styled("-" * self.width, fg="green"))

    def link(self, url: str, text: str | None = None) -> str:
        target: str = self.styled(url, underline=True)
        return f"{text} ({target})" if text else target

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
        cells: list[list[str]] = [
            [format_cell(row[i], cols[i]) if i < len(row) else "" for i in range(ncols)]
            for row in rows
        ]
        headers: list[str] = [str(col.get("title", "")) for col in cols]
        has_header: bool = any(headers)

        widths: list[int] = []
        for i, col in enumerate(cols):
            if col.get("width"):
                widths.append(int(col["width"]))
                continue
            natural: int = max([len(r[i]) for r in cells] + [len(headers[i]) if has_header else 0])
            widths.append(max(natural, int(col.get("min_width", 0))))

        separator: str = " | " if style.get("cell_separator", True) else " "

        def _line(values: list[str], *, header: bool = False) -> str:
            parts: list[str] = []
            for i, text in enumerate(values):
                w: int = widths[i]
                text = text[:w]
                padded: str = text.rjust(w) if cols[i].get("align") == "right" else text.ljust(w)
                if header or cols[i].get("font") == "bold":
                    padded = self.styled(padded, bold=True)
                parts.append(padded)
            return separator.join(parts).rstrip()

        if has_header:
            self.puts(_line(headers, header=True))
            self.puts("-" * (sum(widths) + len(separator) * (ncols - 1)))
        for row_cells in cells:
            self.puts(_line(row_cells))
