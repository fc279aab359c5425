# topmark:header:start
#
#   project      : LogTally
#   file         : contracts.py
#   file_relpath : src/logtally/output/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Framework-agnostic interface for report output.

The summarizer and the trackers emit reports through this small surface. It
knows nothing about the report content; implementations decide how titles,
tables and links look on their medium.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping
    from contextlib import AbstractContextManager

    from logtally.trackers.contracts import Tracker


class Output(Protocol):
    """Minimal interface for a report sink.

    Column options understood by ``table()``: ``title``, ``width``, ``min_width``,
    ``align`` (``"left"``/``"right"``), ``font`` (``"bold"``) and ``type``
    (``"ratio"`` renders a fraction as a percentage).
    """

    def title(self, text: str) -> None:
        """Emit a section title."""
        ...

    def puts(self, text: str = "") -> None:
        """Emit a line of text (an empty line when called without argument)."""
        ...

    def write(self, text: str) -> None:
        """Emit raw text without appending a newline."""
        ...

    def link(self, url: str, text: str | None = None) -> str:
        """Return ``url`` formatted as a link for this medium."""
        ...

    def table(
        self, *columns: Mapping[str, Any], **style: Any
    ) -> AbstractContextManager[list[list[Any]]]:
        """Collect rows inside a ``with`` block and render them on exit."""
        ...

    def with_style(self, **style: Any) -> AbstractContextManager[Output]:
        """Apply ``style`` within the ``with`` block; the previous style is restored on exit."""
        ...

    def report_tracker(self, tracker: Tracker) -> None:
        """Render the result of ``tracker``."""
        ...
