# topmark:header:start
#
#   project      : LogTally
#   file         : base.py
#   file_relpath : src/logtally/output/base.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Shared behavior for the bundled output sinks.

`BaseOutput` implements the medium-independent parts of the `Output` protocol:
scoped styles, row collection for tables, and tracker rendering. Subclasses
implement ``title()``, ``puts()``, ``write()``, ``link()`` and ``render_table()``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from logtally.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from logtally.config.logging import LogtallyLogger
    from logtally.trackers.contracts import Tracker

logger: LogtallyLogger = get_logger(__name__)


def flatten_export(state: Any, prefix: str = "") -> list[tuple[str, Any]]:
    """Flatten a nested export into ``(dotted.key, value)`` pairs.

    Args:
        state (Any): A tracker export (nested mappings, sequences and primitives).
        prefix (str): Key prefix for nested values.

    Returns:
        list[tuple[str, Any]]: Leaf values in export order.
    """
    if isinstance(state, Mapping):
        pairs: list[tuple[str, Any]] = []
        for key, value in state.items():
            pairs.extend(flatten_export(value, f"{prefix}.{key}" if prefix else str(key)))
        return pairs
    if isinstance(state, Sequence) and not isinstance(state, (str, bytes)):
        pairs = []
        for index, value in enumerate(state):
            pairs.extend(flatten_export(value, f"{prefix}.{index}" if prefix else str(index)))
        return pairs
    return [(prefix or "value", state)]


class BaseOutput:
    """Medium-independent part of an output sink.

    Attributes:
        style (dict[str, Any]): The active style options (see ``with_style()``).
    """

    def __init__(self) -> None:
        self.style: dict[str, Any] = {}

    def title(self, text: str) -> None:
        raise NotImplementedError

    def puts(self, text: str = "") -> None:
        raise NotImplementedError

    def write(self, text: str) -> None:
        raise NotImplementedError

    def link(self, url: str, text: str | None = None) -> str:
        raise NotImplementedError

    def render_table(
        self,
        columns: Sequence[Mapping[str, Any]],
        rows: Sequence[Sequence[Any]],
        style: Mapping[str, Any],
    ) -> None:
        """Render collected ``rows`` with ``columns`` options and the effective ``style``."""
        raise NotImplementedError

    @contextmanager
    def with_style(self, **style: Any) -> Iterator[BaseOutput]:
        """Apply ``style`` within the block and restore the previous style afterwards."""
        previous: dict[str, Any] = self.style
        self.style = {**previous, **style}
        try:
            yield self
        finally:
            self.style = previous

    @contextmanager
    def table(self, *columns: Mapping[str, Any], **style: Any) -> Iterator[list[list[Any]]]:
        """Yield a row list and render it when the block exits normally."""
        rows: list[list[Any]] = []
        yield rows
        self.render_table(columns, rows, {**self.style, **style})

    def report_tracker(self, tracker: Tracker) -> None:
        """Let ``tracker`` render itself, or render its exported state generically."""
        report = getattr(tracker, "report", None)
        if callable(report):
            report(self)
            return

        logger.debug("Tracker %r has no report(); rendering its export", tracker)
        self.title(tracker.title)
        with self.table({"title": "Key"}, {"title": "Value"}) as rows:
            for key, value in flatten_export(tracker.export_state()):
                rows.append([key, value])
