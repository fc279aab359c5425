# topmark:header:start
#
#   project      : LogTally
#   file         : timespan.py
#   file_relpath : src/logtally/trackers/timespan.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Timespan tracker: first and last request timestamp.

Options:
    field: Timestamp field name (default: ``timestamp``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from logtally.constants import DEFAULT_TIMESTAMP_FIELD
from logtally.core.timestamps import coerce_timestamp
from logtally.trackers.base import BaseTracker
from logtally.trackers.registry import register_tracker

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from logtally.output.contracts import Output
    from logtally.request import Request


@register_tracker("timespan")
class TimespanTracker(BaseTracker):
    """Track the earliest and latest timestamp of the accepted requests."""

    default_title = "Request timespan"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        self.field: str = str(self.options.get("field") or DEFAULT_TIMESTAMP_FIELD)
        self.first: datetime | None = None
        self.last: datetime | None = None

    def prepare(self) -> None:
        self.first = None
        self.last = None

    def accepts(self, request: Request) -> bool:
        return coerce_timestamp(request.first(self.field)) is not None

    def update(self, request: Request) -> None:
        super().update(request)
        timestamp = coerce_timestamp(request.first(self.field))
        if timestamp is None:
            return
        if self.first is None or timestamp < self.first:
            self.first = timestamp
        if self.last is None or timestamp > self.last:
            self.last = timestamp

    @property
    def seconds(self) -> float:
        """Seconds between the first and the last timestamp."""
        if self.first is None or self.last is None:
            return 0.0
        return (self.last - self.first).total_seconds()

    def export_state(self) -> dict[str, Any]:
        return {
            "first": self.first.isoformat() if self.first else None,
            "last": self.last.isoformat() if self.last else None,
            "seconds": self.seconds,
        }

    def report(self, output: Output) -> None:
        output.title(self.title)
        if self.first is None or self.last is None:
            output.puts("None found.")
            return

        with output.table({"width": 20}, {}) as rows:
            rows.append(["First request:", self.first.isoformat(sep=" ")])
            rows.append(["Last request:", self.last.isoformat(sep=" ")])
            rows.append(["Total time analyzed:", str(self.last - self.first)])
