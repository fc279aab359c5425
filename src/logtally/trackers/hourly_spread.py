# topmark:header:start
#
#   project      : LogTally
#   file         : hourly_spread.py
#   file_relpath : src/logtally/trackers/hourly_spread.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Hourly spread tracker: requests per hour of the day.

Options:
    field: Timestamp field name (default: ``timestamp``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from logtally.constants import DEFAULT_TIMESTAMP_FIELD
from logtally.core.timestamps import coerce_timestamp
from logtally.trackers.base import BaseTracker
from logtally.trackers.registry import register_tracker

if TYPE_CHECKING:
    from collections.abc import Mapping

    from logtally.output.contracts import Output
    from logtally.request import Request

BAR_WIDTH: Final[int] = 40


@register_tracker("hourly_spread")
class HourlySpreadTracker(BaseTracker):
    """Count accepted requests in 24 hour-of-day bins."""

    default_title = "Request distribution per hour"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        self.field: str = str(self.options.get("field") or DEFAULT_TIMESTAMP_FIELD)
        self.hour_frequencies: list[int] = [0] * 24

    def prepare(self) -> None:
        self.hour_frequencies = [0] * 24

    def accepts(self, request: Request) -> bool:
        return coerce_timestamp(request.first(self.field)) is not None

    def update(self, request: Request) -> None:
        super().update(request)
        timestamp = coerce_timestamp(request.first(self.field))
        if timestamp is None:
            return
        self.hour_frequencies[timestamp.hour] += 1

    @property
    def total(self) -> int:
        """Number of requests counted across all hours."""
        return sum(self.hour_frequencies)

    def export_state(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "hours": {
                f"{hour:02d}:00": count for hour, count in enumerate(self.hour_frequencies)
            },
        }

    def report(self, output: Output) -> None:
        output.title(self.title)
        if self.total == 0:
            output.puts("None found.")
            return

        peak: int = max(self.hour_frequencies)
        with output.table(
            {"title": "Hour", "align": "right"},
            {"title": "Hits", "align": "right", "min_width": 4},
            {"title": "Spread", "align": "left"},
        ) as rows:
            for hour, count in enumerate(self.hour_frequencies):
                bar: str = "=" * round(BAR_WIDTH * count / peak) if peak else ""
                rows.append([f"{hour:02d}:00", count, bar])
