# topmark:header:start
#
#   project      : LogTally
#   file         : frequency.py
#   file_relpath : src/logtally/trackers/frequency.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Frequency tracker: counts requests per category.

Options:
    category: Field name or callable yielding the category (``value`` is accepted
        as shorthand, so ``track("frequency", "status")`` counts per status).
    amount: Number of rows shown in the report (default: 20).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from logtally.constants import VALUE_OPTION
from logtally.trackers.base import BaseTracker, make_extractor
from logtally.trackers.registry import register_tracker

if TYPE_CHECKING:
    from collections.abc import Mapping

    from logtally.output.contracts import Output
    from logtally.request import Request
    from logtally.trackers.base import Extractor


@register_tracker("frequency")
class FrequencyTracker(BaseTracker):
    """Count accepted requests per category."""

    default_title = "Request frequency"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        self._category: Extractor = make_extractor(
            self.require_option("category", VALUE_OPTION), "category"
        )
        self.amount: int = int(self.options.get("amount", 20))
        self.frequencies: dict[Any, int] = {}

    def prepare(self) -> None:
        self.frequencies = {}

    def accepts(self, request: Request) -> bool:
        return self._category(request) is not None

    def update(self, request: Request) -> None:
        super().update(request)
        category = self._category(request)
        self.frequencies[category] = self.frequencies.get(category, 0) + 1

    def frequency(self, category: Any) -> int:
        """Return the number of requests counted for ``category``."""
        return self.frequencies.get(category, 0)

    def overall_frequency(self) -> int:
        """Return the number of requests counted across all categories."""
        return sum(self.frequencies.values())

    def sorted_by_frequency(self) -> list[tuple[Any, int]]:
        """Return ``(category, count)`` pairs, most frequent first (ties keep arrival order)."""
        return sorted(self.frequencies.items(), key=lambda item: -item[1])

    def export_state(self) -> dict[Any, int]:
        return dict(self.sorted_by_frequency())

    def report(self, output: Output) -> None:
        output.title(self.title)
        if not self.frequencies:
            output.puts("None found.")
            return

        total: int = self.overall_frequency()
        with output.table(
            {"title": "Category", "align": "left"},
            {"title": "Hits", "align": "right", "min_width": 4},
            {"title": "Share", "align": "right", "type": "ratio"},
        ) as rows:
            for category, count in self.sorted_by_frequency()[: self.amount]:
                rows.append([category, count, count / total])
