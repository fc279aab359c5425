# topmark:header:start
#
#   project      : LogTally
#   file         : duration.py
#   file_relpath : src/logtally/trackers/duration.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Duration tracker: numeric statistics per category.

Options:
    value: Field name or callable yielding the numeric value (required). The
        shorthand ``track("duration", "response_time")`` sets it.
    category: Field name or callable yielding the category (default: a single
        ``"all"`` bucket).
    amount: Number of rows shown in the report (default: 20).

Mean and variance are accumulated with Welford's online algorithm so a single
pass over the requests suffices.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from logtally.trackers.base import BaseTracker, make_extractor
from logtally.trackers.registry import register_tracker

if TYPE_CHECKING:
    from collections.abc import Mapping

    from logtally.output.contracts import Output
    from logtally.request import Request
    from logtally.trackers.base import Extractor

ALL_CATEGORY: Final[str] = "all"


def as_number(value: object) -> float | None:
    """Return ``value`` as a finite float, or None when it is not numeric.

    ``nan`` and infinities are rejected so they never reach the running statistics.
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number: float = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


@dataclass
class DurationStats:
    """Running statistics for one category."""

    hits: int = 0
    sum: float = 0.0
    min: float = math.inf
    max: float = -math.inf
    mean: float = 0.0
    m2: float = 0.0

    def add(self, value: float) -> None:
        """Fold ``value`` into the statistics."""
        self.hits += 1
        self.sum += value
        self.min = min(self.min, value)
        self.max = max(self.max, value)
        delta: float = value - self.mean
        self.mean += delta / self.hits
        self.m2 += delta * (value - self.mean)

    @property
    def variance(self) -> float:
        """Sample variance (0.0 with fewer than two values)."""
        if self.hits < 2:
            return 0.0
        return self.m2 / (self.hits - 1)

    @property
    def stddev(self) -> float:
        """Sample standard deviation."""
        return math.sqrt(self.variance)

    def as_dict(self) -> dict[str, float | int]:
        """Return the exported representation."""
        return {
            "hits": self.hits,
            "sum": self.sum,
            "mean": self.mean,
            "min": self.min,
            "max": self.max,
            "stddev": self.stddev,
        }


@register_tracker("duration")
class DurationTracker(BaseTracker):
    """Track hits, sum, mean, min, max and standard deviation of a numeric field."""

    default_title = "Request duration"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        self._value: Extractor = make_extractor(self.require_option("value"), "value")
        category = self.options.get("category")
        self._category: Extractor | None = (
            make_extractor(category, "category") if category is not None else None
        )
        self.amount: int = int(self.options.get("amount", 20))
        self.categories: dict[Any, DurationStats] = {}

    def prepare(self) -> None:
        self.categories = {}

    def _category_of(self, request: Request) -> Any:
        if self._category is None:
            return ALL_CATEGORY
        return self._category(request)

    def accepts(self, request: Request) -> bool:
        return (
            as_number(self._value(request)) is not None
            and self._category_of(request) is not None
        )

    def update(self, request: Request) -> None:
        super().update(request)
        value = as_number(self._value(request))
        if value is None:
            return
        category = self._category_of(request)
        self.categories.setdefault(category, DurationStats()).add(value)

    def stats(self, category: Any = ALL_CATEGORY) -> DurationStats | None:
        """Return the statistics of ``category``, if any request was counted for it."""
        return self.categories.get(category)

    def sorted_by_sum(self) -> list[tuple[Any, DurationStats]]:
        """Return ``(category, stats)`` pairs with the largest total first."""
        return sorted(self.categories.items(), key=lambda item: -item[1].sum)

    def export_state(self) -> dict[Any, dict[str, float | int]]:
        return {category: stats.as_dict() for category, stats in self.sorted_by_sum()}

    def report(self, output: Output) -> None:
        output.title(self.title)
        if not self.categories:
            output.puts("None found.")
            return

        with output.table(
            {"title": "Category", "align": "left"},
            {"title": "Hits", "align": "right", "min_width": 4},
            {"title": "Sum", "align": "right"},
            {"title": "Mean", "align": "right"},
            {"title": "StdDev", "align": "right"},
            {"title": "Min", "align": "right"},
            {"title": "Max", "align": "right"},
        ) as rows:
            for category, stats in self.sorted_by_sum()[: self.amount]:
                rows.append(
                    [
                        category,
                        stats.hits,
                        f"{stats.sum:.2f}",
                        f"{stats.mean:.2f}",
                        f"{stats.stddev:.2f}",
                        f"{stats.min:.2f}",
                        f"{stats.max:.2f}",
                    ]
                )
