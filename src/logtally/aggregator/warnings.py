# topmark:header:start
#
#   project      : LogTally
#   file         : warnings.py
#   file_relpath : src/logtally/aggregator/warnings.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Warning counts collected while aggregating requests.

Warnings are non-fatal anomalies reported by the request source (for example a
parsable line seen before any header line). Only the number of occurrences per
kind is kept; messages and line numbers are left to the caller's logger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logtally.constants import NO_CURRENT_REQUEST

if TYPE_CHECKING:
    from collections.abc import Iterator


class WarningRegistry:
    """Mapping of warning kind to a non-decreasing occurrence count."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def record(self, kind: str) -> int:
        """Count one occurrence of ``kind`` and return the new count."""
        self._counts[kind] = self._counts.get(kind, 0) + 1
        return self._counts[kind]

    def count(self, kind: str) -> int:
        """Return the number of occurrences of ``kind`` (0 if never recorded)."""
        return self._counts.get(kind, 0)

    @property
    def total(self) -> int:
        """Total number of warnings across all kinds."""
        return sum(self._counts.values())

    @property
    def has_log_ordering_warnings(self) -> bool:
        """True if any ``no_current_request`` warning was recorded."""
        return self.count(NO_CURRENT_REQUEST) > 0

    def items(self) -> list[tuple[str, int]]:
        """Return ``(kind, count)`` pairs in first-seen order."""
        return list(self._counts.items())

    def summary(self, separator: str = ", ") -> str:
        """Return the counts as ``kind: count`` pairs joined by ``separator``."""
        return separator.join(f"{kind}: {count}" for kind, count in self._counts.items())

    def __getitem__(self, kind: str) -> int:
        return self.count(kind)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __bool__(self) -> bool:
        return self.total > 0

    def __repr__(self) -> str:
        return f"WarningRegistry({self._counts!r})"
