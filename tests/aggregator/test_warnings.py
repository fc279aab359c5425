# topmark:header:start
#
#   project      : LogTally
#   file         : test_warnings.py
#   file_relpath : tests/aggregator/test_warnings.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Tests for `WarningRegistry`."""

from __future__ import annotations

from logtally.aggregator.warnings import WarningRegistry
from logtally.constants import NO_CURRENT_REQUEST


def test_empty_registry() -> None:
    registry = WarningRegistry()

    assert not registry
    assert registry.total == 0
    assert registry.count("anything") == 0
    assert registry.summary() == ""
    assert not registry.has_log_ordering_warnings


def test_record_returns_running_count() -> None:
    registry = WarningRegistry()

    assert registry.record("unparsable_line") == 1
    assert registry.record("unparsable_line") == 2
    assert registry.record(NO_CURRENT_REQUEST) == 1

    assert registry.total == 3
    assert len(registry) == 2
    assert list(registry) == ["unparsable_line", NO_CURRENT_REQUEST]


def test_summary_uses_first_seen_order() -> None:
    registry = WarningRegistry()
    for kind in ("b", "a", "b", "c", "b"):
        registry.record(kind)

    assert registry.summary() == "b: 3, a: 1, c: 1"
    assert registry.summary(" / ") == "b: 3 / a: 1 / c: 1"


def test_log_ordering_warning_detection() -> None:
    registry = WarningRegistry()
    registry.record("unparsable_line")
    assert not registry.has_log_ordering_warnings

    registry.record(NO_CURRENT_REQUEST)
    assert registry.has_log_ordering_warnings
    assert registry[NO_CURRENT_REQUEST] == 1
