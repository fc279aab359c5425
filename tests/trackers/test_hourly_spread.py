# topmark:header:start
#
#   project      : LogTally
#   file         : test_hourly_spread.py
#   file_relpath : tests/trackers/test_hourly_spread.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Tests for `HourlySpreadTracker`."""

from __future__ import annotations

import io
from datetime import datetime

from logtally.output.console import ConsoleOutput
from logtally.trackers.hourly_spread import BAR_WIDTH, HourlySpreadTracker
from tests.conftest import RecordingOutput, make_request


def _tracker_with(*timestamps: object) -> HourlySpreadTracker:
    tracker = HourlySpreadTracker()
    tracker.prepare()
    for ts in timestamps:
        request = make_request(timestamp=ts)
        if tracker.should_update(request):
            tracker.update(request)
    tracker.finalize()
    return tracker


def test_counts_per_hour() -> None:
    tracker = _tracker_with(
        20250314090000, 20250314091500, datetime(2025, 3, 15, 9, 59), 20250314230000
    )

    assert tracker.hour_frequencies[9] == 3
    assert tracker.hour_frequencies[23] == 1
    assert tracker.total == 4


def test_export_lists_all_24_hours() -> None:
    state = _tracker_with(20250314000000).export_state()

    assert state["total"] == 1
    assert list(state["hours"]) == [f"{h:02d}:00" for h in range(24)]
    assert state["hours"]["00:00"] == 1
    assert sum(state["hours"].values()) == 1


def test_requests_without_timestamp_are_rejected() -> None:
    tracker = _tracker_with("yesterday", None)

    assert tracker.total == 0
    assert tracker.updates == 0


def test_report_bars_are_scaled_to_the_peak() -> None:
    tracker = _tracker_with(20250314090000, 20250314090000, 20250314100000)
    output = RecordingOutput()

    tracker.report(output)  # type: ignore[arg-type]

    rows = output.of_kind("table")[0]["rows"]
    assert len(rows) == 24
    assert rows[9] == ["09:00", 2, "=" * BAR_WIDTH]
    assert rows[10] == ["10:00", 1, "=" * (BAR_WIDTH // 2)]
    assert rows[0] == ["00:00", 0, ""]


def test_console_report_without_data() -> None:
    stream = io.StringIO()

    _tracker_with().report(ConsoleOutput(out=stream))

    assert "None found." in stream.getvalue()
