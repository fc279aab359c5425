# topmark:header:start
#
#   project      : LogTally
#   file         : test_frequency.py
#   file_relpath : tests/trackers/test_frequency.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Tests for `FrequencyTracker`."""

from __future__ import annotations

import io

import pytest

from logtally.core.errors import ConfigurationError
from logtally.output.console import ConsoleOutput
from logtally.trackers.frequency import FrequencyTracker
from tests.conftest import RecordingOutput, make_request


def _feed(tracker: FrequencyTracker, *statuses: object) -> None:
    tracker.prepare()
    for status in statuses:
        request = make_request(status=status)
        if tracker.should_update(request):
            tracker.update(request)
    tracker.finalize()


def test_counts_per_category_most_frequent_first() -> None:
    tracker = FrequencyTracker({"category": "status"})

    _feed(tracker, 200, 404, 200, 500, 200, 404)

    assert tracker.export_state() == {200: 3, 404: 2, 500: 1}
    assert list(tracker.export_state()) == [200, 404, 500]
    assert tracker.frequency(404) == 2
    assert tracker.frequency(302) == 0
    assert tracker.overall_frequency() == 6


def test_ties_keep_arrival_order() -> None:
    tracker = FrequencyTracker({"category": "method"})
    tracker.prepare()
    for method in ("POST", "GET", "PUT"):
        tracker.update(make_request(method=method))

    assert [c for c, _ in tracker.sorted_by_frequency()] == ["POST", "GET", "PUT"]


def test_value_option_is_category_shorthand() -> None:
    tracker = FrequencyTracker({"value": "status"})

    _feed(tracker, 200)

    assert tracker.export_state() == {200: 1}


def test_requests_without_category_are_rejected() -> None:
    tracker = FrequencyTracker({"category": "status"})

    assert not tracker.should_update(make_request(other=1))


def test_callable_category() -> None:
    tracker = FrequencyTracker({"category": lambda r: f"{r.first('status') // 100}xx"})

    _feed(tracker, 200, 201, 503)

    assert tracker.export_state() == {"2xx": 2, "5xx": 1}


def test_category_is_required() -> None:
    with pytest.raises(ConfigurationError, match="category"):
        FrequencyTracker({})


def test_prepare_resets_counts() -> None:
    tracker = FrequencyTracker({"category": "status"})
    _feed(tracker, 200)

    tracker.prepare()

    assert tracker.export_state() == {}


def test_report_table_with_amount_limit() -> None:
    tracker = FrequencyTracker({"category": "status", "amount": 2, "title": "Status"})
    _feed(tracker, 200, 200, 404, 500)
    output = RecordingOutput()

    tracker.report(output)  # type: ignore[arg-type]

    assert output.of_kind("title") == ["Status"]
    table = output.of_kind("table")[0]
    assert [col["title"] for col in table["columns"]] == ["Category", "Hits", "Share"]
    assert table["rows"] == [[200, 2, 0.5], [404, 1, 0.25]]


def test_console_report_shows_percentages() -> None:
    tracker = FrequencyTracker({"category": "status"})
    _feed(tracker, 200, 200, 200, 404)
    stream = io.StringIO()

    tracker.report(ConsoleOutput(out=stream))

    text = stream.getvalue()
    assert "Request frequency" in text
    assert "75.0%" in text
    assert "25.0%" in text


def test_report_without_data() -> None:
    tracker = FrequencyTracker({"category": "status"})
    output = RecordingOutput()

    tracker.report(output)  # type: ignore[arg-type]

    assert output.of_kind("puts") == ["None found."]
