# topmark:header:start
#
#   project      : LogTally
#   file         : test_report.py
#   file_relpath : tests/aggregator/test_report.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Tests for `Summarizer.report()`: header, tracker sections and footer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from logtally.aggregator.definer import Definer
from logtally.aggregator.summarizer import Summarizer, SummarizerState
from logtally.constants import LOGGING_HELP_URL
from tests.conftest import RecordingOutput, RecordingTracker, make_request

if TYPE_CHECKING:
    from collections.abc import Callable

    from logtally.source import StaticSource


def _finalized(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    titles: tuple[str, ...] = ("A", "B"),
    **source_kwargs: Any,
) -> Summarizer:
    definer = Definer()
    for title in titles:
        definer.track(RecordingTracker, title=title, journal=journal)
    summarizer = Summarizer(make_source(definer, **source_kwargs))
    summarizer.prepare()
    summarizer.finalize()
    return summarizer


@pytest.fixture
def source_kwargs() -> dict[str, Any]:
    return {
        "processed_files": ["a.log", "b.log"],
        "parsed_lines": 10,
        "skipped_lines": 2,
        "parsed_requests": 3,
        "skipped_requests": 1,
    }


def test_header_lists_run_metadata(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
    source_kwargs: dict[str, Any],
) -> None:
    summarizer = _finalized(make_source, journal, **source_kwargs)

    summarizer.report(recording_output)

    assert recording_output.of_kind("title")[0] == "Request summary"
    header = recording_output.of_kind("table")[0]
    assert header["rows"] == [
        ["Processed File:", "a.log"],
        ["Processed File:", "b.log"],
        ["Parsed lines:", 10],
        ["Skipped lines:", 2],
        ["Parsed requests:", 3],
        ["Skipped requests:", 1],
    ]
    assert header["columns"] == ({"width": 20}, {"font": "bold"})
    assert header["style"] == {"cell_separator": False}
    assert ("write", "\n") in recording_output.events


def test_header_style_is_restored(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
    source_kwargs: dict[str, Any],
) -> None:
    summarizer = _finalized(make_source, journal, **source_kwargs)

    summarizer.report(recording_output)

    assert recording_output.style == {}


def test_header_includes_warning_summary(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
    source_kwargs: dict[str, Any],
) -> None:
    summarizer = _finalized(make_source, journal, **source_kwargs)
    summarizer.warning("unparsable_line")
    summarizer.warning("no_current_request")
    summarizer.warning("unparsable_line")

    summarizer.report(recording_output)

    rows = recording_output.of_kind("table")[0]["rows"]
    assert rows[-1] == ["Warnings:", "unparsable_line: 2, no_current_request: 1"]


def test_trackers_are_reported_in_registration_order(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
    source_kwargs: dict[str, Any],
) -> None:
    summarizer = _finalized(make_source, journal, ("one", "two", "three"), **source_kwargs)

    summarizer.report(recording_output)

    assert recording_output.of_kind("report_tracker") == ["one", "two", "three"]
    assert summarizer.state is SummarizerState.REPORTED


def test_no_requests_skips_tracker_sections(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
) -> None:
    summarizer = _finalized(make_source, journal)

    summarizer.report(recording_output)

    assert recording_output.of_kind("report_tracker") == []
    assert recording_output.of_kind("puts") == ["", "There were no requests analyzed."]


def test_parsed_requests_defaults_to_request_count(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
) -> None:
    summarizer = _finalized(make_source, journal, requests=[make_request(), make_request()])

    summarizer.report(recording_output)

    rows = recording_output.of_kind("table")[0]["rows"]
    assert ["Parsed requests:", 2] in rows
    assert recording_output.of_kind("report_tracker") == ["A", "B"]


def test_footer_only_for_log_ordering_warnings(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
    source_kwargs: dict[str, Any],
) -> None:
    summarizer = _finalized(make_source, journal, **source_kwargs)
    summarizer.warning("unparsable_line")

    summarizer.report(recording_output)

    assert "Parse warnings" not in recording_output.of_kind("title")


def test_footer_points_to_logging_help(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    recording_output: RecordingOutput,
    source_kwargs: dict[str, Any],
) -> None:
    summarizer = _finalized(make_source, journal, **source_kwargs)
    summarizer.warning("no_current_request", "line without header", 7)

    summarizer.report(recording_output)

    assert recording_output.of_kind("title")[-1] == "Parse warnings"
    footer = recording_output.of_kind("puts")
    assert footer[:3] == [
        "Parsable lines were encountered without a header line before it. It",
        "could be that logging is not setup correctly for your application.",
        "Visit this website for logging configuration tips:",
    ]
    assert footer[3] == f"<{LOGGING_HELP_URL}>"
    assert footer[4] == ""


def test_report_can_be_repeated(
    make_source: Callable[..., StaticSource],
    journal: list[tuple[str, str]],
    source_kwargs: dict[str, Any],
) -> None:
    summarizer = _finalized(make_source, journal, **source_kwargs)
    first, second = RecordingOutput(), RecordingOutput()

    summarizer.report(first)
    summarizer.report(second)

    assert first.events == second.events
