# topmark:header:start
#
#   project      : LogTally
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Pytest configuration for the LogTally test suite.

This file sets up global fixtures, customizes the logging configuration for
test runs, and provides test doubles shared across the suite:

- `RecordingTracker`: a tracker that journals every lifecycle call.
- `RecordingOutput`: an output sink that records the calls it receives.
- `make_request()`: builds a single-line `Request` from keyword fields.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from logtally.aggregator.definer import Definer
from logtally.config import logging
from logtally.request import Request
from logtally.source import StaticSource
from logtally.trackers.base import BaseTracker

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_logtally_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LogTally's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so detailed output is captured during tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_request(line_type: str = "completed", **fields: Any) -> Request:
    """Build a single-line request of ``line_type`` with ``fields``."""
    return Request.from_lines({"line_type": line_type, **fields})


class RecordingTracker(BaseTracker):
    """Tracker that records its lifecycle calls.

    Options:
        journal (list[tuple[str, str]]): Shared list receiving ``(title, event)``
            pairs, so the interleaving of several trackers can be asserted.
        accept (Callable[[Request], bool]): Gate used by ``should_update``
            (default: accept everything).
        fail_on_update (bool): Raise ``RuntimeError`` from ``update()``.
        fail_on (str): Lifecycle event (``"prepare"``, ``"finalize"``) that
            raises ``RuntimeError`` after being journaled.
    """

    default_title = "Recording"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        self.journal: list[tuple[str, str]] = self.options.get("journal", [])
        self.accept: Callable[[Request], bool] = self.options.get("accept", lambda _r: True)
        self.calls: list[str] = []
        self.seen: list[Request] = []

    def _log(self, event: str) -> None:
        self.calls.append(event)
        self.journal.append((self.title, event))
        if self.options.get("fail_on") == event:
            raise RuntimeError(f"{self.title} failed in {event}")

    def prepare(self) -> None:
        self._log("prepare")

    def should_update(self, request: Request) -> bool:
        self._log("should_update")
        return self.accept(request)

    def update(self, request: Request) -> None:
        super().update(request)
        self._log("update")
        if self.options.get("fail_on_update"):
            raise RuntimeError(f"{self.title} failed")
        self.seen.append(request)

    def finalize(self) -> None:
        self._log("finalize")

    def export_state(self) -> dict[str, int]:
        return {"updates": self.updates}


class RecordingOutput:
    """Output sink recording every call as ``(method, payload)`` tuples."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []
        self.style: dict[str, Any] = {}

    def title(self, text: str) -> None:
        self.events.append(("title", text))

    def puts(self, text: str = "") -> None:
        self.events.append(("puts", text))

    def write(self, text: str) -> None:
        self.events.append(("write", text))

    def link(self, url: str, text: str | None = None) -> str:
        return f"<{url}>"

    @contextmanager
    def table(self, *columns: Mapping[str, Any], **style: Any) -> Iterator[list[list[Any]]]:
        rows: list[list[Any]] = []
        yield rows
        payload = {"columns": columns, "rows": rows, "style": dict(self.style)}
        self.events.append(("table", payload))

    @contextmanager
    def with_style(self, **style: Any) -> Iterator[RecordingOutput]:
        previous = self.style
        self.style = {**previous, **style}
        try:
            yield self
        finally:
            self.style = previous

    def report_tracker(self, tracker: Any) -> None:
        self.events.append(("report_tracker", tracker.title))

    def of_kind(self, kind: str) -> list[Any]:
        """Return the payloads of all events of ``kind``."""
        return [payload for name, payload in self.events if name == kind]


@pytest.fixture
def journal() -> list[tuple[str, str]]:
    """Shared lifecycle journal for `RecordingTracker` instances."""
    return []


@pytest.fixture
def recording_output() -> RecordingOutput:
    """A fresh `RecordingOutput`."""
    return RecordingOutput()


@pytest.fixture
def make_source() -> Callable[..., StaticSource]:
    """Factory building a `StaticSource` from a definer and requests."""

    def _make(
        definer: Definer | None = None, requests: list[Request] | None = None, **kwargs: Any
    ) -> StaticSource:
        if definer is None:
            definer = Definer()
        return StaticSource.with_trackers(definer, requests or [], **kwargs)

    return _make
