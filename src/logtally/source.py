# topmark:header:start
#
#   project      : LogTally
#   file         : source.py
#   file_relpath : src/logtally/source.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Request source contracts.

A source reads and parses log files (outside the scope of this package) and
exposes the resulting request stream plus run metadata. Its file format knows
which trackers apply to that kind of log.

`StaticSource` is an in-memory implementation used by tests and by callers that
parse requests themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from logtally.aggregator.definer import Definer

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from logtally.aggregator.definer import TrackerSpec
    from logtally.request import Request


class FileFormat(Protocol):
    """Format-specific knowledge a source brings along."""

    @property
    def report_trackers(self) -> Definer | Iterable[TrackerSpec]:
        """Tracker declarations that apply to this log format, in report order."""
        ...


class Source(Protocol):
    """Supplies requests and run metadata to the summarizer."""

    @property
    def file_format(self) -> FileFormat:
        """The log format of the processed files."""
        ...

    @property
    def processed_files(self) -> Sequence[str]:
        """Paths of the processed files, in processing order."""
        ...

    @property
    def parsed_lines(self) -> int: ...

    @property
    def skipped_lines(self) -> int: ...

    @property
    def parsed_requests(self) -> int: ...

    @property
    def skipped_requests(self) -> int: ...

    def requests(self) -> Iterator[Request]:
        """Yield requests in stream order."""
        ...


@dataclass
class StaticFileFormat:
    """File format whose tracker declarations are given up front.

    Attributes:
        report_trackers (Definer): The tracker declarations.
    """

    report_trackers: Definer = field(default_factory=Definer)


@dataclass
class StaticSource:
    """In-memory source over already parsed requests.

    Attributes:
        request_list (list[Request]): Requests in stream order.
        file_format (StaticFileFormat): Holds the tracker declarations.
        processed_files (list[str]): Paths reported in the summary header.
        parsed_lines (int | None): Number of parsed lines (default: total lines of the requests).
        skipped_lines (int): Number of skipped lines.
        parsed_requests (int | None): Number of parsed requests (default: number of requests).
        skipped_requests (int): Number of skipped requests.
    """

    request_list: list[Request] = field(default_factory=list)
    file_format: StaticFileFormat = field(default_factory=StaticFileFormat)
    processed_files: list[str] = field(default_factory=list)
    parsed_lines: int | None = None
    skipped_lines: int = 0
    parsed_requests: int | None = None
    skipped_requests: int = 0

    def __post_init__(self) -> None:
        if self.parsed_requests is None:
            self.parsed_requests = len(self.request_list)
        if self.parsed_lines is None:
            self.parsed_lines = sum(len(request) for request in self.request_list)

    @classmethod
    def with_trackers(
        cls, definer: Definer, requests: Iterable[Request] = (), **kwargs: object
    ) -> StaticSource:
        """Build a source whose file format declares the trackers of ``definer``."""
        return cls(
            request_list=list(requests),
            file_format=StaticFileFormat(report_trackers=definer),
            **kwargs,  # type: ignore[arg-type]
        )

    def requests(self) -> Iterator[Request]:
        return iter(self.request_list)
