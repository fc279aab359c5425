# topmark:header:start
#
#   project      : LogTally
#   file         : request.py
#   file_relpath : src/logtally/request.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Parsed request model handed to trackers.

A request groups the parsed lines that belong to one logical log entry (for
example a "started" line, some query lines and a "completed" line). Each line is
a mapping with a ``line_type`` key plus the fields the parser extracted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from logtally.constants import DEFAULT_TIMESTAMP_FIELD

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


class Request:
    """An ordered collection of parsed lines.

    Attributes:
        lines (tuple[Mapping[str, Any], ...]): Parsed lines in log order.
    """

    __slots__ = ("lines",)

    def __init__(self, lines: Iterable[Mapping[str, Any]] = ()) -> None:
        self.lines: tuple[Mapping[str, Any], ...] = tuple(lines)

    @classmethod
    def from_lines(cls, *lines: Mapping[str, Any]) -> Request:
        """Build a request from parsed line mappings."""
        return cls(lines)

    @property
    def line_types(self) -> tuple[str, ...]:
        """Line types in log order (lines without a type are skipped)."""
        return tuple(
            str(line["line_type"]) for line in self.lines if line.get("line_type") is not None
        )

    def has_line_type(self, line_type: str) -> bool:
        """Return True if any line of this request has ``line_type``."""
        return any(line.get("line_type") == line_type for line in self.lines)

    def first(self, field: str, default: Any = None) -> Any:
        """Return the first value of ``field`` across lines, or ``default``."""
        for line in self.lines:
            if field in line:
                return line[field]
        return default

    def every(self, field: str) -> list[Any]:
        """Return all values of ``field`` across lines, in order."""
        return [line[field] for line in self.lines if field in line]

    @property
    def timestamp(self) -> Any:
        """The first ``timestamp`` value of the request, or None."""
        return self.first(DEFAULT_TIMESTAMP_FIELD)

    def __getitem__(self, field: str) -> Any:
        for line in self.lines:
            if field in line:
                return line[field]
        raise KeyError(field)

    def __contains__(self, field: object) -> bool:
        return any(field in line for line in self.lines)

    def __iter__(self) -> Iterator[Mapping[str, Any]]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return f"Request(line_types={self.line_types!r})"
