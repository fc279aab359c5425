# topmark:header:start
#
#   project      : LogTally
#   file         : contracts.py
#   file_relpath : src/logtally/trackers/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Type contracts for trackers (summarizer-facing).

This module defines the minimal protocol that every tracker must implement. The
summarizer depends only on this protocol; `BaseTracker` is a convenience base
class, not a requirement.

Lifecycle
---------
1) ``prepare()`` is called once before the first request.
2) For every request, ``should_update(request)`` gates ``update(request)``.
3) ``finalize()`` is called once after the last request.
4) ``title`` and ``export_state()`` are read for the export and the report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from logtally.request import Request


@runtime_checkable
class Tracker(Protocol):
    """Protocol for a single tracker.

    Implementations typically subclass
    [`logtally.trackers.base.BaseTracker`][].
    """

    @property
    def title(self) -> str:
        """Human-readable label used as the export key and report title."""
        ...

    def prepare(self) -> None:
        """Initialize internal state before the first request."""
        ...

    def should_update(self, request: Request) -> bool:
        """Return True if ``update()`` must be called for ``request``.

        Args:
            request (Request): The request offered to the tracker.

        Returns:
            bool: True to accept the request; False to ignore it.
        """
        ...

    def update(self, request: Request) -> None:
        """Accumulate ``request`` into the tracker state.

        Args:
            request (Request): An accepted request.
        """
        ...

    def finalize(self) -> None:
        """Finish accumulation after the last request."""
        ...

    def export_state(self) -> Any:
        """Return the tracker result as nested primitives.

        Returns:
            Any: Numbers, strings, sequences and mappings only.
        """
        ...
