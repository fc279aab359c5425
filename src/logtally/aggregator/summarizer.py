# topmark:header:start
#
#   project      : LogTally
#   file         : summarizer.py
#   file_relpath : src/logtally/aggregator/summarizer.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Summarizer: drives trackers through their lifecycle and reports the results.

The summarizer owns the ordered tracker list declared by the source's file
format and a [`WarningRegistry`][logtally.aggregator.warnings.WarningRegistry].
One run is a linear sequence of calls:

    summarizer = Summarizer(source, SummarizerOptions(yaml=Path("summary.yml")))
    summarizer.prepare()
    for request in source.requests():
        summarizer.aggregate(request)
    summarizer.finalize()  # writes summary.yml
    summarizer.report(ConsoleOutput())

Lifecycle
---------
``CREATED → PREPARED → AGGREGATING → FINALIZED → REPORTED``

Transitions only move forward. Calling an operation out of order raises
`LifecycleError`; the only repeatable operations are ``aggregate()`` (once
per request) and ``report()`` (once finalized).

A tracker raising from ``prepare()`` or ``finalize()`` moves the summarizer to
``FAILED``; every later lifecycle call raises `LifecycleError`, so no tracker
is prepared or finalized twice.

Notes:
    - Trackers see every request in registration order; ``update()`` is only
      called when the tracker's own ``should_update()`` accepts the request.
    - Exceptions raised by trackers propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from logtally.aggregator.definer import Definer
from logtally.aggregator.warnings import WarningRegistry
from logtally.config.logging import get_logger
from logtally.constants import LOGGING_HELP_URL
from logtally.core.errors import ConfigurationError, LifecycleError
from logtally.export import dump_export, save_export

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from logtally.aggregator.definer import TrackerSpec
    from logtally.config.logging import LogtallyLogger
    from logtally.output.contracts import Output
    from logtally.request import Request
    from logtally.source import Source
    from logtally.trackers.contracts import Tracker

logger: LogtallyLogger = get_logger(__name__)


class SummarizerState(Enum):
    """Lifecycle states of a `Summarizer`, in order."""

    CREATED = "created"
    PREPARED = "prepared"
    AGGREGATING = "aggregating"
    FINALIZED = "finalized"
    REPORTED = "reported"
    FAILED = "failed"


@dataclass(frozen=True)
class SummarizerOptions:
    """Run options of a `Summarizer`.

    Attributes:
        yaml (Path | None): If set, the export is written to this path on ``finalize()``.
    """

    yaml: Path | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SummarizerOptions:
        """Build options from a plain mapping (e.g. a ``[summarizer]`` TOML table).

        Raises:
            ConfigurationError: If the mapping contains unknown keys or a bad value.
        """
        unknown: list[str] = sorted(set(data) - {"yaml"})
        if unknown:
            raise ConfigurationError(f"Unknown summarizer option(s): {', '.join(unknown)}")
        yaml_path = data.get("yaml")
        if yaml_path is not None and not isinstance(yaml_path, (str, Path)):
            raise ConfigurationError(f"Summarizer option 'yaml' must be a path, got {yaml_path!r}")
        return cls(yaml=Path(yaml_path) if yaml_path else None)


def _instantiate(declarations: Definer | Iterable[TrackerSpec]) -> list[Tracker]:
    if isinstance(declarations, Definer):
        return declarations.build()
    return [spec.instantiate() for spec in declarations]


class Summarizer:
    """Orchestrate trackers over a request stream.

    Args:
        source (Source): Supplies the tracker declarations and the run metadata.
        options (SummarizerOptions | None): Run options.

    Attributes:
        source (Source): The request source (read-only use).
        options (SummarizerOptions): Run options.
        trackers (list[Tracker]): Trackers in registration order.
        warnings_encountered (WarningRegistry): Warning counts by kind.
        state (SummarizerState): Current lifecycle state.
    """

    def __init__(self, source: Source, options: SummarizerOptions | None = None) -> None:
        self.source: Source = source
        self.options: SummarizerOptions = options or SummarizerOptions()
        self.warnings_encountered: WarningRegistry = WarningRegistry()
        self.trackers: list[Tracker] = _instantiate(source.file_format.report_trackers)
        self.state: SummarizerState = SummarizerState.CREATED
        logger.debug(
            "Summarizer created with %d tracker(s): %s",
            len(self.trackers),
            ", ".join(t.title for t in self.trackers),
        )
        self.setup()

    def setup(self) -> None:
        """Hook for subclasses, called at the end of construction."""
        pass

    def _require_state(self, operation: str, *allowed: SummarizerState) -> None:
        if self.state not in allowed:
            raise LifecycleError(
                f"Cannot {operation}() a summarizer in state '{self.state.value}' "
                f"(expected: {', '.join(s.value for s in allowed)})"
            )

    def prepare(self) -> None:
        """Call ``prepare()`` on all trackers.

        Raises:
            ConfigurationError: If no trackers are set up.
            LifecycleError: If the summarizer was already prepared.
        """
        self._require_state("prepare", SummarizerState.CREATED)
        if not self.trackers:
            raise ConfigurationError("No trackers set up in Summarizer!")

        try:
            for tracker in self.trackers:
                tracker.prepare()
        except Exception:
            self.state = SummarizerState.FAILED
            raise
        self.state = SummarizerState.PREPARED
        logger.info("Prepared %d tracker(s)", len(self.trackers))

    def aggregate(self, request: Request) -> None:
        """Offer ``request`` to every tracker; update those that accept it.

        Raises:
            LifecycleError: If called before ``prepare()`` or after ``finalize()``.
        """
        if self.state is SummarizerState.PREPARED:
            self.state = SummarizerState.AGGREGATING
        self._require_state("aggregate", SummarizerState.AGGREGATING)

        for tracker in self.trackers:
            if tracker.should_update(request):
                tracker.update(request)

    def finalize(self) -> None:
        """Call ``finalize()`` on all trackers and write the export if configured.

        Raises:
            LifecycleError: If called before ``prepare()`` or more than once.
            OSError: If the export file cannot be written.
        """
        self._require_state("finalize", SummarizerState.PREPARED, SummarizerState.AGGREGATING)
        try:
            for tracker in self.trackers:
                tracker.finalize()
        except Exception:
            self.state = SummarizerState.FAILED
            raise
        self.state = SummarizerState.FINALIZED
        logger.info("Finalized %d tracker(s)", len(self.trackers))

        if self.options.yaml is not None:
            self.save_results_dump(self.options.yaml)

    def export_state(self) -> dict[str, Any]:
        """Return a mapping of tracker title to tracker export, in registration order."""
        return {tracker.title: tracker.export_state() for tracker in self.trackers}

    def to_yaml(self) -> str:
        """Return the export of all trackers as YAML text."""
        return dump_export(self.export_state())

    def save_results_dump(self, path: Path | str) -> None:
        """Write the YAML export to ``path``, overwriting existing content.

        Raises:
            OSError: If the file cannot be opened or written.
        """
        save_export(path, self.export_state())

    def warning(self, kind: str, message: str | None = None, lineno: int | None = None) -> None:
        """Count a warning of ``kind``.

        The message and line number are only logged; they are not retained.
        """
        count: int = self.warnings_encountered.record(kind)
        logger.debug("Warning %s (#%d) at line %s: %s", kind, count, lineno, message)

    def has_warnings(self) -> bool:
        """Return True if any warning was recorded."""
        return self.warnings_encountered.total > 0

    def has_log_ordering_warnings(self) -> bool:
        """Return True if any ``no_current_request`` warning was recorded."""
        return self.warnings_encountered.has_log_ordering_warnings

    def report(self, output: Output) -> None:
        """Render the header, every tracker and the footer to ``output``.

        Raises:
            LifecycleError: If the summarizer has not been finalized.
        """
        self._require_state("report", SummarizerState.FINALIZED, SummarizerState.REPORTED)

        self.report_header(output)
        if self.source.parsed_requests > 0:
            for tracker in self.trackers:
                output.report_tracker(tracker)
        else:
            output.puts()
            output.puts("There were no requests analyzed.")
        self.report_footer(output)

        self.state = SummarizerState.REPORTED

    def report_header(self, output: Output) -> None:
        """Render the run summary table."""
        output.title("Request summary")

        with output.with_style(cell_separator=False):
            with output.table({"width": 20}, {"font": "bold"}) as rows:
                for path in self.source.processed_files:
                    rows.append(["Processed File:", str(path)])
                rows.append(["Parsed lines:", self.source.parsed_lines])
                rows.append(["Skipped lines:", self.source.skipped_lines])
                rows.append(["Parsed requests:", self.source.parsed_requests])
                rows.append(["Skipped requests:", self.source.skipped_requests])
                if self.has_warnings():
                    rows.append(["Warnings:", self.warnings_encountered.summary()])
        output.write("\n")

    def report_footer(self, output: Output) -> None:
        """Render the log-ordering advisory if such warnings were recorded."""
        if not self.has_log_ordering_warnings():
            return

        output.title("Parse warnings")
        output.puts("Parsable lines were encountered without a header line before it. It")
        output.puts("could be that logging is not setup correctly for your application.")
        output.puts("Visit this website for logging configuration tips:")
        output.puts(output.link(LOGGING_HELP_URL))
        output.puts()
