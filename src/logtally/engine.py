# topmark:header:start
#
#   project      : LogTally
#   file         : engine.py
#   file_relpath : src/logtally/engine.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Execution helper for running one complete summary.

Design goals:
  - No presentation: this module never prints. Output goes to the optional
    output sink; diagnostics go to the package logger.
  - Fail fast: configuration and lifecycle errors propagate to the caller, as
    do tracker exceptions. I/O errors on export propagate after the
    aggregation results are complete, so the returned summarizer is still
    usable by callers that catch them.

Typical usage:

    summarizer = run_summary(source, options=SummarizerOptions(yaml=path), output=out)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logtally.aggregator.summarizer import Summarizer
from logtally.config.logging import get_logger

if TYPE_CHECKING:
    from logtally.aggregator.summarizer import SummarizerOptions
    from logtally.config.logging import LogtallyLogger
    from logtally.output.contracts import Output
    from logtally.source import Source

logger: LogtallyLogger = get_logger(__name__)


def run_summary(
    source: Source,
    *,
    options: SummarizerOptions | None = None,
    output: Output | None = None,
) -> Summarizer:
    """Prepare, aggregate every request of ``source``, finalize, and optionally report.

    Args:
        source (Source): Request source declaring the trackers.
        options (SummarizerOptions | None): Run options (e.g. the YAML export path).
        output (Output | None): If given, the report is rendered to it.

    Returns:
        Summarizer: The finalized (or reported) summarizer.
    """
    summarizer = Summarizer(source, options)
    summarizer.prepare()

    count: int = 0
    for request in source.requests():
        summarizer.aggregate(request)
        count += 1
    logger.info("Aggregated %d request(s)", count)

    summarizer.finalize()
    if output is not None:
        summarizer.report(output)
    return summarizer
