# topmark:header:start
#
#   project      : LogTally
#   file         : __init__.py
#   file_relpath : src/logtally/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""LogTally package.

LogTally is the aggregation core of a log analysis pipeline. It drives a set of
pluggable trackers over a stream of parsed requests, counts warnings raised
along the way, and produces a YAML export and a human-readable report.
"""

from __future__ import annotations

from logtally.aggregator.definer import Definer, TrackerSpec
from logtally.aggregator.summarizer import Summarizer, SummarizerOptions, SummarizerState
from logtally.aggregator.warnings import WarningRegistry
from logtally.constants import LOGTALLY_VERSION
from logtally.core.errors import ConfigurationError, LifecycleError, LogtallyError
from logtally.engine import run_summary
from logtally.request import Request
from logtally.source import StaticSource

__version__: str = LOGTALLY_VERSION

__all__ = [
    "ConfigurationError",
    "Definer",
    "LifecycleError",
    "LogtallyError",
    "Request",
    "StaticSource",
    "Summarizer",
    "SummarizerOptions",
    "SummarizerState",
    "TrackerSpec",
    "WarningRegistry",
    "__version__",
    "run_summary",
]
