# topmark:header:start
#
#   project      : LogTally
#   file         : __init__.py
#   file_relpath : src/logtally/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Report output sinks."""

from __future__ import annotations

from logtally.output.console import ConsoleOutput
from logtally.output.contracts import Output
from logtally.output.markdown import MarkdownOutput

__all__ = ["ConsoleOutput", "MarkdownOutput", "Output"]
