# topmark:header:start
#
#   project      : LogTally
#   file         : errors.py
#   file_relpath : src/logtally/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Exceptions raised by the LogTally engine.

Usage:
    Configuration and lifecycle errors abort a run immediately. Each exception
    carries an `ExitCode` so a command-line front-end can translate it into a
    process exit status without inspecting the message.

Notes:
    I/O failures while writing the export are surfaced as the built-in
    `OSError`; tracker exceptions raised during ``update()`` propagate unchanged.
    `exit_code_for` maps any of these to the process exit status.
"""

from __future__ import annotations

from logtally.core.exit_codes import ExitCode


class LogtallyError(Exception):
    """Base class for all LogTally errors."""

    exit_code: ExitCode = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class ConfigurationError(LogtallyError):
    """Error for configuration problems (no trackers, unknown tracker type, bad options)."""

    exit_code = ExitCode.CONFIG_ERROR


class LifecycleError(LogtallyError):
    """Error for summarizer lifecycle violations (programming errors)."""

    exit_code = ExitCode.PIPELINE_ERROR


def exit_code_for(exc: BaseException) -> ExitCode:
    """Return the process exit status for an exception raised by a run.

    `LogtallyError` subclasses carry their own code; `OSError` (typically from
    writing the export) maps to `ExitCode.IO_ERROR`; anything else is a
    generic `ExitCode.FAILURE`.
    """
    if isinstance(exc, LogtallyError):
        return exc.exit_code
    if isinstance(exc, OSError):
        return ExitCode.IO_ERROR
    return ExitCode.FAILURE
