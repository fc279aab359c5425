# topmark:header:start
#
#   project      : LogTally
#   file         : exit_codes.py
#   file_relpath : src/logtally/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Exit codes associated with LogTally errors.

LogTally aligns with the BSD `sysexits` convention so a front-end embedding the
engine can map failures to process exit codes consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for LogTally runs.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        PIPELINE_ERROR: Internal failure such as a lifecycle violation. Mirrors
            BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error writing the export file; `exit_code_for` maps
            `OSError` here. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (no trackers, unknown tracker type,
            malformed configuration). Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
