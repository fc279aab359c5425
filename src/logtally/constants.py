# topmark:header:start
#
#   project      : LogTally
#   file         : constants.py
#   file_relpath : src/logtally/constants.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""LogTally Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    LOGTALLY_VERSION: str = get_version("logtally")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    LOGTALLY_VERSION = "0.0.0"

# Warning kind recorded when a parsable line shows up before any header line.
NO_CURRENT_REQUEST: Final[str] = "no_current_request"

LOGGING_HELP_URL: Final[str] = (
    "http://github.com/wvanbergen/request-log-analyzer/wikis/configure-logging"
)

# Reserved tracker option holding a bare identifier passed positionally.
VALUE_OPTION: Final[str] = "value"

DEFAULT_TIMESTAMP_FIELD: Final[str] = "timestamp"
