# topmark:header:start
#
#   project      : LogTally
#   file         : timestamps.py
#   file_relpath : src/logtally/core/timestamps.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Timestamp coercion helpers.

Log parsers emit timestamps either as `datetime` objects or as compact integers
in ``YYYYMMDDhhmmss`` form (e.g. ``20250314093000``). Trackers accept both.
"""

from __future__ import annotations

from datetime import datetime


def coerce_timestamp(value: object) -> datetime | None:
    """Return ``value`` as a `datetime`, or None when it cannot be interpreted.

    Args:
        value (object): A `datetime`, a compact ``YYYYMMDDhhmmss`` integer, or
            the same digits as a string.

    Returns:
        datetime | None: The parsed timestamp, or None.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        value = str(value)
    if isinstance(value, str) and len(value) == 14 and value.isdigit():
        try:
            return datetime.strptime(value, "%Y%m%d%H%M%S")
        except ValueError:
            return None
    return None
