# topmark:header:start
#
#   project      : LogTally
#   file         : export.py
#   file_relpath : src/logtally/export.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""YAML serialization of tracker exports.

The export is a mapping ``{tracker title: tracker export}`` whose values are
opaque, tracker-defined trees of primitives. This module does not interpret
them; it only coerces them into YAML-safe values and (de)serializes the
whole mapping.

Conventions:
- Key order is preserved (``sort_keys=False``), so the export follows tracker
  registration order.
- Only ``yaml.safe_dump`` / ``yaml.safe_load`` are used: no Python-specific tags.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml

from logtally.config.logging import get_logger

if TYPE_CHECKING:
    from logtally.config.logging import LogtallyLogger

logger: LogtallyLogger = get_logger(__name__)

_SCALARS = (str, int, float, bool, type(None))


def normalize_export(obj: object) -> object:
    """Normalize a tracker export into YAML-safe primitives.

    Conversions:
      - `datetime` / `date` / `time` -> ISO 8601 `str`
      - `Path` -> `str`
      - `Enum` -> `Enum.value` (normalized)
      - object with callable `.to_dict()` -> normalize(`.to_dict()`)
      - `Mapping` -> `dict` (scalar keys kept, other keys stringified)
      - `list/tuple/set/frozenset` -> `list[normalized item]`
      - anything else that is not a scalar -> `str(obj)`

    Args:
        obj: The export value to normalize.

    Returns:
        A representation of `obj` made of scalars, lists and dicts.
    """
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()

    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return normalize_export(obj.value)

    if isinstance(obj, _SCALARS):
        return obj

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_export(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {
            (k if isinstance(k, _SCALARS) else str(k)): normalize_export(v)
            for k, v in mapping.items()
        }

    if isinstance(obj, (list, tuple, set, frozenset)):
        return [normalize_export(v) for v in cast("list[object]", obj)]

    return str(obj)


def dump_export(export: Mapping[str, Any]) -> str:
    """Serialize an export mapping to YAML text (block style, order preserved)."""
    return yaml.safe_dump(
        normalize_export(export),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def save_export(path: Path | str, export: Mapping[str, Any]) -> None:
    """Write an export mapping to ``path`` as YAML, overwriting existing content.

    Raises:
        OSError: If the file cannot be opened or written.
    """
    text: str = dump_export(export)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        logger.error("Cannot write export to %s: %s", path, e)
        raise
    logger.info("Wrote export of %d tracker(s) to %s", len(export), path)


def load_export(path: Path | str) -> dict[str, Any]:
    """Load an export file written by `save_export`.

    Returns:
        dict[str, Any]: The export mapping (empty for an empty file).

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is not a mapping.
    """
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Export file {path} does not contain a mapping")
    return cast("dict[str, Any]", data)
