# topmark:header:start
#
#   project      : LogTally
#   file         : test_export.py
#   file_relpath : tests/test_export.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Tests for YAML serialization of tracker exports."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from pathlib import Path

import pytest
import yaml

from logtally.export import dump_export, load_export, normalize_export, save_export


class Color(Enum):
    RED = "red"


class WithToDict:
    def to_dict(self) -> dict[str, object]:
        return {"when": date(2025, 1, 2)}


def test_normalize_export_conversions() -> None:
    data = {
        "at": datetime(2025, 3, 14, 9, 30),
        "path": Path("a/b.log"),
        "color": Color.RED,
        "obj": WithToDict(),
        1: (1, 2),
        "set": {3},
        "none": None,
        "other": object,
    }

    normalized = normalize_export(data)

    assert isinstance(normalized, dict)
    assert normalized["at"] == "2025-03-14T09:30:00"
    assert normalized["path"] == str(Path("a/b.log"))
    assert normalized["color"] == "red"
    assert normalized["obj"] == {"when": "2025-01-02"}
    assert normalized[1] == [1, 2]
    assert normalized["set"] == [3]
    assert normalized["none"] is None
    assert normalized["other"] == str(object)


def test_dump_export_is_block_style_and_ordered() -> None:
    text = dump_export({"zeta": {"updates": 1}, "alpha": {"hits": [1, 2]}})

    assert text.splitlines() == [
        "zeta:",
        "  updates: 1",
        "alpha:",
        "  hits:",
        "  - 1",
        "  - 2",
    ]


def test_dump_export_uses_safe_tags_only() -> None:
    text = dump_export({"Request timespan": {"first": datetime(2025, 3, 14)}})

    assert "!!python" not in text
    assert yaml.safe_load(text) == {"Request timespan": {"first": "2025-03-14T00:00:00"}}


def test_save_overwrites_and_load_reads_back(tmp_path: Path) -> None:
    target: Path = tmp_path / "out.yml"
    save_export(target, {"A": {"updates": 1}})
    save_export(target, {"B": {200: 3}})

    assert load_export(target) == {"B": {200: 3}}


def test_load_empty_file(tmp_path: Path) -> None:
    target: Path = tmp_path / "empty.yml"
    target.write_text("", encoding="utf-8")

    assert load_export(target) == {}


def test_load_rejects_non_mapping(tmp_path: Path) -> None:
    target: Path = tmp_path / "list.yml"
    target.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="does not contain a mapping"):
        load_export(target)


def test_save_to_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        save_export(tmp_path / "nope" / "out.yml", {})
