# topmark:header:start
#
#   project      : LogTally
#   file         : loaders.py
#   file_relpath : src/logtally/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Load tracker declarations and summarizer options from TOML.

Document layout:

    [summarizer]
    yaml = "summary.yml"

    [[trackers]]
    type = "frequency"
    category = "status"
    title = "Status codes"

    [[trackers]]
    type = "duration"
    value = "duration"
    category = "controller"

Parsing is done with `tomlkit` and unwrapped into plain `dict` structures
before the declarations are built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from logtally.aggregator.definer import Definer
from logtally.aggregator.summarizer import SummarizerOptions
from logtally.config.logging import get_logger
from logtally.core.errors import ConfigurationError

if TYPE_CHECKING:
    from logtally.config.logging import LogtallyLogger

logger: LogtallyLogger = get_logger(__name__)

TomlTable = dict[str, Any]


@dataclass
class TrackerConfig:
    """Tracker declarations plus summarizer options read from one source.

    Attributes:
        definer (Definer): Tracker declarations, in file order.
        options (SummarizerOptions): Summarizer run options.
    """

    definer: Definer = field(default_factory=Definer)
    options: SummarizerOptions = field(default_factory=SummarizerOptions)

    @property
    def report_trackers(self) -> Definer:
        """Alias so a `TrackerConfig` can serve as a source's file format."""
        return self.definer


def parse_toml(text: str, origin: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ConfigurationError: If the text is not valid TOML.
    """
    try:
        document = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigurationError(f"Invalid TOML in {origin}: {e}") from e
    return document.unwrap()


def config_from_dict(data: TomlTable, origin: str = "<string>") -> TrackerConfig:
    """Build a `TrackerConfig` from a parsed TOML table.

    Raises:
        ConfigurationError: If a section has the wrong shape or a tracker
            declaration is invalid.
    """
    summarizer_table = data.get("summarizer", {})
    if not isinstance(summarizer_table, dict):
        raise ConfigurationError(f"[summarizer] in {origin} must be a table")

    trackers = data.get("trackers", [])
    if not isinstance(trackers, list):
        raise ConfigurationError(f"'trackers' in {origin} must be an array of tables")

    config = TrackerConfig()
    try:
        config.options = SummarizerOptions.from_mapping(summarizer_table)
        config.definer.load(trackers)
    except ConfigurationError as e:
        raise ConfigurationError(f"{origin}: {e.message}") from e

    logger.debug("Loaded %d tracker declaration(s) from %s", len(config.definer), origin)
    return config


def load_config_text(text: str) -> TrackerConfig:
    """Load a `TrackerConfig` from TOML text."""
    return config_from_dict(parse_toml(text))


def load_config_file(path: Path | str) -> TrackerConfig:
    """Load a `TrackerConfig` from a TOML file.

    Relative ``yaml`` export paths are kept as written (relative to the
    working directory of the run).

    Raises:
        OSError: If the file cannot be read.
        ConfigurationError: If the content is invalid.
    """
    path = Path(path)
    logger.debug("Reading tracker configuration from %s", path)
    text: str = path.read_text(encoding="utf-8")
    return config_from_dict(parse_toml(text, origin=str(path)), origin=str(path))
