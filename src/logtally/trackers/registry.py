# topmark:header:start
#
#   project      : LogTally
#   file         : registry.py
#   file_relpath : src/logtally/trackers/registry.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Registry of tracker types.

Tracker classes register themselves under a snake-case name with the
`register_tracker` class decorator. Symbolic names used in tracker declarations
(``"duration"``, ``"HourlySpread"``, ``"DurationTracker"``) are resolved here.

Warning:
    The registry is process-global. Plugins and tests that call
    `TrackerRegistry.register` should clean up with `TrackerRegistry.unregister`
    (typically in a try/finally block or fixture).
"""

from __future__ import annotations

import re
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from logtally.config.logging import get_logger
from logtally.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from logtally.config.logging import LogtallyLogger
    from logtally.trackers.contracts import Tracker

logger: LogtallyLogger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_builtins_loaded: bool = False


def normalize_tracker_name(name: str) -> str:
    """Return the registry key for a symbolic tracker name.

    ``"HourlySpreadTracker"``, ``"hourly_spread"`` and ``"Hourly-Spread"`` all
    map to ``"hourly_spread"``.

    Args:
        name (str): Symbolic tracker name.

    Returns:
        str: The snake-case registry key.
    """
    key: str = _CAMEL_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()
    if key.endswith("_tracker"):
        key = key[: -len("_tracker")]
    return key


class TrackerRegistry:
    """Process-global mapping of tracker names to tracker classes."""

    _lock = RLock()
    _classes: dict[str, type[Tracker]] = {}

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered tracker names (sorted)."""
        _ensure_builtins()
        with cls._lock:
            return tuple(sorted(cls._classes))

    @classmethod
    def as_mapping(cls) -> Mapping[str, type[Tracker]]:
        """Return a read-only mapping of tracker names to classes."""
        _ensure_builtins()
        with cls._lock:
            return MappingProxyType(dict(cls._classes))

    @classmethod
    def get(cls, name: str) -> type[Tracker] | None:
        """Return the tracker class registered under ``name``, or None."""
        _ensure_builtins()
        with cls._lock:
            return cls._classes.get(normalize_tracker_name(name))

    @classmethod
    def resolve(cls, name: str) -> type[Tracker]:
        """Return the tracker class for ``name``.

        Args:
            name (str): Symbolic tracker name (any case convention).

        Returns:
            type[Tracker]: The registered tracker class.

        Raises:
            ConfigurationError: If no tracker is registered under ``name``.
        """
        tracker_class: type[Tracker] | None = cls.get(name)
        if tracker_class is None:
            raise ConfigurationError(
                f"Unknown tracker type '{name}'. "
                f"Available tracker types: {', '.join(cls.names())}"
            )
        return tracker_class

    @classmethod
    def register(cls, name: str, tracker_class: type[Tracker]) -> None:
        """Register ``tracker_class`` under ``name``.

        The built-in trackers are loaded first, so registering one of their
        names fails the same way whether or not a lookup happened before.

        Raises:
            ValueError: If the name is already registered.
        """
        _ensure_builtins()
        key: str = normalize_tracker_name(name)
        with cls._lock:
            if key in cls._classes:
                raise ValueError(f"Tracker type '{key}' is already registered.")
            logger.debug("Registering tracker %s as '%s'", tracker_class.__name__, key)
            cls._classes[key] = tracker_class

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Remove the tracker registered under ``name``; return True if it existed."""
        with cls._lock:
            return cls._classes.pop(normalize_tracker_name(name), None) is not None


def register_tracker(name: str) -> Callable[[type[Tracker]], type[Tracker]]:
    """Class decorator registering a tracker class under ``name``.

    Args:
        name (str): Symbolic name under which the tracker is declared.

    Returns:
        Callable[[type[Tracker]], type[Tracker]]: The registering decorator.
    """

    def decorator(cls: type[Tracker]) -> type[Tracker]:
        TrackerRegistry.register(name, cls)
        return cls

    return decorator


def _ensure_builtins() -> None:
    """Import the built-in tracker modules once so their decorators have run."""
    global _builtins_loaded
    if _builtins_loaded:
        return
    # Set before importing: the built-in decorators call register() again.
    _builtins_loaded = True
    from logtally.trackers import register_builtin_trackers

    try:
        register_builtin_trackers()
    except Exception:
        _builtins_loaded = False
        raise
