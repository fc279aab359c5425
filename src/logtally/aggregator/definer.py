# topmark:header:start
#
#   project      : LogTally
#   file         : definer.py
#   file_relpath : src/logtally/aggregator/definer.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Declarative tracker registration.

A `Definer` accumulates an ordered list of `TrackerSpec` declarations. Each
declaration names a tracker type (a class or a symbolic name resolved through
[`TrackerRegistry`][logtally.trackers.registry.TrackerRegistry]) and the options
passed to its constructor.

Typical usage:

    definer = Definer()
    definer.track("frequency", category="status", title="Status codes")
    definer.duration("duration", category="controller")  # shortcut for track("duration", ...)
    trackers = definer.build()

Unknown tracker names raise `ConfigurationError` when declared, not when the
trackers are first used.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from logtally.config.logging import get_logger
from logtally.constants import VALUE_OPTION
from logtally.core.errors import ConfigurationError
from logtally.trackers.registry import TrackerRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from logtally.config.logging import LogtallyLogger
    from logtally.trackers.contracts import Tracker

logger: LogtallyLogger = get_logger(__name__)


@dataclass(frozen=True)
class TrackerSpec:
    """A tracker declaration: tracker class plus constructor options.

    Attributes:
        tracker_class (type[Tracker]): The resolved tracker class.
        options (Mapping[str, Any]): Read-only constructor options.
    """

    tracker_class: type[Tracker]
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def instantiate(self) -> Tracker:
        """Create a tracker from this declaration."""
        return self.tracker_class(dict(self.options))  # type: ignore[call-arg]


def resolve_tracker_class(tracker_type: str | type[Tracker]) -> type[Tracker]:
    """Return the tracker class for a class or a symbolic name.

    Raises:
        ConfigurationError: If ``tracker_type`` is an unknown name or not a class.
    """
    if isinstance(tracker_type, str):
        return TrackerRegistry.resolve(tracker_type)
    if isinstance(tracker_type, type):
        return tracker_type
    raise ConfigurationError(f"Invalid tracker type: {tracker_type!r}")


class Definer:
    """Ordered builder of tracker declarations."""

    def __init__(self, specs: Iterable[TrackerSpec] = ()) -> None:
        self._specs: list[TrackerSpec] = list(specs)

    @property
    def specs(self) -> tuple[TrackerSpec, ...]:
        """The declared specs in registration order."""
        return tuple(self._specs)

    def track(
        self,
        tracker_type: str | type[Tracker],
        value_field: str | Mapping[str, Any] | None = None,
        /,
        **options: Any,
    ) -> TrackerSpec:
        """Declare a tracker and return its spec.

        Args:
            tracker_type (str | type[Tracker]): Tracker class or symbolic name
                (``"duration"``, ``"HourlySpread"``, ``"DurationTracker"``...).
            value_field (str | Mapping[str, Any] | None): A bare field name,
                stored under the reserved ``value`` option, or a mapping of options.
            **options (Any): Tracker options. They take precedence over
                ``value_field``.

        Returns:
            TrackerSpec: The appended declaration.

        Raises:
            ConfigurationError: If the tracker type cannot be resolved.
        """
        tracker_class: type[Tracker] = resolve_tracker_class(tracker_type)

        merged: dict[str, Any] = {}
        if isinstance(value_field, Mapping):
            merged.update(value_field)
        elif value_field is not None:
            merged[VALUE_OPTION] = value_field
        merged.update(options)

        spec = TrackerSpec(tracker_class, merged)
        self._specs.append(spec)
        logger.debug("Declared tracker %s with options %s", tracker_class.__name__, merged)
        return spec

    register = track

    def __getattr__(self, name: str) -> Callable[..., TrackerSpec]:
        # Registration shortcut: definer.frequency(...) == definer.track("frequency", ...)
        if name.startswith("_"):
            raise AttributeError(name)

        def _shortcut(
            value_field: str | Mapping[str, Any] | None = None, /, **options: Any
        ) -> TrackerSpec:
            return self.track(name, value_field, **options)

        return _shortcut

    def reset(self) -> None:
        """Drop all declarations."""
        self._specs = []

    def load(self, entries: Iterable[Mapping[str, Any]]) -> None:
        """Replace the declarations with the tracker tables in ``entries``.

        Each entry holds a ``type`` key plus the tracker options.

        Raises:
            ConfigurationError: If an entry is not a table, lacks ``type``, or
                names an unknown tracker type.
        """
        self.reset()
        for index, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise ConfigurationError(f"Tracker entry #{index + 1} must be a table")
            options: dict[str, Any] = dict(entry)
            tracker_type = options.pop("type", None)
            if not isinstance(tracker_type, str) or not tracker_type:
                raise ConfigurationError(f"Tracker entry #{index + 1} has no 'type'")
            self.track(tracker_type, **options)

    def build(self) -> list[Tracker]:
        """Instantiate one tracker per declaration, in order."""
        return [spec.instantiate() for spec in self._specs]

    def copy(self) -> Definer:
        """Return an independent definer with the same (immutable) specs."""
        return Definer(self._specs)

    __copy__ = copy

    def __iter__(self) -> Iterator[TrackerSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        names = ", ".join(spec.tracker_class.__name__ for spec in self._specs)
        return f"Definer([{names}])"
