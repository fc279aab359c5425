# topmark:header:start
#
#   project      : LogTally
#   file         : base.py
#   file_relpath : src/logtally/trackers/base.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Base class for trackers.

`BaseTracker` implements the option handling shared by every built-in tracker:

- ``title``: label used in the export and the report.
- ``line_type``: only accept requests that contain a line of this type.
- ``if`` / ``unless``: a callable predicate on the request, or a field name
  whose truthiness gates the request. ``if_`` is accepted as an alias for ``if``
  so the option can be passed as a Python keyword argument.

Subclasses override ``prepare()``, ``update()``, ``finalize()``,
``export_state()`` and, optionally, ``report(output)``. They extend
``should_update()`` through ``accepts()`` rather than overriding the gate.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from logtally.config.logging import get_logger
from logtally.constants import VALUE_OPTION
from logtally.core.errors import ConfigurationError

if TYPE_CHECKING:
    from logtally.config.logging import LogtallyLogger
    from logtally.request import Request

logger: LogtallyLogger = get_logger(__name__)

Extractor = Callable[["Request"], Any]
Predicate = Callable[["Request"], bool]


def make_extractor(spec: str | Extractor, option: str) -> Extractor:
    """Return a callable reading a value from a request.

    Args:
        spec (str | Extractor): A field name or a callable taking the request.
        option (str): Option name, for error messages.

    Returns:
        Extractor: A callable returning the value (None when absent).

    Raises:
        ConfigurationError: If ``spec`` is neither a string nor a callable.
    """
    if callable(spec):
        return spec
    if isinstance(spec, str):
        field: str = spec
        return lambda request: request.first(field)
    raise ConfigurationError(f"Option '{option}' must be a field name or a callable, got {spec!r}")


def _make_predicate(spec: str | Predicate, option: str) -> Predicate:
    extract: Extractor = make_extractor(spec, option)
    return lambda request: bool(extract(request))


class BaseTracker:
    """Reusable foundation for trackers.

    Attributes:
        default_title (ClassVar[str]): Title used when no ``title`` option is given.
        options (dict[str, Any]): The options the tracker was created with.
        updates (int): Number of accepted requests (bookkeeping for reports/tests).
    """

    default_title: ClassVar[str] = "Tracker"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.options: dict[str, Any] = dict(options or {})
        self.updates: int = 0

        self._line_type: str | None = self.options.get("line_type")
        self._if: Predicate | None = None
        self._unless: Predicate | None = None

        if_spec = self.options.get("if", self.options.get("if_"))
        if if_spec is not None:
            self._if = _make_predicate(if_spec, "if")
        unless_spec = self.options.get("unless")
        if unless_spec is not None:
            self._unless = _make_predicate(unless_spec, "unless")
        logger.trace("Created %s with options: %s", type(self).__name__, sorted(self.options))

    @property
    def title(self) -> str:
        """The ``title`` option, or the class default."""
        return str(self.options.get("title") or self.default_title)

    @property
    def value(self) -> Any:
        """The reserved ``value`` option (bare identifier passed positionally)."""
        return self.options.get(VALUE_OPTION)

    def require_option(self, *names: str) -> Any:
        """Return the first option among ``names`` that is set.

        Raises:
            ConfigurationError: If none of the options is set.
        """
        for name in names:
            if self.options.get(name) is not None:
                return self.options[name]
        raise ConfigurationError(
            f"{type(self).__name__} requires the option '{names[0]}'"
        )

    def prepare(self) -> None:
        """Initialize internal state before the first request (default: no-op)."""
        pass

    def should_update(self, request: Request) -> bool:
        """Return whether ``update()`` must be called for ``request``.

        Applies ``line_type``, then ``if``, then ``unless``, then the
        tracker-specific `accepts` hook.
        """
        if self._line_type is not None and not request.has_line_type(self._line_type):
            return False
        if self._if is not None and not self._if(request):
            return False
        if self._unless is not None and self._unless(request):
            return False
        return self.accepts(request)

    def accepts(self, request: Request) -> bool:
        """Tracker-specific gate evaluated after the common options (default: True)."""
        return True

    def update(self, request: Request) -> None:
        """Accumulate ``request``; subclasses call ``super().update()`` for bookkeeping."""
        self.updates += 1

    def finalize(self) -> None:
        """Finish accumulation after the last request (default: no-op)."""
        pass

    def export_state(self) -> Any:
        """Return the tracker result as nested primitives."""
        return {"updates": self.updates}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"
