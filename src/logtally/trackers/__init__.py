# topmark:header:start
#
#   project      : LogTally
#   file         : __init__.py
#   file_relpath : src/logtally/trackers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Built-in trackers and auto-registration of the tracker modules in this package."""

import importlib
import pkgutil
from pathlib import Path

from logtally.config.logging import get_logger

logger = get_logger(__name__)

# Infrastructure modules that do not define trackers.
_SUPPORT_MODULES: frozenset[str] = frozenset({"base", "contracts", "registry"})


def register_builtin_trackers() -> None:
    """Import all tracker modules in the current package (idempotent)."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if module_info.ispkg or module_info.name in _SUPPORT_MODULES:
            continue
        # Importing the module runs its @register_tracker decorator
        importlib.import_module(f"{__name__}.{module_info.name}")
