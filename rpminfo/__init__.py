# __init__.py
"""
rpminfo package.

Keep this file minimal:
- No heavy imports (the rpm bindings are imported lazily by librpm.py)
- No I/O, argument parsing, or output at import time
- Only version and explicit public exports
"""

# --- Version ---------------------------------------------------------------
__version__ = "1.0.0"


def get_version() -> str:
    return __version__


# --- Public API ------------------------------------------------------------
from .extractor import extract, open_package  # noqa: E402
from .librpm import Dependency, OpenError, PackageError, ParseError, RpmLibrary  # noqa: E402
from .operations import OPERATIONS, Operation, find_operation  # noqa: E402

__all__ = [
    "__version__",
    "get_version",
    "Dependency",
    "OPERATIONS",
    "OpenError",
    "Operation",
    "PackageError",
    "ParseError",
    "RpmLibrary",
    "extract",
    "find_operation",
    "open_package",
]
