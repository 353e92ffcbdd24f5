"""
pathkit: immutable, cross-platform path values.

Paths are parsed under a Flavor (POSIX or Windows) into PurePath values that
can be joined, safely joined, matched, relativized and rewritten without any
filesystem access. Path binds a PurePath to the local filesystem.
"""

from .core import (
    PathError,
    MalformedPatternError,
    NotRelativeError,
    NotAbsoluteError,
    FlavorMismatchError,
    UnsupportedOperationError,
    Flavor,
    POSIX,
    WINDOWS,
    get_flavor,
    host_flavor,
    Culture,
    get_culture,
    Config,
    PathComponent,
    SafeJoinResult,
    PurePath,
    PathParents,
    parse,
    posix_path,
    windows_path,
)
from .path import Path

__version__ = "0.1.0"

__all__ = [
    "PathError",
    "MalformedPatternError",
    "NotRelativeError",
    "NotAbsoluteError",
    "FlavorMismatchError",
    "UnsupportedOperationError",
    "Flavor",
    "POSIX",
    "WINDOWS",
    "get_flavor",
    "host_flavor",
    "Culture",
    "get_culture",
    "Config",
    "PathComponent",
    "SafeJoinResult",
    "PurePath",
    "PathParents",
    "parse",
    "posix_path",
    "windows_path",
    "Path",
]
