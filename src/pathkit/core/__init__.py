"""Core components for pathkit: the pure path engine."""

from .errors import (
    PathError,
    MalformedPatternError,
    NotRelativeError,
    NotAbsoluteError,
    FlavorMismatchError,
    UnsupportedOperationError,
)
from .flavor import Flavor, POSIX, WINDOWS, get_flavor, host_flavor
from .casing import Culture, INVARIANT_CULTURE, TURKISH_CULTURE, get_culture
from .models import Config, PathComponent, SafeJoinResult
from .parser import ParsedPath, parse_path
from .purepath import PurePath, PathParents, parse, posix_path, windows_path

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
    "INVARIANT_CULTURE",
    "TURKISH_CULTURE",
    "get_culture",
    "Config",
    "PathComponent",
    "SafeJoinResult",
    "ParsedPath",
    "parse_path",
    "PurePath",
    "PathParents",
    "parse",
    "posix_path",
    "windows_path",
]
