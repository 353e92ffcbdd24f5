"""
Exception types raised by pathkit.

Structural failures are raised to the immediate caller. A rejected safe join
is not an error: it is reported through SafeJoinResult.
"""


class PathError(Exception):
    """Base class for all pathkit errors."""


class MalformedPatternError(PathError, ValueError):
    """Raised when a glob pattern cannot be matched against anything."""


class NotRelativeError(PathError, ValueError):
    """Raised when a path does not start with the requested ancestor."""

    def __init__(self, path: str, ancestor: str):
        super().__init__(f"{path!r} does not start with {ancestor!r}")
        self.path = path
        self.ancestor = ancestor


class NotAbsoluteError(PathError, ValueError):
    """Raised when an operation needs a rooted path."""


class FlavorMismatchError(PathError, TypeError):
    """Raised when paths of different flavors are combined."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Cannot combine a {actual} path with a {expected} path")
        self.expected = expected
        self.actual = actual


class UnsupportedOperationError(PathError, NotImplementedError):
    """Raised for operations that have no meaning for a path's flavor."""
