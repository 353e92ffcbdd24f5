"""
Glob matching against path structure.

Only '*' (any run of characters within one segment) and '?' (exactly one
character) are wildcards; every other character matches itself.
"""

import re
from functools import lru_cache

from .casing import fold
from .errors import MalformedPatternError
from .flavor import Flavor
from .parser import ParsedPath, parse_path


@lru_cache(maxsize=256)
def compile_segment(pattern: str) -> "re.Pattern[str]":
    """Translate one glob segment into a compiled regular expression."""
    pieces = []
    for char in pattern:
        if char == '*':
            pieces.append('.*')
        elif char == '?':
            pieces.append('.')
        else:
            pieces.append(re.escape(char))
    return re.compile(''.join(pieces), re.DOTALL)


def match_segment(segment: str, pattern: str) -> bool:
    return compile_segment(pattern).fullmatch(segment) is not None


def match(flavor: Flavor, path: ParsedPath, pattern: str) -> bool:
    """
    Test a path against a glob pattern.

    An anchored pattern must match the whole path, segment for segment. A
    relative pattern matches the trailing segments of either a relative or
    an absolute path. Comparison is case-insensitive on flavors that are.

    Args:
        flavor: Rules shared by the path and the pattern.
        path: Parsed path to test.
        pattern: Glob pattern.

    Returns:
        True if the path matches.

    Raises:
        MalformedPatternError: If the pattern is empty.
    """
    pat = parse_path(pattern, flavor)
    if not (pat.drive or pat.root or pat.parts):
        raise MalformedPatternError(f"Empty glob pattern: {pattern!r}")

    parts = [fold(flavor, part) for part in path.parts]
    pat_parts = [fold(flavor, part) for part in pat.parts]

    if pat.drive or pat.root:
        if fold(flavor, pat.drive) != fold(flavor, path.drive) or pat.root != path.root:
            return False
        if len(pat_parts) != len(parts):
            return False
    elif len(pat_parts) > len(parts):
        return False

    for part, segment_pattern in zip(reversed(parts), reversed(pat_parts)):
        if not match_segment(part, segment_pattern):
            return False
    return True
