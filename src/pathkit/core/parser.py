"""
Path string parser.

Turns a raw string into its structural pieces according to a Flavor. The
parser never fails: any string is a valid lexical path.
"""

import string
from typing import NamedTuple, Tuple

from ..utils.path_utils import PathUtils
from .flavor import Flavor

DRIVE_LETTERS = frozenset(string.ascii_letters)


class ParsedPath(NamedTuple):
    """The (drive, root, parts) triple every path operation works on."""

    drive: str
    root: str
    parts: Tuple[str, ...]


EMPTY = ParsedPath('', '', ())


def split_anchor(path: str, flavor: Flavor) -> Tuple[str, str, str]:
    """
    Split a separator-normalized path into drive, root and remainder.

    Args:
        path: Path using only the primary separator.
        flavor: Rules deciding whether drives exist.

    Returns:
        Tuple of (drive, root, rest).
    """
    sep = flavor.separator
    drive = ''
    if flavor.has_drive:
        first, second, third = path[0:1], path[1:2], path[2:3]
        if first == sep and second == sep and third and third != sep:
            # \\server\share\rest: the share is part of the drive
            server_end = path.find(sep, 2)
            if server_end != -1 and path[server_end + 1:server_end + 2] not in ('', sep):
                share_end = path.find(sep, server_end + 1)
                if share_end == -1:
                    share_end = len(path)
                # UNC drives are always rooted
                return path[:share_end], sep, path[share_end + 1:]
        elif second == ':' and first in DRIVE_LETTERS:
            drive, path = path[:2], path[2:]

    stripped = path.lstrip(sep)
    root = sep if len(stripped) != len(path) else ''
    return drive, root, stripped


def parse_path(raw: str, flavor: Flavor) -> ParsedPath:
    """
    Parse a raw path string.

    Args:
        raw: Path text; may use the flavor's alternate separator.
        flavor: Rules to parse with.

    Returns:
        ParsedPath with '.' and empty segments removed and '..' kept as-is.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Expected a path string, got {type(raw).__name__}")
    normalized = PathUtils.normalize_separators(raw, flavor)
    drive, root, rest = split_anchor(normalized, flavor)
    return ParsedPath(drive, root, tuple(PathUtils.split_segments(rest, flavor)))


def format_path(path: ParsedPath, flavor: Flavor) -> str:
    """
    Render a parsed path with the flavor's separator ('.' when empty).

    A relative path whose first part would re-parse as a drive (Windows
    'C:') is prefixed with '.' and a separator.
    """
    prefix = ''
    if flavor.has_drive and not (path.drive or path.root) and path.parts:
        if split_anchor(path.parts[0], flavor)[0]:
            prefix = '.' + flavor.separator
    text = path.drive + path.root + prefix + PathUtils.join_segments(path.parts, flavor.separator)
    return text or '.'
