"""Computing paths relative to an ancestor."""

from .casing import fold
from .errors import NotRelativeError
from .flavor import Flavor
from .parser import ParsedPath, format_path


def relative(path: ParsedPath) -> ParsedPath:
    """Strip the drive and root, keeping the parts."""
    return ParsedPath('', '', path.parts)


def is_relative_to(flavor: Flavor, path: ParsedPath, ancestor: ParsedPath) -> bool:
    """Check whether ancestor's case-folded pieces are a prefix of path's."""
    if fold(flavor, path.drive) != fold(flavor, ancestor.drive):
        return False
    if path.root != ancestor.root:
        return False
    count = len(ancestor.parts)
    if count > len(path.parts):
        return False
    return all(
        fold(flavor, mine) == fold(flavor, theirs)
        for mine, theirs in zip(path.parts[:count], ancestor.parts)
    )


def relative_to(flavor: Flavor, path: ParsedPath, ancestor: ParsedPath) -> ParsedPath:
    """
    Remove an ancestor prefix from a path.

    Returns:
        An anchor-free path holding the parts below the ancestor, in their
        original case.

    Raises:
        NotRelativeError: If ancestor is not a prefix of path.
    """
    if not is_relative_to(flavor, path, ancestor):
        raise NotRelativeError(format_path(path, flavor), format_path(ancestor, flavor))
    return ParsedPath('', '', path.parts[len(ancestor.parts):])
