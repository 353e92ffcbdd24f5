"""
Path joining.

join() is purely structural: '..' segments are carried through untouched.
try_safe_join() resolves '..' lexically and refuses any candidate that would
end up outside the base path.
"""

import logging
from typing import Iterable, List, Optional

from ..utils.path_utils import PARENT
from .casing import fold
from .flavor import Flavor
from .parser import ParsedPath

logger = logging.getLogger(__name__)


def join(flavor: Flavor, base: ParsedPath, fragments: Iterable[ParsedPath]) -> ParsedPath:
    """
    Join parsed fragments onto a base, left to right.

    A rooted fragment replaces everything accumulated so far, keeping the
    earlier drive unless it brings its own. A fragment with a different
    drive but no root (Windows 'D:dir') starts over on that drive.

    Args:
        flavor: Rules shared by the base and every fragment.
        base: Starting path.
        fragments: Paths to append in order.

    Returns:
        The combined path.
    """
    drive, root, parts = base.drive, base.root, list(base.parts)
    for fragment in fragments:
        if fragment.root:
            if fragment.drive:
                drive = fragment.drive
            root = fragment.root
            parts = list(fragment.parts)
        elif fragment.drive and fold(flavor, fragment.drive) != fold(flavor, drive):
            drive, root, parts = fragment.drive, '', list(fragment.parts)
        else:
            parts.extend(fragment.parts)
    return ParsedPath(drive, root, tuple(parts))


def try_safe_join(flavor: Flavor, base: ParsedPath, candidate: ParsedPath) -> Optional[ParsedPath]:
    """
    Join an untrusted relative candidate onto a trusted base.

    '..' may only cancel segments the candidate itself contributed; it can
    never consume the base's own parts.

    Args:
        flavor: Rules shared by both paths.
        base: Trusted directory.
        candidate: Untrusted fragment, e.g. taken from a request.

    Returns:
        The normalized joined path, or None if the candidate is anchored,
        names a reserved device or character, or escapes the base.
    """
    if candidate.drive or candidate.root:
        logger.debug(f"Safe join rejected anchored candidate {candidate.drive + candidate.root!r}")
        return None

    boundary = len(base.parts)
    stack: List[str] = list(base.parts)
    for segment in candidate.parts:
        if flavor.has_reserved_characters(segment) or flavor.is_reserved_name(segment):
            logger.debug(f"Safe join rejected reserved segment {segment!r}")
            return None
        if segment == PARENT:
            if len(stack) <= boundary:
                logger.debug(f"Safe join rejected traversal above base ({len(candidate.parts)} segments)")
                return None
            stack.pop()
        else:
            stack.append(segment)
    return ParsedPath(base.drive, base.root, tuple(stack))
