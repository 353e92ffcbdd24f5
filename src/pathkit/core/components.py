"""
Filename decomposition and component selection.

A filename splits into a basename and its extensions. Splitting starts after
the first character, so dotfiles such as '.bashrc' have no extension.
"""

from typing import List, Tuple

from ..utils.path_utils import PARENT, PathUtils
from .flavor import Flavor
from .models import PathComponent
from .parser import ParsedPath


def split_extensions(filename: str) -> Tuple[str, List[str]]:
    """
    Split a filename into its stem and all of its suffixes.

    Args:
        filename: Final path segment.

    Returns:
        Tuple of (stem, extensions) with extensions ordered innermost to
        outermost, each including its leading dot.
    """
    if not filename or filename == PARENT or filename.endswith('.'):
        return filename, []
    pieces = filename[1:].split('.')
    stem = filename[0] + pieces[0]
    return stem, ['.' + piece for piece in pieces[1:] if piece]


def split_filename(filename: str) -> Tuple[str, str]:
    """Split a filename into (basename, last extension)."""
    _, extensions = split_extensions(filename)
    if not extensions:
        return filename, ''
    extension = extensions[-1]
    return filename[:-len(extension)], extension


def dirname(flavor: Flavor, path: ParsedPath) -> str:
    return PathUtils.join_segments(path.parts[:-1], flavor.separator)


def component_values(flavor: Flavor, path: ParsedPath) -> List[Tuple[PathComponent, str]]:
    """Return every component with its string value, in rendering order."""
    filename = path.parts[-1] if path.parts else ''
    basename, extension = split_filename(filename)
    return [
        (PathComponent.DRIVE, path.drive),
        (PathComponent.ROOT, path.root),
        (PathComponent.DIRNAME, dirname(flavor, path)),
        (PathComponent.BASENAME, basename),
        (PathComponent.EXTENSION, extension),
    ]


def has_components(flavor: Flavor, path: ParsedPath, components: PathComponent) -> bool:
    """
    Check that every requested component is present.

    Args:
        flavor: Rules the path was parsed with.
        path: Parsed path to inspect.
        components: Flags naming the components that must be non-empty.

    Returns:
        True if no requested component is empty.
    """
    return all(
        value for component, value in component_values(flavor, path)
        if component in components
    )


def get_components(flavor: Flavor, path: ParsedPath, components: PathComponent) -> str:
    """
    Concatenate the requested components.

    Components are emitted in the order drive, root, dirname, basename,
    extension; no separators are inserted between them.
    """
    return ''.join(
        value for component, value in component_values(flavor, path)
        if component in components
    )
