"""Separator handling shared by the parser and renderers."""

from typing import Iterable, List

from ..core.flavor import Flavor

CURRENT = '.'
PARENT = '..'


class PathUtils:
    """Utilities for consistent separator handling across flavors."""

    @staticmethod
    def normalize_separators(path: str, flavor: Flavor) -> str:
        """
        Replace the flavor's alternate separator with its primary one.

        Args:
            path: Raw path with potentially mixed separators
            flavor: Rules supplying the separators

        Returns:
            Path using only the primary separator
        """
        if flavor.alt_separator:
            return path.replace(flavor.alt_separator, flavor.separator)
        return path

    @staticmethod
    def split_segments(path: str, flavor: Flavor) -> List[str]:
        """
        Split an anchor-free path into its meaningful segments.

        Empty segments and '.' are dropped; '..' is kept literally.

        Args:
            path: Normalized path text following the anchor

        Returns:
            List of path segments
        """
        return [
            segment for segment in path.split(flavor.separator)
            if segment and segment != CURRENT
        ]

    @staticmethod
    def join_segments(segments: Iterable[str], separator: str) -> str:
        """
        Join path segments with a separator.

        Args:
            segments: Path segments
            separator: Separator to place between them

        Returns:
            Joined path
        """
        return separator.join(segments)

    @staticmethod
    def to_posix(path: str, flavor: Flavor) -> str:
        """Render a flavor-native path string with forward slashes."""
        if flavor.separator == '/':
            return path
        return path.replace(flavor.separator, '/')
