"""
Directory entry filtering for pathkit.

This module decides which entries of a directory listing are kept, based on
an optional glob pattern, exclusion patterns and hidden-file handling.
"""

from typing import Iterable, List, Optional, Sequence

from ..core.purepath import PurePath


class EntryFilter:
    """Handles entry filtering logic for directory listings."""

    def __init__(
        self,
        pattern: Optional[str] = None,
        exclude_patterns: Sequence[str] = (),
        include_hidden: bool = True,
    ):
        self.pattern = pattern
        self.exclude_patterns = tuple(exclude_patterns)
        self.include_hidden = include_hidden

    def is_hidden(self, path: PurePath) -> bool:
        """
        Check if an entry is hidden (its filename starts with a dot).

        Args:
            path: Entry path.

        Returns:
            True if the entry is hidden, False otherwise.
        """
        return path.filename.startswith('.')

    def is_excluded(self, path: PurePath) -> bool:
        """
        Check if an entry matches any exclusion pattern.

        Args:
            path: Entry path.

        Returns:
            True if the entry should be dropped, False otherwise.
        """
        return any(path.match(pattern) for pattern in self.exclude_patterns)

    def matches_pattern(self, path: PurePath) -> bool:
        """Check the entry against the inclusion pattern, if any."""
        return self.pattern is None or path.match(self.pattern)

    def get_excluded_reason(self, path: PurePath) -> Optional[str]:
        """
        Get the reason why an entry would be excluded.

        Args:
            path: Entry path.

        Returns:
            Reason string if the entry would be excluded, None otherwise.
        """
        if not self.include_hidden and self.is_hidden(path):
            return "Hidden entry"
        if not self.matches_pattern(path):
            return f"Does not match {self.pattern!r}"
        if self.is_excluded(path):
            return "Matches exclude pattern"
        return None

    def filter_paths(self, paths: Iterable[PurePath]) -> List[PurePath]:
        """
        Filter entries based on all criteria.

        Args:
            paths: Entry paths to filter.

        Returns:
            Entries that are kept, in their original order.
        """
        return [path for path in paths if self.get_excluded_reason(path) is None]
