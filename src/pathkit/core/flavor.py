"""
Platform path rules.

A Flavor is plain data: every parsing and matching function takes one as an
argument, so synthetic flavors can be built for testing.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, FrozenSet


@dataclass(frozen=True)
class Flavor:
    """Separator, case and naming rules for one family of platforms."""

    name: str
    separator: str
    alt_separator: str = ''
    case_sensitive: bool = True
    has_drive: bool = False
    reserved_names: FrozenSet[str] = field(default_factory=frozenset)
    reserved_characters: FrozenSet[str] = field(default_factory=frozenset)

    def __repr__(self) -> str:
        return f"Flavor({self.name!r})"

    def is_reserved_name(self, filename: str) -> bool:
        """
        Check a single filename against the reserved device names.

        Any extension, stream suffix (':name') and trailing spaces are
        ignored, so 'NUL ' and 'CON .txt' are reserved.
        """
        if not self.reserved_names or not filename:
            return False
        stem = filename.partition('.')[0].partition(':')[0].rstrip(' ')
        if not self.case_sensitive:
            stem = stem.upper()
        return stem in self.reserved_names

    def has_reserved_characters(self, segment: str) -> bool:
        """Check whether a segment contains a character illegal in names."""
        return any(char in self.reserved_characters for char in segment)


POSIX = Flavor(
    name='posix',
    separator='/',
    case_sensitive=True,
    has_drive=False,
    reserved_characters=frozenset({'\0'}),
)

WINDOWS = Flavor(
    name='windows',
    separator='\\',
    alt_separator='/',
    case_sensitive=False,
    has_drive=True,
    reserved_names=frozenset(
        {'CON', 'PRN', 'AUX', 'NUL'}
        | {f'COM{i}' for i in range(1, 10)}
        | {f'LPT{i}' for i in range(1, 10)}
    ),
    reserved_characters=frozenset('<>:"|?*\0'),
)

_FLAVORS_BY_NAME: Dict[str, Flavor] = {
    'posix': POSIX,
    'unix': POSIX,
    'windows': WINDOWS,
    'win': WINDOWS,
    'nt': WINDOWS,
}


def host_flavor() -> Flavor:
    """Return the flavor of the running operating system."""
    return WINDOWS if os.name == 'nt' else POSIX


def get_flavor(name: str) -> Flavor:
    """
    Resolve a flavor by name.

    Args:
        name: 'posix' or 'windows' (case-insensitive; 'unix', 'nt' and 'win'
            are accepted as aliases).

    Returns:
        The matching Flavor.

    Raises:
        ValueError: If the name is not a known flavor.
    """
    try:
        return _FLAVORS_BY_NAME[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown path flavor: {name!r}") from None
