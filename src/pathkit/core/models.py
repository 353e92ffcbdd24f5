"""
Core data models for pathkit.

This module contains the configuration object and the small value types
shared by the pure path engine and the concrete filesystem layer.
"""

import os
from dataclasses import dataclass, field
from enum import Flag
from typing import TYPE_CHECKING, NamedTuple, Optional

from dotenv import load_dotenv

from .casing import Culture, get_culture
from .flavor import Flavor, get_flavor, host_flavor

if TYPE_CHECKING:
    from .purepath import PurePath

# Load environment variables from .env file
load_dotenv()


@dataclass
class Config:
    """Configuration settings for pathkit."""

    # Flavor used when parse() is called without one ('' means the host's)
    flavor: str = field(default_factory=lambda: os.getenv('PATHKIT_FLAVOR', ''))

    # Culture used by normcase() when none is given
    culture: str = field(default_factory=lambda: os.getenv('PATHKIT_CULTURE', 'invariant'))

    log_level: str = field(default_factory=lambda: os.getenv('PATHKIT_LOG_LEVEL', 'WARNING'))
    theme: str = field(default_factory=lambda: os.getenv('PATHKIT_THEME', 'manhattan'))

    def get_flavor(self) -> Flavor:
        """Resolve the configured flavor, falling back to the host flavor."""
        if not self.flavor:
            return host_flavor()
        return get_flavor(self.flavor)

    def get_culture(self) -> Culture:
        """Resolve the configured case-folding culture."""
        return get_culture(self.culture)


class PathComponent(Flag):
    """Selectable pieces of a path, in rendering order."""

    NONE = 0
    DRIVE = 1
    ROOT = 2
    DIRNAME = 4
    BASENAME = 8
    EXTENSION = 16

    ANCHOR = DRIVE | ROOT
    FILENAME = BASENAME | EXTENSION
    ALL = DRIVE | ROOT | DIRNAME | BASENAME | EXTENSION


class SafeJoinResult(NamedTuple):
    """
    Outcome of a traversal-checked join.

    A rejected join has success=False and path=None; it is an expected
    result for untrusted input, not an error.
    """

    success: bool
    path: Optional['PurePath'] = None

    def __bool__(self) -> bool:
        return self.success
