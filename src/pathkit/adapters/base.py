"""
Base filesystem adapter interface.

This module defines the abstract interface the concrete path layer calls
into. Adapters receive rendered path strings and perform the actual I/O;
they keep no state between calls.
"""

import os
from abc import ABC, abstractmethod
from typing import IO, List, Optional

from ..core.flavor import Flavor


class FileSystemAdapter(ABC):
    """
    Abstract base class for filesystem adapters.

    Every method takes a path string rendered by the pure path engine.
    OS errors are raised unchanged.
    """

    def __init__(self, flavor: Flavor):
        """Initialize adapter for paths of the given flavor."""
        self.flavor = flavor

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether anything exists at the path."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check whether the path is a regular file."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether the path is a directory."""
        pass

    @abstractmethod
    def is_symlink(self, path: str) -> bool:
        """Check whether the path is a symbolic link."""
        pass

    @abstractmethod
    def stat(self, path: str) -> os.stat_result:
        """Return status information, following symlinks."""
        pass

    @abstractmethod
    def lstat(self, path: str) -> os.stat_result:
        """Return status information for the link itself."""
        pass

    @abstractmethod
    def list_entries(self, path: str) -> List[str]:
        """
        List the entry names of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry names (not full paths), sorted.
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create a single directory."""
        pass

    @abstractmethod
    def open_stream(self, path: str, mode: str = 'r', **kwargs) -> IO:
        """
        Open a file.

        Args:
            path: File to open.
            mode: Mode string as accepted by open().
            **kwargs: Passed through to open() (encoding, newline, ...).

        Returns:
            File object.
        """
        pass

    @abstractmethod
    def resolve_symlink(self, path: str) -> str:
        """Return the canonical path with every symlink resolved."""
        pass

    @abstractmethod
    def chmod(self, path: str, mode: int) -> None:
        """Change permission bits."""
        pass

    @abstractmethod
    def get_cwd(self) -> str:
        """Return the current working directory."""
        pass

    @abstractmethod
    def set_cwd(self, path: str) -> None:
        """Change the current working directory."""
        pass

    @abstractmethod
    def home_directory(self, user: Optional[str] = None) -> str:
        """
        Return a home directory.

        Args:
            user: Account name; the current user when omitted.

        Raises:
            RuntimeError: If the home directory cannot be determined.
        """
        pass
