"""Local filesystem adapter implementation."""
import logging
import os
from typing import IO, List, Optional

from .base import FileSystemAdapter

logger = logging.getLogger(__name__)


class LocalAdapter(FileSystemAdapter):
    """Adapter forwarding every call to the host operating system."""

    def exists(self, path: str) -> bool:
        """Check whether anything exists at the path."""
        return os.path.lexists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def list_entries(self, path: str) -> List[str]:
        """List entry names of a directory, sorted."""
        logger.debug(f"Listing directory {path}")
        return sorted(os.listdir(path))

    def create_directory(self, path: str) -> None:
        logger.debug(f"Creating directory {path}")
        os.mkdir(path)

    def open_stream(self, path: str, mode: str = 'r', **kwargs) -> IO:
        logger.debug(f"Opening {path} with mode {mode!r}")
        return open(path, mode, **kwargs)

    def resolve_symlink(self, path: str) -> str:
        """Return the canonical path with every symlink resolved."""
        return os.path.realpath(path)

    def chmod(self, path: str, mode: int) -> None:
        logger.debug(f"Changing mode of {path} to {oct(mode)}")
        os.chmod(path, mode)

    def get_cwd(self) -> str:
        return os.getcwd()

    def set_cwd(self, path: str) -> None:
        logger.debug(f"Changing working directory to {path}")
        os.chdir(path)

    def home_directory(self, user: Optional[str] = None) -> str:
        tilde = '~' + (user or '')
        home = os.path.expanduser(tilde)
        if home == tilde:
            raise RuntimeError(f"Could not determine home directory for {tilde!r}")
        return home
