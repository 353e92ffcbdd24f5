"""Filesystem adapters for the concrete path layer."""
from typing import Optional

from ..core.errors import UnsupportedOperationError
from ..core.flavor import Flavor, host_flavor
from .base import FileSystemAdapter
from .local import LocalAdapter


def create_adapter(flavor: Optional[Flavor] = None) -> FileSystemAdapter:
    """
    Create the adapter able to perform I/O for paths of a flavor.

    Args:
        flavor: Flavor of the paths to operate on; defaults to the host's.

    Returns:
        A LocalAdapter bound to the flavor.

    Raises:
        UnsupportedOperationError: If the flavor is not the host's, since a
            foreign path cannot be handed to the local OS.
    """
    host = host_flavor()
    if flavor is None:
        flavor = host
    if flavor != host:
        raise UnsupportedOperationError(
            f"Cannot perform filesystem operations on {flavor.name} paths "
            f"from a {host.name} host"
        )
    return LocalAdapter(flavor)


__all__ = ['FileSystemAdapter', 'LocalAdapter', 'create_adapter']
