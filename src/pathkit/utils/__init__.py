"""Utility modules for pathkit."""

from .path_utils import PathUtils

__all__ = ["PathUtils"]
