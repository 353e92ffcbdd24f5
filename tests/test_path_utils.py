"""Tests for separator handling utilities."""

import pytest

from pathkit.core.flavor import POSIX, WINDOWS
from pathkit.utils import PathUtils


class TestNormalizeSeparators:
    """Alternate separators are folded into the primary one."""

    def test_windows_forward_slashes(self):
        assert PathUtils.normalize_separators("src/utils\\file.py", WINDOWS) == "src\\utils\\file.py"

    def test_posix_backslashes_unchanged(self):
        """POSIX has no alternate separator, so backslashes are name characters."""
        assert PathUtils.normalize_separators("src\\file.py", POSIX) == "src\\file.py"

    def test_empty_string(self):
        assert PathUtils.normalize_separators("", WINDOWS) == ""


class TestSegments:
    @pytest.mark.parametrize("path,expected", [
        ("a/b/c", ["a", "b", "c"]),
        ("a//b/", ["a", "b"]),
        ("./a/./b", ["a", "b"]),
        ("a/../b", ["a", "..", "b"]),
        ("", []),
        (".", []),
        ("...", ["..."]),
    ])
    def test_split_segments(self, path, expected):
        assert PathUtils.split_segments(path, POSIX) == expected

    def test_split_uses_flavor_separator(self):
        assert PathUtils.split_segments("a/b", WINDOWS) == ["a/b"]
        assert PathUtils.split_segments("a\\b", WINDOWS) == ["a", "b"]

    def test_join_segments(self):
        assert PathUtils.join_segments(["a", "b"], "\\") == "a\\b"
        assert PathUtils.join_segments([], "/") == ""


class TestToPosix:
    def test_windows(self):
        assert PathUtils.to_posix("C:\\a\\b", WINDOWS) == "C:/a/b"

    def test_posix_unchanged(self):
        assert PathUtils.to_posix("a\\b", POSIX) == "a\\b"
