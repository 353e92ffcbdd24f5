import pytest

from pathkit.core.errors import MalformedPatternError
from pathkit.core.matching import compile_segment, match_segment
from pathkit.core.purepath import match, posix_path, windows_path


class TestSegmentMatching:
    @pytest.mark.parametrize("segment,pattern,expected", [
        ("file.txt", "*.txt", True),
        ("file.txt", "*", True),
        ("", "*", True),
        ("file.txt", "file.tx?", True),
        ("file.txt", "?", False),
        ("a[1].txt", "a[1].txt", True),
        ("a1.txt", "a[1].txt", False),
        ("a+b", "a+b", True),
        ("ab", "a.", False),
    ])
    def test_match_segment(self, segment, pattern, expected):
        assert match_segment(segment, pattern) is expected

    def test_compiled_patterns_are_cached(self):
        assert compile_segment("*.py") is compile_segment("*.py")


class TestPosixMatch:
    @pytest.mark.parametrize("pattern,expected", [
        ("*.txt", True),
        ("c.txt", True),
        ("b/*.txt", True),
        ("a/b/c.txt", True),
        ("/a/*/c.txt", True),
        ("/a/b/c.txt", True),
        ("/*/c.txt", False),
        ("/a/b", False),
        ("*.py", False),
        ("C.TXT", False),
        ("x/a/b/c.txt", False),
    ])
    def test_absolute_path(self, pattern, expected):
        assert posix_path("/a/b/c.txt").match(pattern) is expected

    def test_anchored_pattern_needs_anchored_path(self):
        assert not posix_path("a/b").match("/a/b")
        assert posix_path("a/b").match("a/*")

    def test_star_stays_in_one_segment(self):
        assert not posix_path("/a/b").match("/*")
        assert posix_path("/a/b").match("*")


class TestWindowsMatch:
    def test_case_insensitive(self):
        path = windows_path("C:\\Dir\\File.TXT")
        assert path.match("*.txt")
        assert path.match("c:\\dir\\*")
        assert path.match("c:/DIR/file.*")

    def test_drive_must_agree(self):
        assert not windows_path("C:\\a\\b").match("D:\\a\\b")
        assert not windows_path("C:a").match("C:\\a")


class TestMalformedPatterns:
    @pytest.mark.parametrize("pattern", ["", ".", "./"])
    def test_empty_pattern(self, pattern):
        with pytest.raises(MalformedPatternError):
            match(posix_path("/a"), pattern)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            posix_path("a").match("")
