import pytest

from pathkit.core.errors import FlavorMismatchError, NotRelativeError
from pathkit.core.purepath import posix_path, relative_to, windows_path


class TestRelative:
    def test_strips_anchor(self):
        assert windows_path("C:\\a\\b").relative() == windows_path("a\\b")
        assert posix_path("/x/y").relative() == posix_path("x/y")
        assert posix_path("x").relative() == posix_path("x")


class TestRelativeTo:
    def test_posix(self):
        assert posix_path("/a/b/c").relative_to("/a") == posix_path("b/c")
        assert relative_to(posix_path("/a/b"), posix_path("/a/b")) == posix_path("")

    def test_windows_keeps_original_case(self):
        result = windows_path("C:\\Users\\Bob\\Documents").relative_to("c:\\users")
        assert str(result) == "Bob\\Documents"

    @pytest.mark.parametrize("path,ancestor", [
        ("/a/b", "/c"),
        ("/a", "a"),
        ("a", "/a"),
        ("/a", "/a/b"),
        ("/A/b", "/a"),
    ])
    def test_not_relative(self, path, ancestor):
        with pytest.raises(NotRelativeError) as exc_info:
            posix_path(path).relative_to(ancestor)
        assert exc_info.value.path == path
        assert exc_info.value.ancestor == ancestor
        assert "does not start with" in str(exc_info.value)

    def test_different_drives(self):
        with pytest.raises(ValueError):
            windows_path("C:\\a").relative_to("D:\\")

    def test_flavor_mismatch(self):
        with pytest.raises(FlavorMismatchError):
            posix_path("/a").relative_to(windows_path("\\a"))


class TestIsRelativeTo:
    def test_prefix(self):
        assert posix_path("/a/b").is_relative_to("/a")
        assert posix_path("/a/b").is_relative_to("/")
        assert not posix_path("/ab").is_relative_to("/a")

    def test_case(self):
        assert not posix_path("/A/b").is_relative_to("/a")
        assert windows_path("C:\\A\\b").is_relative_to("c:/a")
