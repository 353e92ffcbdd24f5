import pytest

from pathkit.core.purepath import posix_path
from pathkit.utils.file_filter import EntryFilter

NAMES = [".hidden.txt", "README.md", "notes.txt", "setup.py"]


@pytest.fixture
def entries():
    base = posix_path("/repo")
    return [base / name for name in NAMES]


def names(paths):
    return [path.filename for path in paths]


class TestEntryFilter:
    def test_no_criteria_keeps_everything(self, entries):
        assert names(EntryFilter().filter_paths(entries)) == NAMES

    def test_pattern(self, entries):
        assert names(EntryFilter(pattern="*.txt").filter_paths(entries)) == [".hidden.txt", "notes.txt"]

    def test_hidden(self, entries):
        entry_filter = EntryFilter(include_hidden=False)
        assert entry_filter.is_hidden(entries[0])
        assert ".hidden.txt" not in names(entry_filter.filter_paths(entries))

    def test_exclude_patterns(self, entries):
        entry_filter = EntryFilter(exclude_patterns=["setup.*", "*.md"])
        assert names(entry_filter.filter_paths(entries)) == [".hidden.txt", "notes.txt"]

    def test_excluded_reason(self, entries):
        hidden, readme, notes, setup = entries
        entry_filter = EntryFilter(pattern="*.*", exclude_patterns=["*.py"], include_hidden=False)
        assert entry_filter.get_excluded_reason(hidden) == "Hidden entry"
        assert entry_filter.get_excluded_reason(setup) == "Matches exclude pattern"
        assert entry_filter.get_excluded_reason(notes) is None
        assert entry_filter.get_excluded_reason(posix_path("/repo/Makefile")) == "Does not match '*.*'"
