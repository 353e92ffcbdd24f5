"""
Concrete paths: a PurePath bound to a filesystem adapter.

Pure operations are forwarded to the wrapped PurePath and path-valued results
are re-wrapped. I/O calls hand the rendered path string to the adapter; OS
errors propagate unchanged and nothing is cached between calls.
"""

import errno
import os
from contextlib import contextmanager
from typing import IO, List, Optional, Sequence, Tuple, Union

from .adapters import FileSystemAdapter, create_adapter
from .core.errors import FlavorMismatchError, UnsupportedOperationError
from .core.flavor import Flavor
from .core.models import PathComponent, SafeJoinResult
from .core.purepath import PurePath
from .utils.file_filter import EntryFilter

PathArg = Union[str, PurePath, 'Path']


class Path:
    """A path that can perform filesystem operations through an adapter."""

    def __init__(self, path: PathArg = '', adapter: Optional[FileSystemAdapter] = None):
        """
        Wrap a path for filesystem access.

        Args:
            path: Path string, PurePath or Path. Strings are parsed with the
                adapter's flavor (the host flavor when no adapter is given).
            adapter: Filesystem adapter; defaults to the local one.

        Raises:
            UnsupportedOperationError: If no adapter is given and the path's
                flavor is not the host's.
            FlavorMismatchError: If the path and adapter flavors differ.
        """
        if isinstance(path, Path):
            adapter = adapter or path.adapter
            path = path.pure
        if isinstance(path, str):
            if adapter is None:
                adapter = create_adapter()
            path = PurePath.parse(path, adapter.flavor)
        if adapter is None:
            adapter = create_adapter(path.flavor)
        elif adapter.flavor != path.flavor:
            raise FlavorMismatchError(adapter.flavor.name, path.flavor.name)
        self._pure = path
        self.adapter = adapter

    @classmethod
    def cwd(cls, adapter: Optional[FileSystemAdapter] = None) -> 'Path':
        """Return the current working directory."""
        adapter = adapter or create_adapter()
        return cls(adapter.get_cwd(), adapter)

    @classmethod
    def home(cls, adapter: Optional[FileSystemAdapter] = None) -> 'Path':
        """Return the current user's home directory."""
        adapter = adapter or create_adapter()
        return cls(adapter.home_directory(), adapter)

    def _wrap(self, pure: PurePath) -> 'Path':
        return Path(pure, self.adapter)

    def _unwrap(self, other: PathArg) -> Union[str, PurePath]:
        return other.pure if isinstance(other, Path) else other

    @property
    def pure(self) -> PurePath:
        """The wrapped pure path."""
        return self._pure

    @property
    def flavor(self) -> Flavor:
        return self._pure.flavor

    def __str__(self) -> str:
        return str(self._pure)

    def __fspath__(self) -> str:
        return str(self._pure)

    def __repr__(self) -> str:
        return f"Path({self._pure.as_posix()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pure == other._pure

    def __hash__(self) -> int:
        return hash(self._pure)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pure < other._pure

    # Pure accessors

    @property
    def drive(self) -> str:
        return self._pure.drive

    @property
    def root(self) -> str:
        return self._pure.root

    @property
    def anchor(self) -> str:
        return self._pure.anchor

    @property
    def parts(self):
        return self._pure.parts

    @property
    def dirname(self) -> str:
        return self._pure.dirname

    @property
    def filename(self) -> str:
        return self._pure.filename

    @property
    def basename(self) -> str:
        return self._pure.basename

    @property
    def extension(self) -> str:
        return self._pure.extension

    @property
    def extensions(self) -> List[str]:
        return self._pure.extensions

    def as_posix(self) -> str:
        return self._pure.as_posix()

    def to_uri(self) -> str:
        return self._pure.to_uri()

    def is_absolute(self) -> bool:
        return self._pure.is_absolute()

    def is_filename_only(self) -> bool:
        return self._pure.is_filename_only()

    def lacks_filename(self) -> bool:
        return self._pure.lacks_filename()

    def is_reserved(self) -> bool:
        return self._pure.is_reserved()

    def match(self, pattern: str) -> bool:
        return self._pure.match(pattern)

    def has_components(self, flags: PathComponent) -> bool:
        return self._pure.has_components(flags)

    def get_components(self, flags: PathComponent) -> str:
        return self._pure.get_components(flags)

    def is_relative_to(self, ancestor: PathArg) -> bool:
        return self._pure.is_relative_to(self._unwrap(ancestor))

    # Path-valued pure operations

    def join(self, *fragments: PathArg) -> 'Path':
        return self._wrap(self._pure.join(*(self._unwrap(f) for f in fragments)))

    def __truediv__(self, other: PathArg) -> 'Path':
        if not isinstance(other, (str, PurePath, Path)):
            return NotImplemented
        return self.join(other)

    def try_safe_join(self, candidate: PathArg) -> SafeJoinResult:
        """Traversal-checked join; the joined value is a Path on success."""
        result = self._pure.try_safe_join(self._unwrap(candidate))
        if not result.success:
            return result
        return SafeJoinResult(True, self._wrap(result.path))

    def parent(self, n: int = 1) -> 'Path':
        return self._wrap(self._pure.parent(n))

    def parents(self) -> Tuple['Path', ...]:
        """Return the ancestors, most specific first."""
        return tuple(self._wrap(parent) for parent in self._pure.parents())

    def relative(self) -> 'Path':
        return self._wrap(self._pure.relative())

    def relative_to(self, ancestor: PathArg) -> 'Path':
        return self._wrap(self._pure.relative_to(self._unwrap(ancestor)))

    def normcase(self, culture=None) -> 'Path':
        return self._wrap(self._pure.normcase(culture))

    def with_dirname(self, dirname: str) -> 'Path':
        return self._wrap(self._pure.with_dirname(dirname))

    def with_filename(self, filename: str) -> 'Path':
        return self._wrap(self._pure.with_filename(filename))

    def with_extension(self, extension: str) -> 'Path':
        return self._wrap(self._pure.with_extension(extension))

    # Filesystem operations

    def exists(self) -> bool:
        return self.adapter.exists(str(self))

    def is_file(self) -> bool:
        return self.adapter.is_file(str(self))

    def is_dir(self) -> bool:
        return self.adapter.is_dir(str(self))

    def is_symlink(self) -> bool:
        return self.adapter.is_symlink(str(self))

    def stat(self) -> os.stat_result:
        """Return status information; every call queries the filesystem."""
        return self.adapter.stat(str(self))

    def lstat(self) -> os.stat_result:
        """Like stat(), but does not follow a final symlink."""
        return self.adapter.lstat(str(self))

    def list_dir(
        self,
        pattern: Optional[str] = None,
        exclude: Sequence[str] = (),
        include_hidden: bool = True,
    ) -> List['Path']:
        """
        List the directory's entries.

        Args:
            pattern: Optional glob; only entries matching it are returned.
            exclude: Glob patterns of entries to leave out.
            include_hidden: Keep entries whose name starts with a dot.

        Returns:
            Entry paths, sorted by name.

        Raises:
            NotADirectoryError: If this path is not a directory.
        """
        if not self.is_dir():
            raise NotADirectoryError(errno.ENOTDIR, "Path must be a directory", str(self))
        entries = [self._pure.join(name) for name in self.adapter.list_entries(str(self))]
        entry_filter = EntryFilter(
            pattern=pattern,
            exclude_patterns=exclude,
            include_hidden=include_hidden,
        )
        return [self._wrap(entry) for entry in entry_filter.filter_paths(entries)]

    def mkdir(self, parents: bool = False) -> None:
        """
        Create this directory.

        An existing directory is left alone.

        Args:
            parents: Create missing ancestors first, outermost first.
        """
        if parents:
            for ancestor in reversed(list(self.parents())):
                if ancestor.parts and not ancestor.is_dir():
                    self.adapter.create_directory(str(ancestor))
        if not self.is_dir():
            self.adapter.create_directory(str(self))

    def open(self, mode: str = 'r', **kwargs) -> IO:
        """Open the file; keyword arguments are passed to open()."""
        return self.adapter.open_stream(str(self), mode, **kwargs)

    def read_text(self, encoding: str = 'utf-8') -> str:
        with self.open('r', encoding=encoding) as f:
            return f.read()

    def write_text(self, data: str, encoding: str = 'utf-8') -> int:
        with self.open('w', encoding=encoding) as f:
            return f.write(data)

    def resolve(self) -> 'Path':
        """Return the absolute path with every symlink resolved."""
        return Path(self.adapter.resolve_symlink(str(self)), self.adapter)

    def expanduser(self) -> 'Path':
        """
        Expand a leading '~' or '~user' part.

        Raises:
            RuntimeError: If the home directory cannot be determined.
        """
        if self.anchor or not self.parts or not self.parts[0].startswith('~'):
            return self
        home = self.adapter.home_directory(self.parts[0][1:] or None)
        return Path(home, self.adapter).join(*self.parts[1:])

    def chmod(self, mode: int) -> None:
        """
        Change permission bits.

        Raises:
            UnsupportedOperationError: On flavors without POSIX permissions.
        """
        if self.flavor.has_drive:
            raise UnsupportedOperationError(f"chmod is not supported for {self.flavor.name} paths")
        self.adapter.chmod(str(self), mode)

    def lchmod(self, mode: int) -> None:
        """
        Change permission bits without following a final symlink.

        Paths that are not symlinks behave like chmod().

        Raises:
            UnsupportedOperationError: If this path is a symlink, or on
                flavors without POSIX permissions.
        """
        if self.is_symlink():
            raise UnsupportedOperationError(f"lchmod is not supported for symlink {self}")
        self.chmod(mode)

    @contextmanager
    def set_current_directory(self):
        """Make this the working directory, restoring the previous one on exit."""
        previous = self.adapter.get_cwd()
        self.adapter.set_cwd(str(self))
        try:
            yield self
        finally:
            self.adapter.set_cwd(previous)
