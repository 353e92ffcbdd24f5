"""
The immutable pure path value.

A PurePath holds the parsed pieces of a path together with the Flavor it was
parsed under. It never touches the filesystem, and every operation returns a
new value.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union, overload
from urllib.parse import quote_from_bytes

from ..utils.path_utils import CURRENT, PARENT, PathUtils
from . import casing, components, joining, matching, relativize
from .casing import Culture
from .errors import FlavorMismatchError, NotAbsoluteError
from .flavor import Flavor, get_flavor
from .models import Config, PathComponent, SafeJoinResult
from .parser import ParsedPath, format_path, parse_path

FlavorLike = Union[Flavor, str, None]


def _resolve_flavor(flavor: FlavorLike) -> Flavor:
    if flavor is None:
        return Config().get_flavor()
    if isinstance(flavor, str):
        return get_flavor(flavor)
    return flavor


@dataclass(frozen=True)
class PurePath:
    """
    A lexical path value.

    Equality and hashing are structural over (drive, root, parts, flavor);
    two paths that differ only in case are different values even on Windows.
    Use normcase() before comparing when that matters.
    """

    drive: str
    root: str
    parts: Tuple[str, ...]
    flavor: Flavor

    def __post_init__(self):
        if not isinstance(self.parts, tuple):
            object.__setattr__(self, 'parts', tuple(self.parts))

    @classmethod
    def parse(cls, raw: str, flavor: FlavorLike = None) -> 'PurePath':
        """
        Parse a path string.

        Args:
            raw: Path text. Any string is accepted.
            flavor: Flavor or flavor name; defaults to the configured flavor.

        Returns:
            The parsed PurePath.
        """
        resolved = _resolve_flavor(flavor)
        return cls._from_parsed(parse_path(raw, resolved), resolved)

    @classmethod
    def _from_parsed(cls, parsed: ParsedPath, flavor: Flavor) -> 'PurePath':
        return cls(parsed.drive, parsed.root, parsed.parts, flavor)

    def _parsed(self) -> ParsedPath:
        return ParsedPath(self.drive, self.root, self.parts)

    def _make(self, parsed: ParsedPath) -> 'PurePath':
        return type(self)._from_parsed(parsed, self.flavor)

    def _coerce(self, other: Union[str, 'PurePath']) -> ParsedPath:
        """Parse a string under this flavor or check another path's flavor."""
        if isinstance(other, PurePath):
            if other.flavor != self.flavor:
                raise FlavorMismatchError(self.flavor.name, other.flavor.name)
            return other._parsed()
        if isinstance(other, str):
            return parse_path(other, self.flavor)
        raise TypeError(f"Expected a path string or PurePath, got {type(other).__name__}")

    # Rendering

    def __str__(self) -> str:
        return format_path(self._parsed(), self.flavor)

    def __fspath__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"PurePath({self.as_posix()!r}, flavor={self.flavor.name!r})"

    def as_posix(self) -> str:
        """Return the path rendered with forward slashes."""
        return PathUtils.to_posix(str(self), self.flavor)

    def to_uri(self) -> str:
        """
        Return the path as a file URI.

        Raises:
            NotAbsoluteError: If the path has no root.
        """
        if not self.root:
            raise NotAbsoluteError(f"Relative path can't be expressed as a file URI: {self}")
        drive = self.drive
        if len(drive) == 2 and drive[1] == ':':
            # Local drive: 'file:///c:/a/b'
            rest = self.as_posix()[2:].lstrip('/')
            return f"file:///{drive}/{quote_from_bytes(rest.encode('utf-8'))}"
        if drive:
            # UNC share: 'file://server/share/a/b'
            return 'file:' + quote_from_bytes(self.as_posix().encode('utf-8'))
        return 'file://' + quote_from_bytes(self.as_posix().encode('utf-8'))

    # Ordering

    def _sort_key(self) -> Tuple[str, str, Tuple[str, ...]]:
        flavor = self.flavor
        folded = tuple(casing.fold(flavor, part) for part in self.parts)
        return casing.fold(flavor, self.drive), self.root, folded

    def _comparable(self, other) -> bool:
        return isinstance(other, PurePath) and other.flavor == self.flavor

    def __lt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    # Accessors

    @property
    def anchor(self) -> str:
        """The concatenation of the drive and root, or ''."""
        return self.drive + self.root

    @property
    def filename(self) -> str:
        """The final part (basename plus extension), or ''."""
        return self.parts[-1] if self.parts else ''

    @property
    def basename(self) -> str:
        """The filename minus its last extension."""
        return components.split_filename(self.filename)[0]

    @property
    def extension(self) -> str:
        """The filename's last extension, including its dot, or ''."""
        return components.split_filename(self.filename)[1]

    @property
    def extensions(self) -> List[str]:
        """All of the filename's extensions, innermost first."""
        return components.split_extensions(self.filename)[1]

    @property
    def dirname(self) -> str:
        """The parts between the anchor and the filename."""
        return components.dirname(self.flavor, self._parsed())

    def is_absolute(self) -> bool:
        return bool(self.root)

    def is_filename_only(self) -> bool:
        """True if the path is a bare filename with no anchor or dirname."""
        return not self.anchor and len(self.parts) == 1

    def lacks_filename(self) -> bool:
        """True if the path is only an anchor, or empty."""
        return not self.parts

    def is_reserved(self) -> bool:
        """True if the filename is a reserved device name on this flavor."""
        if not self.parts or self.drive.startswith(self.flavor.separator * 2):
            return False
        return self.flavor.is_reserved_name(self.filename)

    def has_reserved_characters(self) -> bool:
        """True if any part contains a character that is illegal in names."""
        return any(self.flavor.has_reserved_characters(part) for part in self.parts)

    def has_components(self, flags: PathComponent) -> bool:
        """True if every requested component is non-empty."""
        return components.has_components(self.flavor, self._parsed(), flags)

    def get_components(self, flags: PathComponent) -> str:
        """Concatenate the requested components in drive-to-extension order."""
        return components.get_components(self.flavor, self._parsed(), flags)

    # Joining

    def join(self, *fragments: Union[str, 'PurePath']) -> 'PurePath':
        """
        Combine this path with each fragment in turn.

        Raises:
            FlavorMismatchError: If a PurePath fragment has another flavor.
        """
        parsed = [self._coerce(fragment) for fragment in fragments]
        return self._make(joining.join(self.flavor, self._parsed(), parsed))

    def __truediv__(self, other: Union[str, 'PurePath']) -> 'PurePath':
        if not isinstance(other, (str, PurePath)):
            return NotImplemented
        return self.join(other)

    def __rtruediv__(self, other: str) -> 'PurePath':
        if not isinstance(other, str):
            return NotImplemented
        return self.parse(other, self.flavor).join(self)

    def try_safe_join(self, candidate: Union[str, 'PurePath']) -> SafeJoinResult:
        """
        Join an untrusted relative fragment without leaving this directory.

        Args:
            candidate: Relative path, typically from untrusted input.

        Returns:
            SafeJoinResult(True, joined) on success, SafeJoinResult(False, None)
            if the candidate is anchored, reserved, or climbs above this path.
        """
        joined = joining.try_safe_join(self.flavor, self._parsed(), self._coerce(candidate))
        if joined is None:
            return SafeJoinResult(False, None)
        return SafeJoinResult(True, self._make(joined))

    # Matching and comparison

    def match(self, pattern: str) -> bool:
        """Test the path against a glob pattern ('*' and '?' are wildcards)."""
        return matching.match(self.flavor, self._parsed(), pattern)

    def normcase(self, culture: Union[Culture, str, None] = None) -> 'PurePath':
        """
        Lowercase the path on case-insensitive flavors.

        Args:
            culture: Culture or culture name; defaults to the configured one.
        """
        if self.flavor.case_sensitive:
            return self
        if culture is None:
            culture = Config().get_culture()
        elif isinstance(culture, str):
            culture = casing.get_culture(culture)
        return self._make(casing.normcase(self.flavor, self._parsed(), culture))

    def relative(self) -> 'PurePath':
        """Return the path without its drive and root."""
        return self._make(relativize.relative(self._parsed()))

    def relative_to(self, ancestor: Union[str, 'PurePath']) -> 'PurePath':
        """
        Return this path relative to an ancestor.

        Raises:
            NotRelativeError: If ancestor is not a prefix of this path.
            FlavorMismatchError: If ancestor has another flavor.
        """
        return self._make(relativize.relative_to(self.flavor, self._parsed(), self._coerce(ancestor)))

    def is_relative_to(self, ancestor: Union[str, 'PurePath']) -> bool:
        return relativize.is_relative_to(self.flavor, self._parsed(), self._coerce(ancestor))

    # Ancestors

    def parent(self, n: int = 1) -> 'PurePath':
        """
        Return the n-th ancestor.

        Removing more parts than exist stops at the anchor (or '.').

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"Parent level must not be negative: {n}")
        if n == 0:
            return self
        keep = max(len(self.parts) - n, 0)
        return self._make(ParsedPath(self.drive, self.root, self.parts[:keep]))

    def parents(self) -> 'PathParents':
        """Return the ancestors, most specific first."""
        return PathParents(self)

    # Derived values

    def with_dirname(self, dirname: str) -> 'PurePath':
        """
        Replace the parts before the filename.

        Raises:
            ValueError: If this path has no filename or dirname carries a
                drive or root.
        """
        if not self.parts:
            raise ValueError(f"{self!r} has an empty filename")
        new = parse_path(dirname, self.flavor)
        if new.drive or new.root:
            raise ValueError(f"Directory name must be relative: {dirname!r}")
        tail = self.parts[-1:]
        return self._make(ParsedPath(self.drive, self.root, new.parts + tail))

    def with_filename(self, filename: str) -> 'PurePath':
        """
        Replace the final part.

        Raises:
            ValueError: If this path has no filename or the new one is not a
                single plain segment.
        """
        if not self.parts:
            raise ValueError(f"{self!r} has an empty filename")
        new = parse_path(filename, self.flavor)
        if new.drive or new.root or new.parts != (filename,) or filename in (CURRENT, PARENT):
            raise ValueError(f"Invalid filename: {filename!r}")
        return self._make(ParsedPath(self.drive, self.root, self.parts[:-1] + (filename,)))

    def with_extension(self, extension: str) -> 'PurePath':
        """
        Replace the filename's last extension.

        An empty extension removes it; a missing leading dot is added.

        Raises:
            ValueError: If this path has no filename or the extension is invalid.
        """
        if not self.parts:
            raise ValueError(f"{self!r} has an empty filename")
        if extension and not extension.startswith('.'):
            extension = '.' + extension
        separators = {self.flavor.separator, self.flavor.alt_separator} - {''}
        if extension == '.' or any(sep in extension for sep in separators):
            raise ValueError(f"Invalid extension: {extension!r}")
        return self.with_filename(self.basename + extension)


class PathParents(Sequence):
    """
    Lazy, restartable view of a path's ancestors.

    Ancestors are computed on access; iterating twice yields the same values.
    """

    def __init__(self, path: PurePath):
        self._path = path

    def __len__(self) -> int:
        return len(self._path.parts)

    @overload
    def __getitem__(self, index: int) -> PurePath: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[PurePath, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self[i] for i in range(*index.indices(len(self))))
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError(index)
        return self._path.parent(index + 1)

    def __iter__(self) -> Iterator[PurePath]:
        for level in range(1, len(self) + 1):
            yield self._path.parent(level)

    def __repr__(self) -> str:
        return f"<{self._path!r}.parents>"


def parse(raw: str, flavor: FlavorLike = None) -> PurePath:
    """Parse a path string; see PurePath.parse."""
    return PurePath.parse(raw, flavor)


def posix_path(raw: str = '') -> PurePath:
    """Parse a path with POSIX rules."""
    return PurePath.parse(raw, 'posix')


def windows_path(raw: str = '') -> PurePath:
    """Parse a path with Windows rules."""
    return PurePath.parse(raw, 'windows')


def join(base: PurePath, *fragments: Union[str, PurePath]) -> PurePath:
    return base.join(*fragments)


def try_safe_join(base: PurePath, candidate: Union[str, PurePath]) -> SafeJoinResult:
    return base.try_safe_join(candidate)


def match(path: PurePath, pattern: str) -> bool:
    return path.match(pattern)


def normcase(path: PurePath, culture: Optional[Union[Culture, str]] = None) -> PurePath:
    return path.normcase(culture)


def relative_to(path: PurePath, ancestor: Union[str, PurePath]) -> PurePath:
    return path.relative_to(ancestor)
