"""
Workspace layout helpers.

A workspace is a directory tree marked by an ``aoc-root`` file::

    <root>/aoc-root
    <root>/.session
    <root>/<year>/<day>/           one solution crate per day
    <root>/<year>/<day>/data/<input>/input
    <root>/<year>/<day>/data/<input>/<part>/answer
    <root>/<year>/<day>/data/<input>/<part>/out/

The command line resolves its positional arguments against the directory it is
run from, so this module also works out where in the tree the current
directory sits.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .config import ROOT_MARKER
from .errors import AocError, InvalidArgumentError, WorkspaceError

FIRST_YEAR = 2015


def _is_number(text: str) -> bool:
    return text.isascii() and text.isdigit()


class Location(Enum):
    UNKNOWN = "unknown"
    ROOT = "root"
    YEAR = "year"
    DAY = "day"


@dataclass(frozen=True)
class CurrentDirectory:
    root: Path
    location: Location
    year: Optional[str] = None
    day: Optional[str] = None

    @classmethod
    def get(cls, cwd: Optional[Path] = None) -> "CurrentDirectory":
        current = Path(cwd) if cwd is not None else Path.cwd()
        if is_file(current / ROOT_MARKER):
            return cls(current, Location.ROOT)
        parent = current.parent
        if parent == current:
            return cls(current, Location.UNKNOWN)
        if is_file(parent / ROOT_MARKER):
            year = year_from_dir(current)
            if year is None:
                raise WorkspaceError("invalid year directory")
            return cls(parent, Location.YEAR, year=year)
        grandparent = parent.parent
        if grandparent == parent:
            return cls(current, Location.UNKNOWN)
        if is_file(grandparent / ROOT_MARKER):
            year = year_from_dir(parent)
            if year is None:
                raise WorkspaceError("invalid year directory")
            day = day_from_dir(current)
            if day is None:
                raise WorkspaceError("invalid day directory")
            return cls(grandparent, Location.DAY, year=year, day=day)
        return cls(current, Location.UNKNOWN)


def year_from_dir(path: Path) -> Optional[str]:
    name = path.name
    if not _is_number(name):
        return None
    num = int(name)
    if FIRST_YEAR <= num < 10000 and str(num) == name:
        return name
    return None


def day_from_dir(path: Path) -> Optional[str]:
    name = path.name
    if not _is_number(name) or len(name) != 2:
        return None
    return name if 1 <= int(name) <= 25 else None


def year_from_arg(arg: str) -> str:
    """Normalize a year argument; two-digit years are taken as 20xx."""
    if not _is_number(arg):
        raise InvalidArgumentError("YEAR", arg) from AocError(f"must be an integer at least {FIRST_YEAR}")
    num = int(arg)
    if num < 1000:
        num += 2000
    if num < FIRST_YEAR:
        raise InvalidArgumentError("YEAR", arg) from AocError(f"must be an integer at least {FIRST_YEAR}")
    return str(num)


def day_from_arg(arg: str) -> str:
    """Normalize a day argument to its two-digit directory name."""
    if not _is_number(arg) or not 1 <= int(arg) <= 25:
        raise InvalidArgumentError("DAY", arg) from AocError("must be an integer between 1 and 25")
    return f"{int(arg):02}"


def is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as exc:
        raise WorkspaceError("failed to read file system") from exc


def is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as exc:
        raise WorkspaceError("failed to read file system") from exc


class FileContents(Enum):
    NONEXISTENT = "nonexistent"
    EMPTY = "empty"
    CONTENTS = "contents"


@dataclass(frozen=True)
class FileInfo:
    """A text file read with trailing whitespace removed."""
    path: Path
    state: FileContents
    contents: Optional[str] = None

    @property
    def has_contents(self) -> bool:
        return self.state is FileContents.CONTENTS

    def get_contents(self) -> Optional[str]:
        return self.contents if self.has_contents else None

    def try_contents(self) -> str:
        if self.state is FileContents.EMPTY:
            raise WorkspaceError(f"file empty at {display_path(self.path)}")
        if self.state is FileContents.NONEXISTENT:
            raise WorkspaceError(f"no file found at {display_path(self.path)}")
        return self.contents


def read_file(path: Path) -> FileInfo:
    if not is_file(path):
        return FileInfo(path, FileContents.NONEXISTENT)
    try:
        contents = path.read_text(encoding="utf-8").rstrip()
    except (OSError, UnicodeDecodeError) as exc:
        raise WorkspaceError("failed to read file system") from exc
    if not contents:
        return FileInfo(path, FileContents.EMPTY)
    return FileInfo(path, FileContents.CONTENTS, contents)


def assert_year_dir(path: Path) -> None:
    if not is_dir(path):
        raise WorkspaceError(f"year directory not found: {display_path(path)}")


def assert_day_dir(path: Path) -> None:
    if not is_dir(path):
        raise WorkspaceError(f"day directory not found: {display_path(path)}")


def display_path(path: Path) -> str:
    """Shorten absolute paths under the current directory for messages."""
    path = Path(path)
    if path.is_absolute():
        try:
            current = Path.cwd()
        except OSError:
            return str(path)
        if path.is_relative_to(current):
            path_len = len(path.parts)
            current_len = len(current.parts)
            if path_len >= max(current_len, 3):
                return str(Path(*path.parts[current_len - 1:]))
    return str(path)

