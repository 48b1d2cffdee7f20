"""Filesystem adapters for TreeWalkLib.

LocalFileSystemAdapter drives the walk through the process working
directory, so every name handed to it is a plain entry name and no path
strings are built. PathTrackingFileSystemAdapter keeps its own working
location instead and resolves every name against it, which leaves the
process working directory untouched and lets several walks run side by
side.
"""

import errno
import os
import stat
from contextlib import contextmanager
from typing import Iterator, List, Optional, Union

from ..core.adapter import FileSystemAdapter
from ..core.frame import CURRENT_DIR, PARENT_DIR
from ..core.metadata import EntryMetadata
from ..errors import NavigationError, RemovalError, StatError


class LocalFileSystemAdapter(FileSystemAdapter):
    """Adapter for the local filesystem using the process working directory."""

    def __init__(self, follow_symlinks: bool = False):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Classify entries by their link target (stat)
                instead of the link itself (lstat). A link to a directory
                is then descended into.
        """
        self.follow_symlinks = follow_symlinks
        # One slot per descent: the directory holding a followed link, else None
        self._ascents: List[Optional[str]] = []

    def _path(self, name: str) -> str:
        """Translate an entry name into the path handed to the OS."""
        return name

    def begin_walk(self) -> None:
        self._ascents.clear()

    def change_working_location(self, name: str) -> None:
        if name == PARENT_DIR and self._ascents:
            # chdir('..') from a followed link lands in the target's parent
            target = self._ascents[-1] or name
        else:
            target = name
        holder = None
        if name != PARENT_DIR and self.follow_symlinks and os.path.islink(self._path(name)):
            holder = os.getcwd()
        try:
            os.chdir(self._path(target))
        except OSError as e:
            raise NavigationError(name, e) from e

        if name == PARENT_DIR:
            if self._ascents:
                self._ascents.pop()
        else:
            self._ascents.append(holder)

    def get_working_location(self) -> str:
        return os.getcwd()

    @contextmanager
    def open_directory(self, name: str = CURRENT_DIR) -> Iterator[Iterator[str]]:
        try:
            handle = os.scandir(self._path(name))
        except OSError as e:
            raise NavigationError(name, e) from e

        with handle:
            yield self._iter_names(name, handle)

    @staticmethod
    def _iter_names(name: str, handle) -> Iterator[str]:
        # scandir never reports the special entries, so they lead the listing
        yield CURRENT_DIR
        yield PARENT_DIR
        try:
            for entry in handle:
                yield entry.name
        except OSError as e:
            raise NavigationError(name, e) from e

    def get_metadata(self, name: str) -> EntryMetadata:
        path = self._path(name)
        try:
            st = os.stat(path) if self.follow_symlinks else os.lstat(path)
        except OSError as e:
            raise StatError(name, e) from e
        return EntryMetadata.from_stat(st)

    def remove_entry(self, name: str) -> None:
        try:
            os.unlink(self._path(name))
        except OSError as e:
            raise RemovalError(name, e) from e

    def remove_directory(self, name: str) -> None:
        try:
            os.rmdir(self._path(name))
        except OSError as e:
            raise RemovalError(name, e) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(follow_symlinks={self.follow_symlinks})"


class PathTrackingFileSystemAdapter(LocalFileSystemAdapter):
    """Adapter that threads an explicit location through every call.

    The location starts at `base` (or the process working directory at
    construction time) and moves lexically: '..' drops the last path
    component, so leaving a followed link returns to the directory that
    holds the link.
    """

    def __init__(self,
                 base: Optional[Union[str, os.PathLike]] = None,
                 follow_symlinks: bool = False):
        super().__init__(follow_symlinks=follow_symlinks)
        self._location = os.path.abspath(os.fspath(base) if base is not None else os.getcwd())

    def _path(self, name: str) -> str:
        return os.path.normpath(os.path.join(self._location, name))

    def change_working_location(self, name: str) -> None:
        target = self._path(name)
        try:
            st = os.stat(target)
        except OSError as e:
            raise NavigationError(name, e) from e
        if not stat.S_ISDIR(st.st_mode):
            raise NavigationError(name, NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), target))
        if not os.access(target, os.X_OK):
            raise NavigationError(name, PermissionError(errno.EACCES, os.strerror(errno.EACCES), target))
        self._location = target

    def get_working_location(self) -> str:
        return self._location

    def uses_process_cwd(self) -> bool:
        return False

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(location={self._location!r}, "
                f"follow_symlinks={self.follow_symlinks})")
