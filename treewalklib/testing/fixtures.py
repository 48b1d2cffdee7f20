"""Test fixtures for TreeWalkLib consumers.

These helpers build throwaway directory trees on disk and provide an
in-memory adapter whose listing order is deterministic and whose failures
can be injected, so walks can be checked without depending on the order a
real filesystem happens to return.
"""

import errno
import os
import stat
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union

from ..core.adapter import FileSystemAdapter
from ..core.frame import CURRENT_DIR, PARENT_DIR
from ..core.metadata import EntryMetadata
from ..errors import NavigationError, RemovalError, StatError

# A layout maps names to either a nested layout (directory) or file content
Layout = Dict[str, Union["Layout", str, bytes, None]]

DIR_MODE = stat.S_IFDIR | 0o755
FILE_MODE = stat.S_IFREG | 0o644
DIR_SIZE = 4096


def build_tree(base: Union[str, Path], layout: Layout) -> Path:
    """Create files and directories below `base` from a nested dict.

    Dict values become directories, str/bytes values become file content
    and None becomes an empty file.

    Example:
        build_tree(tmp, {"a": {"x.txt": "hello"}, "b": {}})

    Returns:
        `base` as a Path
    """
    base = Path(base)
    base.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        target = base / name
        if isinstance(value, dict):
            build_tree(target, value)
        elif isinstance(value, bytes):
            target.write_bytes(value)
        else:
            target.write_text(value or "")
    return base


def make_nested_dirs(base: Union[str, Path], depth: int) -> Path:
    """Create the chain base/1/2/.../depth and return the deepest directory."""
    current = Path(base)
    for level in range(1, depth + 1):
        current = current / str(level)
        current.mkdir(parents=True)
    return current


@contextmanager
def preserved_cwd() -> Iterator[str]:
    """Restore the process working directory when the block ends."""
    origin = os.getcwd()
    try:
        yield origin
    finally:
        os.chdir(origin)


class MemoryFileSystemAdapter(FileSystemAdapter):
    """In-memory FileSystemAdapter built from a Layout.

    Directories list their entries in insertion order, after '.' and '..'.
    Every call that touches the tree is appended to `operations` as an
    (operation, absolute path) tuple.

    Attributes:
        tree: The layout being walked (mutated by removals)
        operations: Log of chdir/list/stat/unlink/rmdir calls
        open_handles: Listing handles currently open
        failures: Operation name -> entry names that fail for it
    """

    def __init__(self, tree: Layout, failures: Optional[Dict[str, Set[str]]] = None):
        self.tree = tree
        self.failures = failures or {}
        self.operations: List[Tuple[str, str]] = []
        self.open_handles = 0
        self._location: List[str] = []

    def _parts(self, name: str) -> List[str]:
        parts = [] if name.startswith("/") else list(self._location)
        for part in name.split("/"):
            if part in ("", CURRENT_DIR):
                continue
            if part == PARENT_DIR:
                if parts:
                    parts.pop()
            else:
                parts.append(part)
        return parts

    @staticmethod
    def _join(parts: List[str]) -> str:
        return "/" + "/".join(parts)

    def _lookup(self, parts: List[str]):
        node = self.tree
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), self._join(parts))
            node = node[part]
        return node

    def _check_failure(self, operation: str, name: str, error_cls, parts: List[str]) -> None:
        if name in self.failures.get(operation, ()):
            cause = OSError(errno.EIO, os.strerror(errno.EIO), self._join(parts))
            raise error_cls(name, cause) from cause

    def change_working_location(self, name: str) -> None:
        parts = self._parts(name)
        self.operations.append(("chdir", self._join(parts)))
        self._check_failure("chdir", name, NavigationError, parts)
        try:
            node = self._lookup(parts)
        except FileNotFoundError as e:
            raise NavigationError(name, e) from e
        if not isinstance(node, dict):
            raise NavigationError(name, NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR),
                                                           self._join(parts)))
        self._location = parts

    def get_working_location(self) -> str:
        return self._join(self._location)

    @contextmanager
    def open_directory(self, name: str = CURRENT_DIR) -> Iterator[Iterator[str]]:
        parts = self._parts(name)
        self.operations.append(("list", self._join(parts)))
        try:
            node = self._lookup(parts)
        except FileNotFoundError as e:
            raise NavigationError(name, e) from e
        names = [CURRENT_DIR, PARENT_DIR] + list(node)
        self.open_handles += 1
        try:
            yield iter(names)
        finally:
            self.open_handles -= 1

    def get_metadata(self, name: str) -> EntryMetadata:
        parts = self._parts(name)
        self.operations.append(("stat", self._join(parts)))
        self._check_failure("stat", name, StatError, parts)
        try:
            node = self._lookup(parts)
        except FileNotFoundError as e:
            raise StatError(name, e) from e
        if isinstance(node, dict):
            return EntryMetadata.from_mode(DIR_MODE, DIR_SIZE)
        return EntryMetadata.from_mode(FILE_MODE, len(node or ""))

    def _remove(self, operation: str, name: str, want_dir: bool) -> None:
        parts = self._parts(name)
        self.operations.append((operation, self._join(parts)))
        self._check_failure(operation, name, RemovalError, parts)
        try:
            node = self._lookup(parts)
        except FileNotFoundError as e:
            raise RemovalError(name, e) from e
        if not parts:
            raise RemovalError(name, OSError(errno.EBUSY, os.strerror(errno.EBUSY), "/"))
        if want_dir and not isinstance(node, dict):
            raise RemovalError(name, NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), name))
        if want_dir and node:
            raise RemovalError(name, OSError(errno.ENOTEMPTY, os.strerror(errno.ENOTEMPTY), name))
        if not want_dir and isinstance(node, dict):
            raise RemovalError(name, IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), name))
        del self._lookup(parts[:-1])[parts[-1]]

    def remove_entry(self, name: str) -> None:
        self._remove("unlink", name, want_dir=False)

    def remove_directory(self, name: str) -> None:
        self._remove("rmdir", name, want_dir=True)

    def uses_process_cwd(self) -> bool:
        return False

    def mutations(self) -> List[Tuple[str, str]]:
        """Only the unlink/rmdir operations, in order."""
        return [op for op in self.operations if op[0] in ("unlink", "rmdir")]
