"""Entry metadata and type classification.

Classification is derived purely from the mode bits of a stat result, so
the same rules apply whether metadata came from a real filesystem or from
a test adapter.
"""

import os
import stat
from dataclasses import dataclass
from enum import Enum


class EntryType(Enum):
    """Kind of a directory entry.

    The value of each member is the single-letter label used when
    rendering entries.
    """
    BLOCK_DEVICE = "b"
    CHAR_DEVICE = "c"
    DIRECTORY = "d"
    FIFO = "F"
    SYMLINK = "l"
    REGULAR_FILE = "f"
    SOCKET = "s"
    UNKNOWN = "X"


# Checked in order; the first matching predicate wins
_MODE_TESTS = (
    (stat.S_ISBLK, EntryType.BLOCK_DEVICE),
    (stat.S_ISCHR, EntryType.CHAR_DEVICE),
    (stat.S_ISDIR, EntryType.DIRECTORY),
    (stat.S_ISFIFO, EntryType.FIFO),
    (stat.S_ISLNK, EntryType.SYMLINK),
    (stat.S_ISREG, EntryType.REGULAR_FILE),
    (stat.S_ISSOCK, EntryType.SOCKET),
)


def classify_mode(mode: int) -> EntryType:
    """Map st_mode bits to an EntryType.

    Args:
        mode: The st_mode field of a stat result

    Returns:
        Matching EntryType, or EntryType.UNKNOWN
    """
    for predicate, entry_type in _MODE_TESTS:
        if predicate(mode):
            return entry_type
    return EntryType.UNKNOWN


@dataclass(frozen=True)
class EntryMetadata:
    """The subset of stat information the walker and visitors rely on."""

    mode: int
    size: int
    entry_type: EntryType

    @classmethod
    def from_stat(cls, st: os.stat_result) -> 'EntryMetadata':
        """Build metadata from a stat result."""
        return cls(mode=st.st_mode, size=st.st_size, entry_type=classify_mode(st.st_mode))

    @classmethod
    def from_mode(cls, mode: int, size: int = 0) -> 'EntryMetadata':
        """Build metadata from raw mode bits (useful for synthetic trees)."""
        return cls(mode=mode, size=size, entry_type=classify_mode(mode))

    @property
    def permissions(self) -> int:
        """Permission bits (mode & 0o777)."""
        return self.mode & 0o777

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY

    @property
    def label(self) -> str:
        return self.entry_type.value
