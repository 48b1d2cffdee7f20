"""Printing visitor: renders every visited entry as one line.

Each line carries the running sequence number, the frame depth, the
frame's visit count, the type label, the permission bits, the size and the
full path of the entry built from the directory names on the way down.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, TextIO

from ..config import PrintConfig
from ..core.frame import DirFrame
from ..core.metadata import EntryMetadata
from ..core.visitor import TreeVisitor

LINE_FORMAT = "%8d %3d %6d %c 0%o %10d %s"


def truncate_path(path: str, separator: str = "/", escape: str = "\\") -> str:
    """Drop the last segment of an accumulated path.

    The path is expected to end with a separator. Scanning starts just
    before it and stops at the previous separator that is not preceded by
    the escape marker; the result keeps everything up to and including
    that separator. When an escaped separator is met the scan jumps two
    further characters back. If the scan reaches the start of the path
    only the first character survives.

    >>> truncate_path("top/a/b/")
    'top/a/'
    >>> truncate_path("top/a\\\\/b/")
    'top/'
    """
    index = len(path) - 1
    while index > 0:
        index -= 1
        if path[index] == separator:
            if index < 1:
                break
            if path[index - 1] != escape:
                break
            index -= 2
    return path[:index + 1]


@dataclass(frozen=True)
class PrintRecord:
    """One rendered entry."""

    sequence: int
    depth: int
    visit_count: int
    label: str
    permissions: int
    size: int
    path: str

    def format(self) -> str:
        return LINE_FORMAT % (self.sequence, self.depth, self.visit_count, self.label,
                              self.permissions, self.size, self.path)


class PrintingVisitor(TreeVisitor):
    """Visitor that records (and optionally writes) a line per entry.

    Attributes:
        path: Accumulated directory path of the active frame
        count: Entries seen so far across the whole walk
        records: PrintRecord for every entry, in emission order (empty
            when keep_records is off)
    """

    def __init__(self,
                 stream: Optional[TextIO] = None,
                 config: Optional[PrintConfig] = None,
                 keep_records: bool = True):
        """Initialize the printing visitor.

        Args:
            stream: Where to write formatted lines (None = record only)
            config: Separator and escape characters
            keep_records: Keep every PrintRecord in `records`; turn off when
                streaming a large tree

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or PrintConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid print configuration: {'; '.join(errors)}")
        self.stream = stream
        self.path = ""
        self.count = 0
        self.keep_records = keep_records
        self.records: List[PrintRecord] = []

    def on_dir_start(self, frame: DirFrame, data: Any) -> bool:
        self.path += frame.name + self.config.separator
        return True

    def on_dir_entry(self, frame: DirFrame, entry: str, metadata: EntryMetadata, data: Any) -> bool:
        self.count += 1
        record = PrintRecord(
            sequence=self.count,
            depth=frame.depth,
            visit_count=frame.visit_count,
            label=metadata.label,
            permissions=metadata.permissions,
            size=metadata.size,
            path=self.path + entry,
        )
        if self.keep_records:
            self.records.append(record)
        if self.stream is not None:
            self.stream.write(record.format() + "\n")
        return True

    def on_dir_exit(self, frame: DirFrame, data: Any) -> bool:
        self.path = truncate_path(self.path, self.config.separator, self.config.escape)
        return True

    def lines(self) -> List[str]:
        """Formatted lines for every recorded entry."""
        return [record.format() for record in self.records]
