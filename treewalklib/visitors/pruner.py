"""Pruning visitor: deletes a directory tree leaf first.

Non-directory entries are removed as soon as they are listed. A directory
is removed on its DIR_EXIT, by which time the walker has already exited
(and so emptied) every child directory and moved the working location up
to the directory's parent. The visitor never schedules anything itself.
"""

import logging
from typing import Any

from ..core.adapter import FileSystemAdapter
from ..core.frame import DirFrame
from ..core.metadata import EntryMetadata
from ..core.visitor import TreeVisitor

logger = logging.getLogger(__name__)


class PruningVisitor(TreeVisitor):
    """Remove every entry the walk reports.

    The adapter must be the one the walker uses, so that names resolve
    against the same working location. Removal errors propagate and end
    the walk. An adapter that follows symbolic links is refused: it would
    descend into link targets outside the tree and empty them.
    """

    def __init__(self, adapter: FileSystemAdapter):
        if getattr(adapter, "follow_symlinks", False):
            raise ValueError(f"Cannot prune through {adapter!r}: links would be followed")
        self.adapter = adapter
        self.files_removed = 0
        self.directories_removed = 0

    def on_dir_entry(self, frame: DirFrame, entry: str, metadata: EntryMetadata, data: Any) -> bool:
        # '.' and '..' are directories, so they never reach remove_entry
        if not metadata.is_dir:
            logger.info("unlink: %s", entry)
            self.adapter.remove_entry(entry)
            self.files_removed += 1
        return True

    def on_dir_exit(self, frame: DirFrame, data: Any) -> bool:
        logger.info("rmdir: %s", frame.name)
        self.adapter.remove_directory(frame.name)
        self.directories_removed += 1
        return True
