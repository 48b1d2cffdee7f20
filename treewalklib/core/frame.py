"""DirFrame: per-directory traversal bookkeeping.

A DirFrame is intentionally a plain data container. The walker owns every
frame on an explicit stack, so the parent of a frame is simply the frame
below it; no back-reference is stored.
"""

from collections import deque
from typing import Deque, Optional

CURRENT_DIR = "."
PARENT_DIR = ".."


def is_special_entry(name: str) -> bool:
    """True for the '.' and '..' entries, which are never descended into."""
    return name == CURRENT_DIR or name == PARENT_DIR


class DirFrame:
    """State for one directory on the path from the traversal root.

    Attributes:
        name: The directory's own name as discovered in its parent (the
            start path for the root frame)
        depth: 0 for the root, parent depth + 1 otherwise
        visit_count: Listing entries observed so far, '.' and '..' included
        pending: Child directories awaiting descent, most recent first
        current: Child directory currently being (or last) descended into
        listed: True once the listing pass has run
    """

    __slots__ = ("name", "depth", "visit_count", "pending", "current", "listed")

    def __init__(self, name: str, depth: int = 0):
        self.name = name
        self.depth = depth
        self.visit_count = 0
        self.pending: Deque[str] = deque()
        self.current: Optional[str] = None
        self.listed = False

    def schedule(self, name: str) -> None:
        """Record a discovered child directory ahead of earlier ones."""
        self.pending.appendleft(name)

    def advance(self) -> str:
        """Move the next pending child into current and return it."""
        self.current = self.pending.popleft()
        return self.current

    def has_pending(self) -> bool:
        return bool(self.pending)

    def __repr__(self) -> str:
        return (f"DirFrame(name={self.name!r}, depth={self.depth}, "
                f"visit_count={self.visit_count}, pending={list(self.pending)!r})")
