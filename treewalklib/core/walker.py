"""Non-recursive tree walker for TreeWalkLib.

The walker performs a depth-first traversal of a directory subtree using an
explicit stack of DirFrame objects instead of the call stack. It reports
three kinds of transition to a visitor:

    DIR_START  a directory frame was pushed (before its listing)
    DIR_ENTRY  an entry of the active directory was listed ('.' and '..' too)
    DIR_EXIT   a directory is finished; the working location is its parent

Sibling directories are descended into in reverse listing order, because
every newly listed directory is scheduled ahead of the earlier ones.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..config import WalkConfig
from .adapter import FileSystemAdapter
from .frame import CURRENT_DIR, PARENT_DIR, DirFrame, is_special_entry
from .metadata import EntryMetadata
from .visitor import Transition, Visitor, should_continue

logger = logging.getLogger(__name__)


@dataclass
class WalkSummary:
    """What a walk did before it returned."""

    entries: int = 0        # DIR_ENTRY emissions
    directories: int = 0    # DIR_START emissions
    max_depth: int = 0      # Deepest frame pushed
    aborted: bool = False   # The visitor returned False


class TreeWalker:
    """Iterative depth-first directory walker.

    A TreeWalker instance runs one walk at a time. With an adapter that
    changes the process working directory, no two walks may run at the
    same time in the same process; this is a precondition the walker does
    not enforce.

    Example:
        walker = TreeWalker()
        summary = walker.walk("/srv/data", PrintingVisitor())
    """

    def __init__(self,
                 adapter: Optional[FileSystemAdapter] = None,
                 config: Optional[WalkConfig] = None):
        """Initialize the walker.

        Args:
            adapter: Filesystem primitives to use (defaults to the local
                filesystem, honoring config.follow_symlinks)
            config: Walk options

        Raises:
            ValueError: If the configuration is invalid, or asks for link
                handling the supplied adapter does not provide
        """
        self.config = config or WalkConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid walk configuration: {'; '.join(errors)}")

        follow = self.config.follow_symlinks
        if adapter is None:
            from ..adapters.filesystem import LocalFileSystemAdapter
            adapter = LocalFileSystemAdapter(follow_symlinks=bool(follow))
        elif follow is not None and getattr(adapter, "follow_symlinks", False) != follow:
            raise ValueError(f"follow_symlinks={follow} conflicts with {adapter!r}")
        self.adapter = adapter
        self._stack: List[DirFrame] = []

    @property
    def active_frame(self) -> Optional[DirFrame]:
        """The frame whose directory is the current working location."""
        return self._stack[-1] if self._stack else None

    def walk(self, start: str, visitor: Visitor, data: Any = None) -> WalkSummary:
        """Walk the subtree rooted at `start`.

        Args:
            start: Directory to traverse; the root frame is named after it
            visitor: Callable receiving every transition
            data: Caller context passed through to the visitor unchanged

        Returns:
            WalkSummary describing the walk

        Raises:
            NavigationError: If a working location change fails
            StatError: If metadata for a listed entry cannot be obtained
            RemovalError: Propagated from a pruning visitor
            RuntimeError: If this walker is already running a walk
        """
        if self._stack:
            raise RuntimeError("TreeWalker is already walking; use a separate instance")

        origin = self.adapter.get_working_location() if self.config.restore_cwd else None
        summary = WalkSummary()
        try:
            self._run(start, visitor, data, summary)
        finally:
            # Frames still on the stack belong to an aborted or failed walk
            self._stack.clear()
            if origin is not None:
                self._restore(origin)

        logger.debug("Walk of %r finished: %d entries, %d directories%s",
                     start, summary.entries, summary.directories,
                     " (aborted)" if summary.aborted else "")
        return summary

    def _run(self, start: str, visitor: Visitor, data: Any, summary: WalkSummary) -> None:
        self.adapter.begin_walk()
        self.adapter.change_working_location(start)

        root = DirFrame(start, depth=0)
        self._stack.append(root)
        active = self._emit(summary, visitor, Transition.DIR_START, root, data=data)

        while self._stack and active:
            frame = self._stack[-1]

            if not frame.listed:
                active = self._list(frame, visitor, data, summary)

            if frame.has_pending():
                name = frame.advance()
                if active:
                    child = DirFrame(name, depth=frame.depth + 1)
                    self._stack.append(child)
                    active = self._emit(summary, visitor, Transition.DIR_START, child, data=data)
                    if active:
                        logger.debug("Descending into %r (depth %d)", name, child.depth)
                        self.adapter.change_working_location(name)
            else:
                self.adapter.change_working_location(PARENT_DIR)
                if active:
                    active = self._emit(summary, visitor, Transition.DIR_EXIT, frame, data=data)
                frame.current = None
                self._stack.pop()

        summary.aborted = not active

    def _list(self, frame: DirFrame, visitor: Visitor, data: Any, summary: WalkSummary) -> bool:
        """Run the listing pass for `frame`; return False if the visitor aborted."""
        frame.listed = True
        active = True
        with self.adapter.open_directory(CURRENT_DIR) as names:
            for name in names:
                metadata = self.adapter.get_metadata(name)
                frame.visit_count += 1
                active = self._emit(summary, visitor, Transition.DIR_ENTRY, frame, name, metadata, data)
                if not active:
                    break
                if metadata.is_dir and not is_special_entry(name):
                    frame.schedule(name)
        return active

    def _emit(self,
              summary: WalkSummary,
              visitor: Visitor,
              transition: Transition,
              frame: DirFrame,
              entry: Optional[str] = None,
              metadata: Optional[EntryMetadata] = None,
              data: Any = None) -> bool:
        if transition is Transition.DIR_START:
            summary.directories += 1
            summary.max_depth = max(summary.max_depth, frame.depth)
        elif transition is Transition.DIR_ENTRY:
            summary.entries += 1

        active = should_continue(visitor(transition, frame, entry, metadata, data))
        if not active:
            logger.debug("Visitor aborted at %s of %r (depth %d)",
                         transition.name, entry if entry is not None else frame.name, frame.depth)
        return active

    def _restore(self, origin: str) -> None:
        try:
            self.adapter.change_working_location(origin)
        except Exception:
            logger.error("Could not restore working location %r", origin)
            raise


def walk(start: str,
         visitor: Visitor,
         data: Any = None,
         adapter: Optional[FileSystemAdapter] = None,
         config: Optional[WalkConfig] = None) -> WalkSummary:
    """Walk `start` with a fresh TreeWalker.

    See TreeWalker.walk for the full contract.
    """
    return TreeWalker(adapter=adapter, config=config).walk(start, visitor, data)
