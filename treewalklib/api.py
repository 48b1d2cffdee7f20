"""High-level API for TreeWalkLib.

This module provides simple, functional interfaces for the common walks.
These functions wrap TreeWalker and the standard visitors for ease of use
in simple cases.
"""

import os
from typing import Any, List, Optional, TextIO, Union

from .config import PrintConfig, WalkConfig
from .core.adapter import FileSystemAdapter
from .core.visitor import Visitor
from .core.walker import TreeWalker, WalkSummary
from .visitors.printer import PrintingVisitor, PrintRecord
from .visitors.pruner import PruningVisitor
from .visitors.recorder import Event, RecordingVisitor

PathType = Union[str, os.PathLike]


def walk_tree(
    start: PathType,
    visitor: Visitor,
    data: Any = None,
    adapter: Optional[FileSystemAdapter] = None,
    follow_symlinks: Optional[bool] = None,
    restore_cwd: bool = False,
) -> WalkSummary:
    """Simple interface for walking a directory tree.

    Args:
        start: Directory to walk
        visitor: Callable receiving every transition
        data: Caller context handed to the visitor
        adapter: Filesystem adapter (defaults to the local filesystem)
        follow_symlinks: Classify entries through symbolic links (None = the
            adapter's own setting)
        restore_cwd: Return to the starting working location afterwards

    Returns:
        WalkSummary for the walk

    Example:
        >>> def visitor(transition, frame, entry, metadata, data):
        ...     if entry is not None:
        ...         print(frame.depth, entry)
        ...     return True
        >>> walk_tree("/tmp/project", visitor)
    """
    config = WalkConfig(follow_symlinks=follow_symlinks, restore_cwd=restore_cwd)
    walker = TreeWalker(adapter=adapter, config=config)
    return walker.walk(os.fspath(start), visitor, data)


def print_tree(
    start: PathType,
    stream: Optional[TextIO] = None,
    adapter: Optional[FileSystemAdapter] = None,
    separator: str = "/",
    keep_records: bool = True,
    **kwargs
) -> List[PrintRecord]:
    """Render every entry below `start`.

    Args:
        start: Directory to walk
        stream: Where to write the lines (None = only return records)
        adapter: Filesystem adapter
        separator: Path separator used when building entry paths
        keep_records: Collect the records (off = stream only, returns [])
        **kwargs: Further walk_tree options

    Returns:
        One PrintRecord per visited entry (empty without keep_records)
    """
    visitor = PrintingVisitor(stream=stream, config=PrintConfig(separator=separator),
                              keep_records=keep_records)
    walk_tree(start, visitor, adapter=adapter, **kwargs)
    return visitor.records


def prune_tree(
    start: PathType,
    adapter: Optional[FileSystemAdapter] = None,
    **kwargs
) -> PruningVisitor:
    """Delete `start` and everything below it, leaf first.

    The start path is made absolute first: the root directory is removed
    after the walker has moved to its parent, where a relative multi-part
    path would no longer resolve. Symbolic links are removed, never
    followed.

    Returns:
        The PruningVisitor, with its removal counters

    Raises:
        ValueError: If follow_symlinks=True is requested
    """
    if kwargs.pop("follow_symlinks", None):
        raise ValueError("prune_tree never follows symbolic links")
    config = WalkConfig(restore_cwd=kwargs.pop("restore_cwd", False))
    if kwargs:
        raise TypeError(f"Unexpected arguments: {', '.join(sorted(kwargs))}")

    walker = TreeWalker(adapter=adapter, config=config)
    root = os.path.normpath(os.path.join(walker.adapter.get_working_location(), os.fspath(start)))
    visitor = PruningVisitor(walker.adapter)
    walker.walk(root, visitor)
    return visitor


def collect_transitions(start: PathType, **kwargs) -> List[Event]:
    """Walk `start` and return the recorded transition sequence."""
    visitor = RecordingVisitor()
    walk_tree(start, visitor, **kwargs)
    return visitor.events
