"""TreeWalkLib - Non-recursive directory tree walker.

TreeWalkLib walks a directory subtree with an explicit frame stack instead
of recursion and reports every transition to a visitor:

    DIR_START  directory entered
    DIR_ENTRY  entry listed ('.' and '..' included)
    DIR_EXIT   directory finished

Quick start:
    from treewalklib import print_tree, prune_tree

    print_tree("/srv/data", stream=sys.stdout)
    prune_tree("/tmp/scratch")
"""

__version__ = "0.1.0"

from .errors import WalkError, NavigationError, StatError, RemovalError
from .config import WalkConfig, PrintConfig, LoggingConfig, configure_logging
from .core import (
    DirFrame,
    EntryMetadata,
    EntryType,
    classify_mode,
    FileSystemAdapter,
    Transition,
    TreeVisitor,
    TreeWalker,
    WalkSummary,
    walk,
)
from .adapters import LocalFileSystemAdapter, PathTrackingFileSystemAdapter
from .visitors import PrintingVisitor, PrintRecord, PruningVisitor, RecordingVisitor, truncate_path
from .api import walk_tree, print_tree, prune_tree, collect_transitions

__all__ = [
    "__version__",
    # Errors
    "WalkError",
    "NavigationError",
    "StatError",
    "RemovalError",
    # Config
    "WalkConfig",
    "PrintConfig",
    "LoggingConfig",
    "configure_logging",
    # Core
    "DirFrame",
    "EntryMetadata",
    "EntryType",
    "classify_mode",
    "FileSystemAdapter",
    "Transition",
    "TreeVisitor",
    "TreeWalker",
    "WalkSummary",
    "walk",
    # Adapters
    "LocalFileSystemAdapter",
    "PathTrackingFileSystemAdapter",
    # Visitors
    "PrintingVisitor",
    "PrintRecord",
    "PruningVisitor",
    "RecordingVisitor",
    "truncate_path",
    # API
    "walk_tree",
    "print_tree",
    "prune_tree",
    "collect_transitions",
]
