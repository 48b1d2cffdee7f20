"""Core abstractions for TreeWalkLib.

This module contains the walker and the types it exchanges with adapters
and visitors.
"""

from .frame import DirFrame, is_special_entry
from .metadata import EntryMetadata, EntryType, classify_mode
from .adapter import FileSystemAdapter
from .visitor import Transition, TreeVisitor, Visitor
from .walker import TreeWalker, WalkSummary, walk

__all__ = [
    "DirFrame",
    "is_special_entry",
    "EntryMetadata",
    "EntryType",
    "classify_mode",
    "FileSystemAdapter",
    "Transition",
    "TreeVisitor",
    "Visitor",
    "TreeWalker",
    "WalkSummary",
    "walk",
]
