"""Filesystem adapters for TreeWalkLib."""

from .filesystem import LocalFileSystemAdapter, PathTrackingFileSystemAdapter

__all__ = [
    'LocalFileSystemAdapter',
    'PathTrackingFileSystemAdapter',
]
