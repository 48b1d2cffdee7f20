"""Testing utilities for TreeWalkLib consumers."""

from .fixtures import MemoryFileSystemAdapter, build_tree, make_nested_dirs, preserved_cwd

__all__ = ['MemoryFileSystemAdapter', 'build_tree', 'make_nested_dirs', 'preserved_cwd']
