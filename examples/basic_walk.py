#!/usr/bin/env python3
"""Basic TreeWalkLib usage.

Builds a small scratch tree, prints it, walks it again with a custom
visitor that stops early, and finally prunes it.
"""

import sys
import tempfile
from pathlib import Path

from treewalklib import (
    PrintingVisitor,
    Transition,
    TreeVisitor,
    TreeWalker,
    prune_tree,
)
from treewalklib.testing import build_tree


class FindFirst(TreeVisitor):
    """Stop the walk at the first entry with the given suffix."""

    def __init__(self, suffix):
        self.suffix = suffix
        self.found = None

    def on_dir_entry(self, frame, entry, metadata, data):
        if entry.endswith(self.suffix):
            self.found = (frame.name, entry)
            return False
        return True


def main():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = build_tree(Path(tmpdir) / "scratch", {
            "docs": {"index.md": "# Index", "api.md": "# API"},
            "src": {"pkg": {"__init__.py": "", "core.py": "x = 1"}},
            "setup.cfg": "[metadata]",
        })

        print("=== Printing visitor ===")
        TreeWalker().walk(str(root), PrintingVisitor(stream=sys.stdout))

        print("\n=== Early abort ===")
        finder = FindFirst(".py")
        summary = TreeWalker().walk(str(root), finder)
        print(f"found={finder.found} aborted={summary.aborted} entries={summary.entries}")

        print("\n=== Function visitor ===")

        def count_dirs(transition, frame, entry, metadata, data):
            if transition is Transition.DIR_START:
                data["dirs"] += 1
            return True

        counts = {"dirs": 0}
        TreeWalker().walk(str(root), count_dirs, counts)
        print(f"directories: {counts['dirs']}")

        print("\n=== Prune ===")
        pruned = prune_tree(root)
        print(f"removed {pruned.files_removed} files, {pruned.directories_removed} directories")
        print(f"exists afterwards: {root.exists()}")


if __name__ == "__main__":
    main()
