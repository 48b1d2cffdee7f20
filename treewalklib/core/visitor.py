"""Visitor contract for TreeWalkLib.

A visitor is any callable taking (transition, frame, entry, metadata, data)
and returning a continue/abort flag. TreeVisitor is a convenience base class
that splits the three transition kinds into separate methods.
"""

from enum import Enum
from typing import Any, Callable, Optional

from .frame import DirFrame
from .metadata import EntryMetadata


class Transition(Enum):
    """The points at which the walker calls the visitor."""
    DIR_START = "start"    # A directory frame was pushed
    DIR_ENTRY = "entry"    # An entry of the active directory was listed
    DIR_EXIT = "exit"      # A directory is finished, working location is its parent


Visitor = Callable[[Transition, DirFrame, Optional[str], Optional[EntryMetadata], Any], Optional[bool]]


def should_continue(result: Optional[bool]) -> bool:
    """Interpret a visitor's return value.

    Only an explicit False aborts; None (no return statement) continues.
    """
    return result is not False


class TreeVisitor:
    """Base class dispatching each transition to its own handler.

    Subclasses override the handlers they care about. Every handler
    continues the walk by default. Handlers may change the visitor's own
    state but must not modify the frame they are given.
    """

    def __call__(self,
                 transition: Transition,
                 frame: DirFrame,
                 entry: Optional[str] = None,
                 metadata: Optional[EntryMetadata] = None,
                 data: Any = None) -> bool:
        if transition is Transition.DIR_START:
            return self.on_dir_start(frame, data)
        if transition is Transition.DIR_ENTRY:
            return self.on_dir_entry(frame, entry, metadata, data)
        if transition is Transition.DIR_EXIT:
            return self.on_dir_exit(frame, data)
        raise ValueError(f"Unknown transition: {transition!r}")

    def on_dir_start(self, frame: DirFrame, data: Any) -> bool:
        return True

    def on_dir_entry(self, frame: DirFrame, entry: str, metadata: EntryMetadata, data: Any) -> bool:
        return True

    def on_dir_exit(self, frame: DirFrame, data: Any) -> bool:
        return True
