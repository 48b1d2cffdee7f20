"""Recording visitor: keeps the transition sequence of a walk."""

from typing import Any, List, NamedTuple, Optional

from ..core.frame import DirFrame
from ..core.metadata import EntryMetadata
from ..core.visitor import Transition, TreeVisitor


class Event(NamedTuple):
    transition: Transition
    depth: int
    name: str    # Entry name for DIR_ENTRY, frame name otherwise


class RecordingVisitor(TreeVisitor):
    """Collects one Event per transition.

    Args:
        abort_after: Return False once this many events were recorded
            (None = never abort)
    """

    def __init__(self, abort_after: Optional[int] = None):
        self.abort_after = abort_after
        self.events: List[Event] = []

    def _record(self, transition: Transition, depth: int, name: str) -> bool:
        self.events.append(Event(transition, depth, name))
        return self.abort_after is None or len(self.events) < self.abort_after

    def on_dir_start(self, frame: DirFrame, data: Any) -> bool:
        return self._record(Transition.DIR_START, frame.depth, frame.name)

    def on_dir_entry(self, frame: DirFrame, entry: str, metadata: EntryMetadata, data: Any) -> bool:
        return self._record(Transition.DIR_ENTRY, frame.depth, entry)

    def on_dir_exit(self, frame: DirFrame, data: Any) -> bool:
        return self._record(Transition.DIR_EXIT, frame.depth, frame.name)

    def names(self, transition: Transition) -> List[str]:
        """Names of all recorded events of one kind, in order."""
        return [event.name for event in self.events if event.transition is transition]
