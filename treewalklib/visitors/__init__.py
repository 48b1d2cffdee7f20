"""Standard visitors shipped with TreeWalkLib."""

from .printer import PrintingVisitor, PrintRecord, truncate_path
from .pruner import PruningVisitor
from .recorder import Event, RecordingVisitor

__all__ = [
    'PrintingVisitor',
    'PrintRecord',
    'truncate_path',
    'PruningVisitor',
    'Event',
    'RecordingVisitor',
]
