"""Error taxonomy for TreeWalkLib.

Every failure the walker can surface derives from WalkError. None of them
are retried internally; they propagate to the caller of walk() once the
open listing handle is closed and the frame stack is unwound.
"""

from typing import Optional


class WalkError(Exception):
    """Base class for fatal errors raised during a walk.

    Attributes:
        path: Name or path the failing operation was applied to
        cause: The underlying OSError, if any
    """

    operation = "walk"

    def __init__(self, path: str, cause: Optional[OSError] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        super().__init__(f"{self.operation} failed for {path!r}{detail}")


class NavigationError(WalkError):
    """Changing the working location failed."""
    operation = "chdir"


class StatError(WalkError):
    """Metadata lookup for a listed entry failed."""
    operation = "stat"


class RemovalError(WalkError):
    """Removing a file or directory failed."""
    operation = "remove"
