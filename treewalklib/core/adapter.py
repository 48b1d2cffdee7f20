"""FileSystemAdapter abstraction for TreeWalkLib.

The walker never touches the operating system directly. Every working
location change, directory listing, metadata lookup and removal goes
through a FileSystemAdapter, which keeps the traversal algorithm independent
of how (or whether) the process working directory is used.
"""

from abc import ABC, abstractmethod
from typing import ContextManager, Iterator

from .metadata import EntryMetadata


class FileSystemAdapter(ABC):
    """Abstract collaborator providing the filesystem primitives a walk needs.

    All names passed to these methods are relative to the adapter's current
    working location, except where an absolute path is given.
    Implementations translate OSError into the TreeWalkLib error taxonomy:
    NavigationError, StatError and RemovalError.
    """

    @abstractmethod
    def change_working_location(self, name: str) -> None:
        """Move the working location to `name` ('..' moves up one level).

        Raises:
            NavigationError: If the location does not exist or is not a
                directory
        """
        pass

    @abstractmethod
    def get_working_location(self) -> str:
        """Return the current working location as an absolute path."""
        pass

    @abstractmethod
    def open_directory(self, name: str = ".") -> ContextManager[Iterator[str]]:
        """Open a directory listing.

        The returned context manager yields a lazy, finite, non-restartable
        iterator of entry names. '.' and '..' are yielded first. The
        underlying handle is released when the context exits, whether the
        iterator was exhausted or not.

        Example:
            with adapter.open_directory() as names:
                for name in names:
                    ...

        Raises:
            NavigationError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def get_metadata(self, name: str) -> EntryMetadata:
        """Return metadata for an entry in the working location.

        Raises:
            StatError: If the metadata cannot be obtained
        """
        pass

    @abstractmethod
    def remove_entry(self, name: str) -> None:
        """Remove a non-directory entry.

        Raises:
            RemovalError: If removal fails
        """
        pass

    @abstractmethod
    def remove_directory(self, name: str) -> None:
        """Remove an empty directory.

        Raises:
            RemovalError: If removal fails
        """
        pass

    def begin_walk(self) -> None:
        """Called by the walker before it enters the start directory.

        Adapters that remember anything about earlier descents drop it
        here, so a walk that was aborted or failed leaves nothing behind.
        """
        pass

    def uses_process_cwd(self) -> bool:
        """Check if this adapter mutates the process-wide working directory.

        Adapters that do must not be used by two walkers at the same time.

        Returns:
            True if the process working directory is changed during a walk
        """
        return True
