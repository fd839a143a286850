from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Iterator

from fslister.utils.entry import DirectoryEntry, FileMetadata


class Connector(ABC):
    """Abstract class for connector."""

    @abstractmethod
    def opendir(self, path: str) -> AbstractContextManager[Iterator[DirectoryEntry]]:
        """Open directory stream.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        AbstractContextManager[Iterator[DirectoryEntry]]
            Context manager yielding directory entries in stream order.
            The stream is closed when the context exits.

        Raises
        ------
        OpenError
            If the directory cannot be opened.
        """
        pass

    @abstractmethod
    def stat(self, path: str) -> FileMetadata:
        """Query file metadata.

        Parameters
        ----------
        path : str
            File or directory path.

        Returns
        -------
        FileMetadata
            Metadata snapshot with resolved owner and group names.

        Raises
        ------
        StatError
            If the metadata query fails.
        """
        pass
