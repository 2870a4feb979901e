# storage/base.py
"""Base storage adapter interface."""

from abc import ABC, abstractmethod
from datetime import datetime

Key = str


class Adapter(ABC):
    """Abstract base class for storage adapters.

    This is the minimal contract the Filesystem facade relies on. Optional
    behavior (checksums, MIME types, file construction, ...) is declared
    through the protocols in ``storage.capabilities``.

    Any method may raise; the facade wraps backend errors in StorageFailure.
    """

    @abstractmethod
    def exists(self, key: Key) -> bool:
        """Check if a file or directory exists."""
        ...

    @abstractmethod
    def read(self, key: Key) -> bytes:
        """Read file contents."""
        ...

    @abstractmethod
    def write(self, key: Key, content: bytes) -> None:
        """Write content to the key, replacing anything stored there."""
        ...

    @abstractmethod
    def delete(self, key: Key) -> None:
        """Delete the key."""
        ...

    @abstractmethod
    def rename(self, source_key: Key, target_key: Key) -> None:
        """Move content from one key to another."""
        ...

    @abstractmethod
    def keys(self) -> list[Key]:
        """List every key known to the backend."""
        ...

    @abstractmethod
    def mtime(self, key: Key) -> datetime:
        """Get the last modification time of the key."""
        ...

    @abstractmethod
    def is_directory(self, key: Key) -> bool:
        """Check if the key is a directory."""
        ...
