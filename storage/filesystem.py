# storage/filesystem.py
"""Filesystem facade over a storage adapter.

The facade enforces existence preconditions itself instead of trusting the
backend, detects optional adapter capabilities on every call and wraps any
backend exception in StorageFailure.

Operations are check-then-act: ``write`` without ``overwrite`` calls
``exists`` and then ``write`` as two separate adapter calls. Another writer
can create the key in between; nothing here prevents that. Callers that
need conditional writes must rely on a backend that offers them natively.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any, TypeVar

from core.config import settings
from storage import checksum as checksums
from storage.base import Adapter, Key
from storage.capabilities import (
    ChecksumCalculator,
    FileFactory,
    MetadataSupporter,
    MimeTypeProvider,
    SizeCalculator,
)
from storage.exceptions import (
    FileAlreadyExists,
    FileNotFound,
    StorageError,
    StorageFailure,
    UnexpectedFile,
    UnsupportedCapability,
)
from storage.file import File
from storage.listing import KeyListing

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Filesystem:
    """Single entry point for file operations against one adapter.

    Args:
        adapter: Backend adapter. Not owned; the facade never opens or
            closes anything on it.
        checksum_algorithm: hashlib name used when the adapter cannot
            compute checksums. Defaults to ``settings.CHECKSUM_ALGORITHM``.
    """

    def __init__(self, adapter: Adapter, checksum_algorithm: str | None = None):
        self._adapter = adapter
        self._checksum_algorithm = checksum_algorithm or settings.CHECKSUM_ALGORITHM

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    def has(self, key: Key) -> bool:
        """Check if the key exists."""
        return self._call("exists", self._adapter.exists, key=key)

    def rename(self, source_key: Key, target_key: Key) -> None:
        """Rename a file.

        Raises:
            FileNotFound: source does not exist.
            UnexpectedFile: target already exists.
        """
        self._assert_has_file(source_key)
        if self.has(target_key):
            raise UnexpectedFile(target_key)

        self._call(
            "rename",
            self._adapter.rename,
            source_key=source_key,
            target_key=target_key,
        )

    def get(self, key: Key, create: bool = False) -> File:
        """Return a File for the key.

        When ``create`` is False the key must already exist. Content is not
        read.
        """
        if not create:
            self._assert_has_file(key)
        return self.create_file(key)

    def create_file(self, key: Key) -> File:
        """Build a File, letting the adapter do it when it is a file factory."""
        if isinstance(self._adapter, FileFactory):
            return self._call(
                "create_file",
                lambda key: self._adapter.create_file(key, self),
                key=key,
            )
        return File(key, self)

    def write(self, key: Key, content: bytes, overwrite: bool = False) -> None:
        """Write content to the key.

        Raises:
            FileAlreadyExists: key exists and ``overwrite`` is False.
        """
        if not overwrite and self.has(key):
            raise FileAlreadyExists(key)

        self._call("write", lambda key: self._adapter.write(key, content), key=key)

    def read(self, key: Key) -> bytes:
        """Read the content of the key."""
        self._assert_has_file(key)
        return self._call("read", self._adapter.read, key=key)

    def delete(self, key: Key) -> None:
        """Delete the key."""
        self._assert_has_file(key)
        self._call("delete", self._adapter.delete, key=key)

    def keys(self) -> list[Key]:
        """Return the adapter's key listing unchanged."""
        return self._call("keys", self._adapter.keys)

    def list_keys(self, prefix: str = "") -> KeyListing:
        """List keys starting with ``prefix``, separating directories.

        Matching is a case-sensitive ``startswith``; an empty prefix matches
        everything. Order from ``keys()`` is kept within both groups.
        """
        keys: list[Key] = []
        dirs: list[Key] = []
        for key in self.keys():
            if not key.startswith(prefix):
                continue
            if self.is_directory(key):
                dirs.append(key)
            else:
                keys.append(key)
        return KeyListing(keys=keys, dirs=dirs)

    def is_directory(self, key: Key) -> bool:
        return self._call("is_directory", self._adapter.is_directory, key=key)

    def mtime(self, key: Key) -> datetime:
        """Return the last modification time of the key."""
        self._assert_has_file(key)
        return self._call("mtime", self._adapter.mtime, key=key)

    def checksum(self, key: Key) -> str:
        """Return the checksum of the key's content.

        Delegates to the adapter when it is a ChecksumCalculator; otherwise
        the content is read and hashed here.
        """
        self._assert_has_file(key)

        if isinstance(self._adapter, ChecksumCalculator):
            logger.debug(f"Delegating checksum of {key!r} to {type(self._adapter).__name__}")
            return self._call("checksum", self._adapter.checksum, key=key)

        logger.debug(f"Computing {self._checksum_algorithm} checksum of {key!r} from content")
        content = self._call("read", self._adapter.read, key=key)
        return checksums.from_content(content, self._checksum_algorithm)

    def size(self, key: Key) -> int:
        """Return the size in bytes of the key's content."""
        self._assert_has_file(key)

        if isinstance(self._adapter, SizeCalculator):
            return self._call("size", self._adapter.size, key=key)

        logger.debug(f"Computing size of {key!r} from content")
        return len(self._call("read", self._adapter.read, key=key))

    def mime_type(self, key: Key) -> str:
        """Return the MIME type of the key.

        Raises:
            FileNotFound: key does not exist.
            UnsupportedCapability: adapter is not a MimeTypeProvider.
        """
        self._assert_has_file(key)

        if not isinstance(self._adapter, MimeTypeProvider):
            raise UnsupportedCapability(self._adapter, "MIME type")
        return self._call("mime_type", self._adapter.mime_type, key=key)

    def set_metadata(self, key: Key, metadata: dict[str, Any]) -> None:
        self._assert_has_file(key)

        if not isinstance(self._adapter, MetadataSupporter):
            raise UnsupportedCapability(self._adapter, "metadata")
        self._call(
            "set_metadata",
            lambda key: self._adapter.set_metadata(key, metadata),
            key=key,
        )

    def get_metadata(self, key: Key) -> dict[str, Any]:
        self._assert_has_file(key)

        if not isinstance(self._adapter, MetadataSupporter):
            raise UnsupportedCapability(self._adapter, "metadata")
        return self._call("get_metadata", self._adapter.get_metadata, key=key)

    def _assert_has_file(self, key: Key) -> None:
        if not self.has(key):
            raise FileNotFound(key)

    def _call(self, operation: str, func: Callable[..., T], **context: Any) -> T:
        """Invoke an adapter method, wrapping backend errors."""
        with self._backend_errors(operation, context):
            return func(*context.values())

    @contextmanager
    def _backend_errors(self, operation: str, context: dict[str, Any]) -> Iterator[None]:
        try:
            yield
        except (StorageError, UnsupportedCapability):
            raise
        except Exception as e:
            logger.warning(
                f"{type(self._adapter).__name__}.{operation} failed for {context}: {e}"
            )
            raise StorageFailure.unexpected_failure(operation, context, e) from e

    def __repr__(self) -> str:
        return f"Filesystem(adapter={self._adapter!r})"
