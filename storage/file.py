# storage/file.py
"""File value object."""
from __future__ import annotations

import posixpath
from datetime import datetime
from typing import TYPE_CHECKING, Any

from storage.base import Key
from storage.capabilities import MetadataSupporter

if TYPE_CHECKING:
    from storage.filesystem import Filesystem


class File:
    """A stored object addressed by key, bound to the Filesystem that owns it.

    Nothing is fetched on construction. Content is read on first access to
    ``content`` and kept on the instance; every other property asks the
    filesystem each time so precondition checks still apply.
    """

    def __init__(self, key: Key, filesystem: Filesystem):
        self._key = key
        self._filesystem = filesystem
        self._content: bytes | None = None

    @property
    def key(self) -> Key:
        return self._key

    @property
    def name(self) -> str:
        """Last segment of the key."""
        return posixpath.basename(self._key.rstrip("/")) or self._key

    @property
    def filesystem(self) -> Filesystem:
        return self._filesystem

    @property
    def content(self) -> bytes:
        if self._content is None:
            self._content = self._filesystem.read(self._key)
        return self._content

    def set_content(self, content: bytes) -> int:
        """Write content, replacing whatever is stored. Returns the size."""
        self._filesystem.write(self._key, content, overwrite=True)
        self._content = content
        return len(content)

    @property
    def size(self) -> int:
        if self._content is not None:
            return len(self._content)
        return self._filesystem.size(self._key)

    @property
    def mtime(self) -> datetime:
        return self._filesystem.mtime(self._key)

    @property
    def checksum(self) -> str:
        return self._filesystem.checksum(self._key)

    @property
    def mime_type(self) -> str:
        return self._filesystem.mime_type(self._key)

    def exists(self) -> bool:
        return self._filesystem.has(self._key)

    def delete(self) -> None:
        self._filesystem.delete(self._key)
        self._content = None

    def rename(self, new_key: Key) -> File:
        """Move the file and return a File for the new key."""
        self._filesystem.rename(self._key, new_key)
        return self._filesystem.get(new_key)

    def set_metadata(self, metadata: dict[str, Any]) -> bool:
        """Store metadata if the adapter supports it.

        Returns False when the adapter has no metadata support.
        """
        adapter = self._filesystem.adapter
        if not isinstance(adapter, MetadataSupporter):
            return False
        self._filesystem.set_metadata(self._key, metadata)
        return True

    def get_metadata(self) -> dict[str, Any]:
        adapter = self._filesystem.adapter
        if not isinstance(adapter, MetadataSupporter):
            return {}
        return self._filesystem.get_metadata(self._key)

    def __repr__(self) -> str:
        return f"File(key={self._key!r})"
