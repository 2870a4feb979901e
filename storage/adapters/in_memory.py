# storage/adapters/in_memory.py
"""In-memory storage adapter, mostly useful for tests."""

import mimetypes
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from storage.base import Adapter, Key
from storage.capabilities import MetadataSupporter, MimeTypeProvider


@dataclass
class _Entry:
    content: bytes
    mtime: datetime = field(default_factory=datetime.now)
    metadata: dict[str, Any] = field(default_factory=dict)


class InMemoryAdapter(Adapter, MetadataSupporter, MimeTypeProvider):
    """Keeps content in a dict. Has no notion of directories."""

    def __init__(self, files: dict[Key, bytes] | None = None):
        self._files: dict[Key, _Entry] = {
            key: _Entry(content) for key, content in (files or {}).items()
        }

    def exists(self, key: Key) -> bool:
        return key in self._files

    def read(self, key: Key) -> bytes:
        return self._files[key].content

    def write(self, key: Key, content: bytes) -> None:
        self._files[key] = _Entry(content)

    def delete(self, key: Key) -> None:
        del self._files[key]

    def rename(self, source_key: Key, target_key: Key) -> None:
        self._files[target_key] = self._files.pop(source_key)

    def keys(self) -> list[Key]:
        return list(self._files)

    def mtime(self, key: Key) -> datetime:
        return self._files[key].mtime

    def is_directory(self, key: Key) -> bool:
        return False

    def set_metadata(self, key: Key, metadata: dict[str, Any]) -> None:
        self._files[key].metadata = dict(metadata)

    def get_metadata(self, key: Key) -> dict[str, Any]:
        return dict(self._files[key].metadata)

    def mime_type(self, key: Key) -> str:
        mime_type, _ = mimetypes.guess_type(key)
        return mime_type or "application/octet-stream"
