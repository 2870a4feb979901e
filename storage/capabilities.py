# storage/capabilities.py
"""Optional adapter capabilities.

Each protocol describes one narrow piece of behavior an adapter may offer
on top of the required ``Adapter`` contract. The facade checks them with
``isinstance`` on every call, so adapters that are wrapped or proxied keep
their capabilities as long as the methods are reachable.
"""
from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from storage.base import Key
    from storage.file import File
    from storage.filesystem import Filesystem


@runtime_checkable
class FileFactory(Protocol):
    """Adapter that builds its own File objects."""

    def create_file(self, key: Key, filesystem: Filesystem) -> File:
        ...


@runtime_checkable
class StreamFactory(Protocol):
    """Adapter that can open a stream for a key."""

    def create_stream(self, key: Key) -> IO[bytes]:
        ...


@runtime_checkable
class ChecksumCalculator(Protocol):
    """Adapter that computes checksums without a full content read."""

    def checksum(self, key: Key) -> str:
        ...


@runtime_checkable
class MetadataSupporter(Protocol):
    """Adapter that stores arbitrary metadata next to content."""

    def set_metadata(self, key: Key, metadata: dict[str, Any]) -> None:
        ...

    def get_metadata(self, key: Key) -> dict[str, Any]:
        ...


@runtime_checkable
class MimeTypeProvider(Protocol):
    """Adapter that resolves the MIME type of a key."""

    def mime_type(self, key: Key) -> str:
        ...


@runtime_checkable
class SizeCalculator(Protocol):
    """Adapter that knows content size without reading it."""

    def size(self, key: Key) -> int:
        ...
