# storage/adapters/local.py
"""Local filesystem storage adapter."""

import logging
import mimetypes
import os
from datetime import datetime
from pathlib import Path
from typing import IO, Any

from core.config import settings
from storage import checksum
from storage.base import Adapter, Key
from storage.capabilities import (
    ChecksumCalculator,
    MimeTypeProvider,
    SizeCalculator,
    StreamFactory,
)

logger = logging.getLogger(__name__)


class LocalAdapter(Adapter, ChecksumCalculator, MimeTypeProvider, SizeCalculator, StreamFactory):
    """Storage adapter for a directory on local disk.

    Keys are paths relative to the root directory, using ``/`` separators.
    """

    def __init__(self, config: dict[str, Any]):
        """
        Initialize with config containing:
            - path: root directory
            - create: create the root when missing (default from settings)
            - mode: mode for created directories (default from settings)
            - checksum_algorithm: hashlib name (default from settings)
        """
        self.base_path = Path(config["path"])
        self.create = config.get("create", settings.LOCAL_CREATE_ROOT)
        self.mode = config.get("mode", settings.LOCAL_DIRECTORY_MODE)
        self.checksum_algorithm = config.get("checksum_algorithm", settings.CHECKSUM_ALGORITHM)

    def _ensure_root(self) -> Path:
        """Make sure the root directory exists, creating it when allowed."""
        if self.base_path.is_dir():
            return self.base_path
        if not self.create:
            raise FileNotFoundError(f"Storage root does not exist: {self.base_path}")
        logger.info(f"Creating storage root: {self.base_path}")
        self.base_path.mkdir(mode=self.mode, parents=True, exist_ok=True)
        return self.base_path

    def _resolve_path(self, key: Key) -> Path:
        """Resolve key to an absolute path, preventing traversal."""
        root = self._ensure_root().resolve()
        resolved = (root / key).resolve()
        if resolved == root:
            raise ValueError(f"Key does not name an entry below the root: {key!r}")
        if root not in resolved.parents:
            raise ValueError(f"Path traversal not allowed: {key}")
        return resolved

    def exists(self, key: Key) -> bool:
        return self._resolve_path(key).exists()

    def read(self, key: Key) -> bytes:
        return self._resolve_path(key).read_bytes()

    def write(self, key: Key, content: bytes) -> None:
        """Write content, creating parent directories as needed."""
        file_path = self._resolve_path(key)
        file_path.parent.mkdir(mode=self.mode, parents=True, exist_ok=True)
        file_path.write_bytes(content)

    def delete(self, key: Key) -> None:
        """Delete a file or an empty directory."""
        file_path = self._resolve_path(key)
        if file_path.is_dir():
            file_path.rmdir()
        else:
            file_path.unlink()

    def rename(self, source_key: Key, target_key: Key) -> None:
        target_path = self._resolve_path(target_key)
        target_path.parent.mkdir(mode=self.mode, parents=True, exist_ok=True)
        os.replace(self._resolve_path(source_key), target_path)

    def keys(self) -> list[Key]:
        """List every file and directory below the root."""
        root = self._ensure_root()
        return sorted(item.relative_to(root).as_posix() for item in root.rglob("*"))

    def mtime(self, key: Key) -> datetime:
        return datetime.fromtimestamp(self._resolve_path(key).stat().st_mtime)

    def is_directory(self, key: Key) -> bool:
        return self._resolve_path(key).is_dir()

    def checksum(self, key: Key) -> str:
        return checksum.from_file(self._resolve_path(key), self.checksum_algorithm)

    def size(self, key: Key) -> int:
        return self._resolve_path(key).stat().st_size

    def mime_type(self, key: Key) -> str:
        mime_type, _ = mimetypes.guess_type(self._resolve_path(key).name)
        return mime_type or "application/octet-stream"

    def create_stream(self, key: Key) -> IO[bytes]:
        """Open the file for binary reading. The caller closes it."""
        return open(self._resolve_path(key), "rb")

    def __repr__(self) -> str:
        return f"LocalAdapter(path={str(self.base_path)!r})"
