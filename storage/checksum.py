# storage/checksum.py
"""Checksum helpers shared by the facade and adapters."""

import hashlib
from pathlib import Path

from core.config import settings


def from_content(content: bytes, algorithm: str | None = None) -> str:
    """Return the hex digest of in-memory content."""
    return hashlib.new(algorithm or settings.CHECKSUM_ALGORITHM, content).hexdigest()


def from_file(path: Path, algorithm: str | None = None, chunk_size: int | None = None) -> str:
    """Return the hex digest of a file, reading it in chunks."""
    digest = hashlib.new(algorithm or settings.CHECKSUM_ALGORITHM)
    chunk_size = chunk_size or settings.CHUNK_SIZE
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            digest.update(chunk)
    return digest.hexdigest()

