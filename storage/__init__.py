# storage/__init__.py
"""Storage facade package."""

from storage.base import Adapter, Key
from storage.capabilities import (
    ChecksumCalculator,
    FileFactory,
    MetadataSupporter,
    MimeTypeProvider,
    SizeCalculator,
    StreamFactory,
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
from storage.filesystem import Filesystem
from storage.listing import KeyListing

__all__ = [
    "Adapter",
    "Key",
    "ChecksumCalculator",
    "FileFactory",
    "MetadataSupporter",
    "MimeTypeProvider",
    "SizeCalculator",
    "StreamFactory",
    "File",
    "Filesystem",
    "KeyListing",
    "StorageError",
    "FileNotFound",
    "FileAlreadyExists",
    "UnexpectedFile",
    "StorageFailure",
    "UnsupportedCapability",
]
