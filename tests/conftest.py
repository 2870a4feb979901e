"""Pytest configuration and fixtures."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from storage.base import Adapter
from storage.capabilities import (
    ChecksumCalculator,
    FileFactory,
    MetadataSupporter,
    MimeTypeProvider,
    SizeCalculator,
    StreamFactory,
)
from storage.filesystem import Filesystem


class ExtendedAdapter(
    Adapter,
    FileFactory,
    StreamFactory,
    ChecksumCalculator,
    MetadataSupporter,
    MimeTypeProvider,
    SizeCalculator,
):
    """Adapter type declaring every optional capability, used as a mock spec."""


@pytest.fixture
def adapter() -> MagicMock:
    """Mock adapter with only the required methods."""
    return MagicMock(spec=Adapter)


@pytest.fixture
def extended_adapter() -> MagicMock:
    """Mock adapter with every optional capability."""
    return MagicMock(spec=ExtendedAdapter)


@pytest.fixture
def filesystem(adapter: MagicMock) -> Filesystem:
    return Filesystem(adapter)


@pytest.fixture
def extended_filesystem(extended_adapter: MagicMock) -> Filesystem:
    return Filesystem(extended_adapter)


@pytest.fixture
def temp_storage() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path)
