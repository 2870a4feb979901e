"""Tests for the in-memory adapter behind the facade."""

import pytest

from storage.adapters.in_memory import InMemoryAdapter
from storage.capabilities import ChecksumCalculator, MetadataSupporter, MimeTypeProvider
from storage.exceptions import FileNotFound
from storage.filesystem import Filesystem


@pytest.fixture
def filesystem():
    return Filesystem(InMemoryAdapter({"a.txt": b"alpha", "b.json": b"{}"}))


def test_declared_capabilities():
    adapter = InMemoryAdapter()
    assert isinstance(adapter, MimeTypeProvider)
    assert isinstance(adapter, MetadataSupporter)
    assert not isinstance(adapter, ChecksumCalculator)


def test_keys_keep_insertion_order(filesystem):
    filesystem.write("c.txt", b"gamma")
    assert filesystem.keys() == ["a.txt", "b.json", "c.txt"]


def test_list_keys_has_no_directories(filesystem):
    listing = filesystem.list_keys("a")
    assert listing.keys == ["a.txt"]
    assert listing.dirs == []


def test_rename_then_read(filesystem):
    filesystem.rename("a.txt", "renamed.txt")

    assert filesystem.read("renamed.txt") == b"alpha"
    with pytest.raises(FileNotFound):
        filesystem.read("a.txt")


def test_mime_type_from_key(filesystem):
    assert filesystem.mime_type("b.json") == "application/json"


def test_metadata_is_kept_per_key(filesystem):
    filesystem.set_metadata("a.txt", {"lang": "en"})

    assert filesystem.get_metadata("a.txt") == {"lang": "en"}
    assert filesystem.get_metadata("b.json") == {}


def test_overwrite_resets_metadata(filesystem):
    filesystem.set_metadata("a.txt", {"lang": "en"})
    filesystem.write("a.txt", b"new", overwrite=True)

    assert filesystem.get_metadata("a.txt") == {}
