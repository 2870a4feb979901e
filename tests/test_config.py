"""Tests for storage settings."""

from core.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.CHECKSUM_ALGORITHM == "md5"
    assert settings.LOCAL_CREATE_ROOT is False
    assert settings.CHUNK_SIZE == 8192


def test_environment_override(monkeypatch):
    monkeypatch.setenv("STORAGE_CHECKSUM_ALGORITHM", "sha256")
    monkeypatch.setenv("STORAGE_LOCAL_CREATE_ROOT", "true")

    settings = Settings()

    assert settings.CHECKSUM_ALGORITHM == "sha256"
    assert settings.LOCAL_CREATE_ROOT is True
