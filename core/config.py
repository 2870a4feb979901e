"""Storage configuration."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Storage settings."""

    # Digest used when an adapter cannot compute checksums itself
    CHECKSUM_ALGORITHM: Literal["md5", "sha1", "sha256"] = "md5"

    # Block size for streamed file digests
    CHUNK_SIZE: int = 8192

    # Local adapter defaults
    LOCAL_CREATE_ROOT: bool = False  # Create the root directory when missing
    LOCAL_DIRECTORY_MODE: int = 0o777  # Mode for directories created on write

    model_config = {"env_prefix": "STORAGE_", "env_file": ".env"}


settings = Settings()
