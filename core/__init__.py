"""Core configuration.

- Settings: storage configuration read from ``STORAGE_*`` environment variables
"""

from .config import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
