# storage/adapters/__init__.py
"""Storage adapter implementations."""

from storage.adapters.in_memory import InMemoryAdapter
from storage.adapters.local import LocalAdapter

__all__ = ["InMemoryAdapter", "LocalAdapter"]
