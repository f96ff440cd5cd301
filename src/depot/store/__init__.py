"""Depot store factory.

Provides get_store() / set_store() to swap implementations. MemoryStore is
the only adapter; DEPOT_STORE selects it by name.
"""

import os

from depot.store.memory_adapter import MemoryStore
from depot.store.port import DepotStore

_current_store: DepotStore | None = None


def get_store() -> DepotStore:
    """Return the process-wide store (singleton). Defaults to MemoryStore."""
    global _current_store
    if _current_store is None:
        adapter = os.environ.get("DEPOT_STORE", "memory")
        if adapter == "memory":
            _current_store = MemoryStore()
        else:
            raise ValueError(f"Unknown store adapter: {adapter}")
    return _current_store


def set_store(store: DepotStore) -> None:
    """Override the active store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_store() -> None:
    """Reset the store singleton."""
    global _current_store
    _current_store = None
