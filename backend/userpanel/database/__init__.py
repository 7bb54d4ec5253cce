"""
User document storage.
"""
from userpanel.database.connections import get_user_store, reset_user_store
from userpanel.database.storage import JsonFileBackend, MemoryBackend, StorageBackend
from userpanel.database.user_store import UserStore

__all__ = [
    "JsonFileBackend",
    "MemoryBackend",
    "StorageBackend",
    "UserStore",
    "get_user_store",
    "reset_user_store",
]
