"""
JSON-document user store.

The whole collection is loaded on every request and, on mutation, written
back in full. There is no upsert: callers load, change the list, then save,
normally through ``UserStore.transaction()`` which holds the store lock for
the whole read-modify-write.
"""
import json
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from pydantic import TypeAdapter, ValidationError

from userpanel.core.errors import StoreParseError
from userpanel.database.storage import StorageBackend
from userpanel.models.user import UserCollection, UserRecord

logger = logging.getLogger(__name__)

_collection_adapter = TypeAdapter(UserCollection)


class UserStore:
    """Durable username -> record mapping backed by a single document."""

    def __init__(self, backend: StorageBackend):
        self.backend = backend
        self._lock = threading.Lock()

    def load(self) -> UserCollection:
        """
        Read the full user collection.

        Returns:
            Users in stored order; empty if the document does not exist

        Raises:
            StoreParseError: If the document is not a valid user list
            StoreReadError: If the document exists but cannot be read
        """
        raw = self.backend.read()
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreParseError(f"User document is not valid JSON: {e}") from e

        try:
            return _collection_adapter.validate_python(data)
        except ValidationError as e:
            raise StoreParseError(f"User document has an invalid layout: {e}") from e

    def save(self, users: UserCollection) -> None:
        """
        Serialize and write the full collection, replacing the document.

        Raises:
            StoreWriteError: If the document cannot be written
        """
        payload = [user.model_dump(by_alias=True) for user in users]
        self.backend.write(json.dumps(payload, ensure_ascii=False, indent=2))
        logger.debug("Saved %d users", len(users))

    @staticmethod
    def find_by_username(users: UserCollection, username: str) -> Optional[UserRecord]:
        """Return the first record whose username equals ``username`` exactly."""
        for user in users:
            if user.username == username:
                return user
        return None

    @contextmanager
    def transaction(self) -> Iterator[UserCollection]:
        """
        Locked load-mutate-save.

        Yields the freshly loaded list; mutate it in place. It is saved when
        the block exits normally. If the block raises, nothing is written.

        Usage:
            with store.transaction() as users:
                users.append(record)
        """
        with self._lock:
            users = self.load()
            yield users
            self.save(users)
