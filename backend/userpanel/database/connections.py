"""
Process-wide user store handle.
"""
import logging
from typing import Optional

from userpanel.config import get_settings
from userpanel.database.storage import JsonFileBackend
from userpanel.database.user_store import UserStore

logger = logging.getLogger(__name__)

# Global store instance; its lock guards every write in this process
_user_store: Optional[UserStore] = None


def get_user_store() -> UserStore:
    """Get or create the user store for the configured document."""
    global _user_store
    if _user_store is None:
        settings = get_settings()
        _user_store = UserStore(JsonFileBackend(settings.users_file))
        logger.info("User store opened at %s", settings.users_file)
    return _user_store


def reset_user_store(store: Optional[UserStore] = None) -> None:
    """Replace (or drop) the global store, e.g. after settings change."""
    global _user_store
    _user_store = store
