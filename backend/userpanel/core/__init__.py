"""
Core module - Security helpers and domain errors.
"""
from userpanel.core.errors import (
    AuthenticationError,
    DuplicateUserError,
    InvalidInputError,
    StoreError,
    StoreParseError,
    StoreReadError,
    StoreWriteError,
    UserNotFoundError,
    UserPanelError,
)
from userpanel.core.security import (
    check_admin_secret,
    hash_password,
    verify_password,
)

__all__ = [
    "AuthenticationError",
    "DuplicateUserError",
    "InvalidInputError",
    "StoreError",
    "StoreParseError",
    "StoreReadError",
    "StoreWriteError",
    "UserNotFoundError",
    "UserPanelError",
    "check_admin_secret",
    "hash_password",
    "verify_password",
]
