"""
Pydantic models for persisted data.
"""
from userpanel.models.user import UserCollection, UserRecord

__all__ = [
    "UserCollection",
    "UserRecord",
]
