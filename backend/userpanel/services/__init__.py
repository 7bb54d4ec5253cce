"""
Service layer for business logic.
"""
from userpanel.services.user_service import UserService

__all__ = [
    "UserService",
]
