"""
Request and response schemas for API endpoints.
"""
from userpanel.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from userpanel.schemas.control import (
    ControlRequest,
    EditUserRequest,
    UserActionResponse,
    UserListResponse,
    UserSummary,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    # Control
    "ControlRequest",
    "EditUserRequest",
    "UserActionResponse",
    "UserListResponse",
    "UserSummary",
]
