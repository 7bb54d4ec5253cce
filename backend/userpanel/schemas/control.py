"""
Control panel request/response schemas.

Every control request carries the admin password; there is no session.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ControlRequest(BaseModel):
    """Body for control panel actions that need only the admin password."""
    admin_password: str = Field(default="", description="Control panel password")


class EditUserRequest(ControlRequest):
    """Edit a user. Empty fields leave the stored value unchanged."""
    username: Optional[str] = Field(None, description="New username")
    password: Optional[str] = Field(None, description="New plain password")


class UserSummary(BaseModel):
    """Public view of a user record (no hash)."""
    username: str = Field(..., description="Username")


class UserListResponse(BaseModel):
    """Control panel user listing."""
    users: list[UserSummary] = Field(default_factory=list, description="Users in stored order")
    total: int = Field(..., description="Number of users")


class UserActionResponse(BaseModel):
    """Result of an edit or delete."""
    username: str = Field(..., description="Affected username after the action")
    message: str = Field(..., description="Result message")
