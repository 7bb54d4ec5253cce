"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Plain password")


class LoginResponse(BaseModel):
    """Login response."""
    message: str = Field(default="Login successful!", description="Result message")


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(default="", description="Desired username (must be unique)")
    password: str = Field(default="", description="Plain password")


class RegisterResponse(BaseModel):
    """Registration response."""
    username: str = Field(..., description="Registered username")
    message: str = Field(
        default="Registration successful",
        description="Success message"
    )
