"""
Authentication router for login and registration.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from userpanel.core.errors import (
    AuthenticationError,
    DuplicateUserError,
    InvalidInputError,
)
from userpanel.database.connections import get_user_store
from userpanel.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from userpanel.services.user_service import UserService

router = APIRouter(tags=["Authentication"])


def get_user_service() -> UserService:
    """Dependency to get UserService instance."""
    return UserService(get_user_store())


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(
    body: RegisterRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new user account.

    - **username**: Must not already exist (exact, case-sensitive match)
    - **password**: Stored only as a bcrypt hash
    """
    try:
        return user_service.register_user(body)
    except (InvalidInputError, DuplicateUserError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Check username and password",
)
def login(
    body: LoginRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Verify a username/password pair.

    Unknown usernames and wrong passwords get the same 401 response.
    """
    try:
        return user_service.login(body)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
