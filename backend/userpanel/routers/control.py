"""
Control panel router for admin-managed user records.

Every request must carry the admin password in its body; it is checked on
each call. Usernames are matched as paths so names containing "/" still
route.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from userpanel.core.errors import (
    DuplicateUserError,
    InvalidInputError,
    UserNotFoundError,
)
from userpanel.core.security import check_admin_secret
from userpanel.routers.auth import get_user_service
from userpanel.schemas.control import (
    ControlRequest,
    EditUserRequest,
    UserActionResponse,
    UserListResponse,
    UserSummary,
)
from userpanel.services.user_service import UserService

router = APIRouter(prefix="/control", tags=["Control Panel"])


def ensure_admin(body: ControlRequest, detail: str = "Unauthorized") -> None:
    """Raise 401 unless the body carries the admin password."""
    if not check_admin_secret(body.admin_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


@router.post(
    "",
    response_model=UserListResponse,
    summary="Open the control panel",
)
def open_control_panel(
    body: ControlRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Verify the admin password and list all users.
    """
    ensure_admin(body, detail="Incorrect control-panel password")

    users = user_service.list_users()
    return UserListResponse(
        users=[UserSummary(username=u.username) for u in users],
        total=len(users),
    )


@router.post(
    "/users/{username:path}",
    response_model=UserSummary,
    summary="Get a user for editing",
)
def get_user(
    username: str,
    body: ControlRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Fetch one user (without its hash) to prefill the edit form.
    """
    ensure_admin(body)

    try:
        user = user_service.get_user(username)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return UserSummary(username=user.username)


@router.post(
    "/edit/{username:path}",
    response_model=UserActionResponse,
    summary="Edit a user",
)
def edit_user(
    username: str,
    body: EditUserRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Rename a user and/or set a new password.

    - **username**: New username; empty keeps the current one
    - **password**: New password; empty keeps the current hash
    """
    ensure_admin(body)

    try:
        user = user_service.edit_user(
            username,
            new_username=body.username,
            new_password=body.password,
        )
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (DuplicateUserError, InvalidInputError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return UserActionResponse(username=user.username, message="User updated")


@router.post(
    "/delete/{username:path}",
    response_model=UserActionResponse,
    summary="Delete a user",
)
def delete_user(
    username: str,
    body: ControlRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Remove a user from the store.
    """
    ensure_admin(body)

    try:
        user_service.delete_user(username)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return UserActionResponse(username=username, message="User deleted")
