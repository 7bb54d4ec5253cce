"""
User service for registration, login and control panel management.
"""
import logging
from typing import Optional

from passlib.exc import PasswordValueError

from userpanel.core.errors import (
    AuthenticationError,
    DuplicateUserError,
    InvalidInputError,
    UserNotFoundError,
)
from userpanel.core.security import hash_password, verify_password
from userpanel.database.user_store import UserStore
from userpanel.models.user import UserCollection, UserRecord
from userpanel.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class UserService:
    """Service for user operations on top of a ``UserStore``."""

    def __init__(self, store: UserStore):
        """Initialize with the user store."""
        self.store = store

    @staticmethod
    def _hash(password: str) -> str:
        """Hash a password, turning passwords bcrypt refuses into input errors."""
        try:
            return hash_password(password)
        except PasswordValueError as e:
            raise InvalidInputError(f"password not accepted: {e}") from e

    def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        The password is hashed before the store lock is taken so slow
        hashing in one request never blocks writes from another.

        Args:
            request: Registration request with username and password

        Returns:
            RegisterResponse with the registered username

        Raises:
            InvalidInputError: If username or password is empty,
                or the password cannot be hashed
            DuplicateUserError: If the username already exists
        """
        if not request.username or not request.password:
            raise InvalidInputError("username and password required")

        password_hash = self._hash(request.password)

        with self.store.transaction() as users:
            if self.store.find_by_username(users, request.username):
                raise DuplicateUserError("username already exists")
            users.append(UserRecord(username=request.username, password_hash=password_hash))

        logger.info("Registered user %r", request.username)
        return RegisterResponse(username=request.username)

    def login(self, request: LoginRequest) -> LoginResponse:
        """
        Check a username/password pair.

        Unknown users and wrong passwords fail with the same message.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        users = self.store.load()
        user = self.store.find_by_username(users, request.username)

        if user is None or not verify_password(request.password, user.password_hash):
            logger.info("Failed login for %r", request.username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        return LoginResponse()

    def list_users(self) -> UserCollection:
        """Return all users in stored order."""
        return self.store.load()

    def get_user(self, username: str) -> UserRecord:
        """
        Get a user by exact username.

        Raises:
            UserNotFoundError: If no such user exists
        """
        user = self.store.find_by_username(self.store.load(), username)
        if user is None:
            raise UserNotFoundError("User not found")
        return user

    def edit_user(
        self,
        username: str,
        new_username: Optional[str] = None,
        new_password: Optional[str] = None,
    ) -> UserRecord:
        """
        Rename a user and/or set a new password.

        Empty values keep what is stored. A new password is hashed before
        the store lock is taken.

        Args:
            username: Current username
            new_username: Replacement username, if any
            new_password: Replacement plain password, if any

        Returns:
            The updated record

        Raises:
            UserNotFoundError: If ``username`` does not exist
            DuplicateUserError: If ``new_username`` belongs to another user
            InvalidInputError: If the new password cannot be hashed
        """
        password_hash = self._hash(new_password) if new_password else None

        with self.store.transaction() as users:
            user = self.store.find_by_username(users, username)
            if user is None:
                raise UserNotFoundError("User not found")

            if new_username and new_username != username:
                if self.store.find_by_username(users, new_username):
                    raise DuplicateUserError("username already exists")
                user.username = new_username

            if password_hash is not None:
                user.password_hash = password_hash

        logger.info(
            "Edited user %r (renamed to %r, password changed: %s)",
            username,
            user.username,
            password_hash is not None,
        )
        return user

    def delete_user(self, username: str) -> None:
        """
        Delete a user by exact username.

        Raises:
            UserNotFoundError: If no such user exists; nothing is written
        """
        with self.store.transaction() as users:
            if self.store.find_by_username(users, username) is None:
                raise UserNotFoundError("User not found")
            users[:] = [u for u in users if u.username != username]

        logger.info("Deleted user %r", username)
