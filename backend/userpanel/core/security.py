"""
Security utilities for password hashing and the control-panel secret.
"""
import hmac
import logging
from functools import lru_cache

from passlib.context import CryptContext

from userpanel.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_password_context() -> CryptContext:
    """Password hashing context using bcrypt with the configured work factor."""
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.bcrypt_rounds,
    )


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    A fresh salt is generated on every call, so hashing the same password
    twice gives two different strings that both verify.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return get_password_context().hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise (including when the
        stored hash is malformed or bcrypt refuses the password)
    """
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Password could not be checked against the stored hash")
        return False


def check_admin_secret(provided: str | None) -> bool:
    """
    Compare a supplied control-panel password with the configured one.

    Args:
        provided: Password sent with the request

    Returns:
        True if it matches exactly
    """
    if not provided:
        return False
    expected = get_settings().admin_password
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
