"""User authentication service."""

import logging

from apps.storage import get_store
from apps.storage.records import User

from .credentials import verify_password
from .exceptions import InvalidCredentialsError, UserNotFoundError

logger = logging.getLogger(__name__)


def authenticate_user(*, username: str, password: str) -> User:
    """
    Authenticate user with username and password.

    Args:
        username: User's login name
        password: User's password

    Returns:
        Authenticated User record

    Raises:
        InvalidCredentialsError: If credentials are invalid
    """
    user = get_store().get_user_by_username(username)
    if user is None:
        logger.info("Login failed: unknown username %r", username)
        raise InvalidCredentialsError("Invalid username or password")

    if not verify_password(password, user.password):
        logger.info("Login failed: wrong password for user #%s", user.id)
        raise InvalidCredentialsError("Invalid username or password")

    logger.info("Login successful for user #%s (%s)", user.id, user.role)
    return user


def get_current_user(*, actor) -> User:
    """Reload the acting user from the store."""
    user = get_store().get_user(actor.user_id)
    if user is None:
        raise UserNotFoundError(f"User with ID {actor.user_id} not found")
    return user
