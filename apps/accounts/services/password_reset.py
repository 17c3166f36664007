"""First-login password reset service."""

import logging

from apps.core.guards import deny
from apps.storage import get_store
from apps.storage.records import User

from .credentials import hash_password, verify_password
from .exceptions import IncorrectPasswordError, UserNotFoundError

logger = logging.getLogger(__name__)


def reset_password(
    *,
    actor,
    user_id: int,
    current_password: str,
    new_password: str
) -> User:
    """
    Replace a user's password after checking the current one.

    Only the user themself may reset. A successful reset ends the
    first-login state.

    Raises:
        ForbiddenError: If actor is not the target user
        UserNotFoundError: If user does not exist
        IncorrectPasswordError: If current password is wrong
    """
    store = get_store()

    if actor.user_id != user_id:
        deny(actor, store.get_user(user_id), "You can only reset your own password")

    user = store.get_user(user_id)
    if user is None:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    if not verify_password(current_password, user.password):
        raise IncorrectPasswordError("Current password is incorrect")

    updated = store.update_user(
        user_id,
        password=hash_password(new_password),
        is_first_login=False,
    )
    logger.info("Password reset for user #%s", user_id)
    return updated
