"""User registration service."""

import logging

from apps.storage import DuplicateRecordError, get_store
from apps.storage.records import User, UserRole

from .credentials import hash_password
from .exceptions import RegistrationNotAllowedError, UsernameTakenError

logger = logging.getLogger(__name__)


def _check_registration_allowed(actor, role):
    if actor is None:
        if role != UserRole.MANAGER:
            raise RegistrationNotAllowedError("Only managers can create customer accounts")
        return
    if not actor.is_manager:
        raise RegistrationNotAllowedError("Only managers can register new users")
    if role != UserRole.CUSTOMER:
        raise RegistrationNotAllowedError("Cannot create manager accounts while logged in")


def register_user(
    *,
    actor,
    username: str,
    password: str,
    phone: str,
    name: str,
    role: str,
    email: str = None
) -> User:
    """
    Create a manager (anonymous self-registration) or a customer (by a manager).

    Customers are assigned to the registering manager and must change their
    temporary password on first login.

    Args:
        actor: ActorContext of the caller, or None when anonymous
        username: Unique login name
        password: Cleartext password, hashed before storage
        phone: Contact phone number
        name: Display name
        role: 'manager' or 'customer'
        email: Optional email address

    Returns:
        Created User record

    Raises:
        RegistrationNotAllowedError: If the caller may not create this role
        UsernameTakenError: If username is already registered
    """
    _check_registration_allowed(actor, role)

    is_customer = role == UserRole.CUSTOMER
    try:
        user = get_store().create_user(
            username=username,
            password=hash_password(password),
            phone=phone,
            name=name,
            email=email or None,
            role=role,
            is_first_login=is_customer,
            manager_id=actor.user_id if is_customer else None,
        )
    except DuplicateRecordError:
        raise UsernameTakenError(f"Username '{username}' already exists")

    logger.info("Registered %s #%s (%s)", user.role, user.id, user.username)
    return user


def create_customer(*, actor, **data) -> User:
    """Register a customer managed by the acting manager."""
    data['role'] = UserRole.CUSTOMER
    return register_user(actor=actor, **data)
