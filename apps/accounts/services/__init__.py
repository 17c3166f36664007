"""Services for accounts business logic."""

from .exceptions import (
    InvalidCredentialsError,
    RegistrationNotAllowedError,
    UsernameTakenError,
    UserNotFoundError,
    IncorrectPasswordError,
)
from .credentials import hash_password, verify_password
from .user_registration import register_user, create_customer
from .user_authentication import authenticate_user, get_current_user
from .password_reset import reset_password
from .customer_management import list_customers

__all__ = [
    # Exceptions
    'InvalidCredentialsError',
    'RegistrationNotAllowedError',
    'UsernameTakenError',
    'UserNotFoundError',
    'IncorrectPasswordError',
    # Credentials
    'hash_password',
    'verify_password',
    # Services
    'register_user',
    'create_customer',
    'authenticate_user',
    'get_current_user',
    'reset_password',
    'list_customers',
]
