"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidError,
    NotFoundError,
    UnauthenticatedError,
)


class InvalidCredentialsError(UnauthenticatedError):
    """Raised when username or password is wrong."""
    default_detail = 'Invalid username or password.'


class RegistrationNotAllowedError(ForbiddenError):
    """Raised when the caller may not create an account with the requested role."""
    default_detail = 'You are not allowed to create this account.'


class UsernameTakenError(ConflictError):
    """Raised when the username is already registered."""
    default_detail = 'Username already exists. Please choose another one.'


class UserNotFoundError(NotFoundError):
    """Raised when user does not exist."""
    default_detail = 'User not found.'


class IncorrectPasswordError(InvalidError):
    """Raised when the current password supplied to a reset is wrong."""
    default_detail = 'Current password is incorrect.'

    def __init__(self, detail=None, code=None, field='current_password'):
        super().__init__(detail, code, field)
