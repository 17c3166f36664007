"""
Error taxonomy shared by every chit fund service.

Each kind is an APIException so DRF renders it with the right status code;
``default_code`` is the machine-readable kind surfaced to clients.
App-specific errors subclass one of these kinds.
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class ChitFundError(APIException):
    """Base exception for all chit fund service errors."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'The request could not be processed.'
    default_code = 'error'

    @property
    def kind(self):
        return self.default_code


class UnauthenticatedError(ChitFundError):
    """No valid session or token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Please log in to continue.'
    default_code = 'unauthenticated'


class ForbiddenError(ChitFundError):
    """Authenticated, but not allowed to act on the target record."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have access to this record.'
    default_code = 'forbidden'


class NotFoundError(ChitFundError):
    """Target id does not resolve."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Record not found.'
    default_code = 'not_found'


class ConflictError(ChitFundError):
    """Duplicate membership, duplicate username and similar clashes."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The record already exists.'
    default_code = 'conflict'


class InvalidError(ChitFundError):
    """Input breaks the entity's shape or range rules."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid'

    def __init__(self, detail=None, code=None, field=None):
        super().__init__(detail, code)
        self.field = field


class InvalidTransitionError(ChitFundError):
    """Illegal workflow state change."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'This change is not allowed in the current state.'
    default_code = 'invalid_transition'
