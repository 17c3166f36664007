"""Domain-specific exceptions for payments."""

from apps.core.exceptions import InvalidError, NotFoundError


class PaymentNotFoundError(NotFoundError):
    """Raised when a payment does not exist."""
    default_detail = 'Payment not found.'


class PayerNotFoundError(NotFoundError):
    """Raised when the paying user does not exist."""
    default_detail = 'User not found.'


class PayerNotMemberError(InvalidError):
    """Raised when recording a payment for a user outside the group."""
    default_detail = 'User is not a member of this chit group.'

    def __init__(self, detail=None, code=None, field='user_id'):
        super().__init__(detail, code, field)
