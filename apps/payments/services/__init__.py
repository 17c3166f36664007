"""Services for payments."""

from .exceptions import (
    PaymentNotFoundError,
    PayerNotFoundError,
    PayerNotMemberError,
)
from .payment_recording import (
    record_payment,
    update_payment,
    get_payment,
    list_payments,
)

__all__ = [
    # Exceptions
    'PaymentNotFoundError',
    'PayerNotFoundError',
    'PayerNotMemberError',
    # Services
    'record_payment',
    'update_payment',
    'get_payment',
    'list_payments',
]
