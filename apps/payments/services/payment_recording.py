"""
Payment recording.

A payment is the authoritative record; the notification sent to the payer
afterwards is best-effort and never undoes the payment.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from apps.chitgroups.services import (
    get_owned_chit_group,
    get_visible_chit_group,
    load_chit_group,
    validate_month_number,
)
from apps.core.guards import can_view_payment, deny, is_manager
from apps.notifications.services import notify_user
from apps.storage import get_store
from apps.storage.records import NotificationType, Payment

from .exceptions import PayerNotFoundError, PayerNotMemberError, PaymentNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('amount', 'payment_date', 'month_number', 'status')


def payment_message(payment: Payment, group) -> str:
    return (
        f"Your payment of ₹{payment.amount} for {group.name}, "
        f"month {payment.month_number} has been recorded as {payment.status}."
    )


def record_payment(
    *,
    actor,
    chit_group_id: int,
    user_id: int,
    amount: Decimal,
    payment_date: date,
    month_number: int,
    status: str
) -> Payment:
    """
    Record a member's monthly payment and notify them.

    Args:
        actor: Manager who owns the group
        chit_group_id: Group the payment belongs to
        user_id: Paying member
        amount: Amount paid
        payment_date: Date of payment
        month_number: Cycle month the payment covers
        status: paid, pending or overdue

    Returns:
        Created Payment record

    Raises:
        ChitGroupNotFoundError: If group doesn't exist
        NotGroupOwnerError: If actor did not create the group
        PayerNotFoundError: If user doesn't exist
        PayerNotMemberError: If user is not a current member of the group
        InvalidError: If month_number is outside the group's duration
    """
    store = get_store()
    group = get_owned_chit_group(actor=actor, chit_group_id=chit_group_id)

    if store.get_user(user_id) is None:
        raise PayerNotFoundError(f"User with ID {user_id} not found")

    if store.get_membership(group.id, user_id) is None:
        raise PayerNotMemberError("User is not a member of this chit group")

    validate_month_number(group, month_number)

    payment = store.create_payment(
        chit_group_id=group.id,
        user_id=user_id,
        amount=amount,
        payment_date=payment_date,
        month_number=month_number,
        status=status,
    )
    logger.info(
        "Payment #%s recorded for user #%s in chit group #%s (month %s, %s)",
        payment.id, user_id, group.id, month_number, status
    )

    notify_user(
        user_id=user_id,
        message=payment_message(payment, group),
        type=NotificationType.PAYMENT,
    )
    return payment


def update_payment(*, actor, payment_id: int, **changes) -> Payment:
    """
    Merge ``changes`` into a payment of a group owned by the acting manager.

    Status is only ever changed here, by hand; nothing moves a payment
    between paid, pending and overdue automatically.

    Raises:
        PaymentNotFoundError: If payment doesn't exist
        NotGroupOwnerError: If actor did not create the group
        InvalidError: If a new month_number is outside the group's duration
    """
    store = get_store()
    payment = store.get_payment(payment_id)
    if payment is None:
        raise PaymentNotFoundError(f"Payment with ID {payment_id} not found")

    group = get_owned_chit_group(actor=actor, chit_group_id=payment.chit_group_id)

    changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
    if 'month_number' in changes:
        validate_month_number(group, changes['month_number'])
    return store.update_payment(payment_id, **changes)


def get_payment(*, actor, payment_id: int) -> Payment:
    """
    Payment visible to the actor.

    Raises:
        PaymentNotFoundError: If payment doesn't exist
        ForbiddenError: If actor is neither the owning manager nor the payer
    """
    payment = get_store().get_payment(payment_id)
    if payment is None:
        raise PaymentNotFoundError(f"Payment with ID {payment_id} not found")

    group = load_chit_group(payment.chit_group_id)
    if not can_view_payment(actor, payment, group):
        deny(actor, payment, "You do not have access to this payment")
    return payment


def list_payments(*, actor, chit_group_id: Optional[int] = None) -> List[Payment]:
    """
    Payments visible to the actor.

    Managers get every payment of their groups, or of one group when
    ``chit_group_id`` is given. Customers only ever get their own payments,
    optionally narrowed to one of their groups.
    """
    store = get_store()

    if is_manager(actor):
        if chit_group_id is not None:
            group = get_owned_chit_group(actor=actor, chit_group_id=chit_group_id)
            return store.get_payments_by_chit_group(group.id)
        payments = []
        for group in store.get_chit_groups_by_creator(actor.user_id):
            payments.extend(store.get_payments_by_chit_group(group.id))
        return sorted(payments, key=lambda p: p.id)

    payments = store.get_payments_by_user(actor.user_id)
    if chit_group_id is not None:
        get_visible_chit_group(actor=actor, chit_group_id=chit_group_id)
        payments = [p for p in payments if p.chit_group_id == chit_group_id]
    return payments
