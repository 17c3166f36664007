"""
Access guards.

Every rule is a pure predicate over (actor, target, optional parent) so it
can be tested without a store or a request. Services load the records,
ask the predicates and call ``deny`` when one fails.
"""

import logging

from .exceptions import ForbiddenError

logger = logging.getLogger(__name__)

AUCTION_SCHEDULED = 'scheduled'


def is_manager(actor) -> bool:
    return actor is not None and actor.is_manager


def is_customer(actor) -> bool:
    return actor is not None and actor.is_customer


def owns_chit_group(actor, group) -> bool:
    """Manager created the group."""
    return is_manager(actor) and group is not None and group.created_by == actor.user_id


def is_membership_of(actor, group, membership) -> bool:
    """``membership`` ties the actor to ``group``."""
    return (
        actor is not None
        and group is not None
        and membership is not None
        and membership.chit_group_id == group.id
        and membership.user_id == actor.user_id
    )


def can_view_chit_group(actor, group, membership=None) -> bool:
    """Managers see groups they created, customers see groups they joined."""
    if is_manager(actor):
        return owns_chit_group(actor, group)
    if is_customer(actor):
        return is_membership_of(actor, group, membership)
    return False


def manages_customer(actor, user) -> bool:
    """``user`` is a customer assigned to the acting manager."""
    return (
        is_manager(actor)
        and user is not None
        and user.role == 'customer'
        and user.manager_id == actor.user_id
    )


def can_enroll(actor, group, user) -> bool:
    """Manager may add or remove ``user`` in ``group``."""
    return owns_chit_group(actor, group) and manages_customer(actor, user)


def can_bid(actor, auction, membership) -> bool:
    """Members may bid while the auction is still scheduled."""
    return (
        auction is not None
        and membership is not None
        and membership.user_id == actor.user_id
        and membership.chit_group_id == auction.chit_group_id
        and auction.status == AUCTION_SCHEDULED
    )


def can_view_payment(actor, payment, group) -> bool:
    """Owning manager sees every payment of the group; customers see their own."""
    if payment is None:
        return False
    if is_manager(actor):
        return owns_chit_group(actor, group) and payment.chit_group_id == group.id
    if is_customer(actor):
        return payment.user_id == actor.user_id
    return False


def owns_notification(actor, notification) -> bool:
    return (
        actor is not None
        and notification is not None
        and notification.user_id == actor.user_id
    )


def deny(actor, target, message, error_class=ForbiddenError):
    """Log the refusal for audit and raise ``error_class``."""
    logger.warning(
        "Access denied: actor=%s role=%s target=%s#%s reason=%s",
        getattr(actor, 'user_id', None),
        getattr(actor, 'role', None),
        type(target).__name__ if target is not None else '-',
        getattr(target, 'id', None),
        message,
    )
    raise error_class(message)
