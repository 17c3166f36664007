"""
Membership management service.

Uniqueness of (chit group, user) is enforced by the store; a duplicate
insert surfaces here as ``AlreadyMemberError``.
"""

import logging
from datetime import date
from typing import List, Optional

from django.utils import timezone

from apps.core.guards import can_enroll, deny, manages_customer
from apps.storage import DuplicateRecordError, get_store
from apps.storage.records import ChitGroupMember

from .exceptions import (
    AlreadyMemberError,
    MemberUserNotFoundError,
    MembershipNotFoundError,
)
from .group_access import get_owned_chit_group, get_visible_chit_group

logger = logging.getLogger(__name__)


def add_member(
    *,
    actor,
    chit_group_id: int,
    user_id: int,
    join_date: Optional[date] = None
) -> ChitGroupMember:
    """
    Enroll one of the manager's customers in one of the manager's groups.

    Args:
        actor: Acting manager
        chit_group_id: Target group
        user_id: Customer to enroll
        join_date: Defaults to today

    Returns:
        Created ChitGroupMember record

    Raises:
        ChitGroupNotFoundError: If group doesn't exist
        NotGroupOwnerError: If actor did not create the group
        MemberUserNotFoundError: If user doesn't exist
        ForbiddenError: If user is not a customer of the actor
        AlreadyMemberError: If user is already enrolled
    """
    store = get_store()
    group = get_owned_chit_group(actor=actor, chit_group_id=chit_group_id)

    user = store.get_user(user_id)
    if user is None:
        raise MemberUserNotFoundError(f"User with ID {user_id} not found")

    if not can_enroll(actor, group, user):
        deny(actor, user, "You can only add your own customers to your chit groups")

    try:
        membership = store.add_member(
            chit_group_id=group.id,
            user_id=user.id,
            join_date=join_date or timezone.localdate(),
        )
    except DuplicateRecordError:
        raise AlreadyMemberError(f"User is already a member of {group.name}")

    logger.info("User #%s joined chit group #%s", user.id, group.id)
    return membership


def remove_member(*, actor, chit_group_id: int, user_id: int) -> None:
    """
    Remove a customer from a group. The user record stays.

    Raises:
        ChitGroupNotFoundError: If group doesn't exist
        NotGroupOwnerError: If actor did not create the group
        ForbiddenError: If user is not a customer of the actor
        MembershipNotFoundError: If user is not enrolled
    """
    store = get_store()
    group = get_owned_chit_group(actor=actor, chit_group_id=chit_group_id)

    user = store.get_user(user_id)
    if user is not None and not manages_customer(actor, user):
        deny(actor, user, "You can only remove your own customers from your chit groups")

    if user is None or not store.remove_member(group.id, user_id):
        raise MembershipNotFoundError(
            f"User {user_id} is not a member of chit group {group.id}"
        )

    logger.info("User #%s removed from chit group #%s", user_id, group.id)


def get_group_members(*, actor, chit_group_id: int) -> List[ChitGroupMember]:
    """Members of a group visible to the actor."""
    group = get_visible_chit_group(actor=actor, chit_group_id=chit_group_id)
    return get_store().get_chit_group_members(group.id)
