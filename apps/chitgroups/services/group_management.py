"""Chit group management service."""

import logging
from datetime import date
from typing import List

from apps.core.guards import deny, is_manager
from apps.storage import get_store
from apps.storage.records import ChitGroup

from .group_access import get_owned_chit_group, get_visible_chit_group

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('name', 'value', 'duration', 'members_count', 'start_date', 'is_active')


def create_chit_group(
    *,
    actor,
    name: str,
    value: int,
    duration: int,
    members_count: int,
    start_date: date,
    is_active: bool = True
) -> ChitGroup:
    """
    Create a chit group owned by the acting manager.

    Args:
        actor: Acting manager
        name: Group name
        value: Total pooled value
        duration: Length in months, one auction per month
        members_count: Planned number of members
        start_date: First month of the group
        is_active: Whether the group is running

    Returns:
        Created ChitGroup record

    Raises:
        ForbiddenError: If actor is not a manager
    """
    if not is_manager(actor):
        deny(actor, None, "Only managers can create chit groups")

    group = get_store().create_chit_group(
        name=name,
        value=value,
        duration=duration,
        members_count=members_count,
        start_date=start_date,
        is_active=is_active,
        created_by=actor.user_id,
    )
    logger.info("Manager #%s created chit group #%s", actor.user_id, group.id)
    return group


def update_chit_group(*, actor, chit_group_id: int, **changes) -> ChitGroup:
    """
    Merge ``changes`` into a group owned by the acting manager.

    Raises:
        ChitGroupNotFoundError: If group doesn't exist
        NotGroupOwnerError: If actor did not create the group
    """
    get_owned_chit_group(actor=actor, chit_group_id=chit_group_id)
    changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
    return get_store().update_chit_group(chit_group_id, **changes)


def get_chit_group(*, actor, chit_group_id: int) -> ChitGroup:
    return get_visible_chit_group(actor=actor, chit_group_id=chit_group_id)


def list_chit_groups(*, actor) -> List[ChitGroup]:
    """Groups created by a manager, or joined by a customer."""
    store = get_store()
    if is_manager(actor):
        return store.get_chit_groups_by_creator(actor.user_id)
    return store.get_chit_groups_by_user(actor.user_id)
