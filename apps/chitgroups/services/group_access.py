"""
Chit group loaders shared by every app scoped by a chit group.

Each loader resolves the group (``NotFound`` first) and then applies the
ownership or visibility guard, so a caller never sees a record it has no
right to.
"""

from apps.core.exceptions import InvalidError
from apps.core.guards import can_view_chit_group, deny, is_customer, owns_chit_group
from apps.storage import get_store
from apps.storage.records import ChitGroup

from .exceptions import ChitGroupNotFoundError, NotGroupOwnerError


def load_chit_group(chit_group_id: int) -> ChitGroup:
    group = get_store().get_chit_group(chit_group_id)
    if group is None:
        raise ChitGroupNotFoundError(f"Chit group with ID {chit_group_id} not found")
    return group


def get_owned_chit_group(*, actor, chit_group_id: int) -> ChitGroup:
    """Group created by the acting manager."""
    group = load_chit_group(chit_group_id)
    if not owns_chit_group(actor, group):
        deny(actor, group, "You can only manage chit groups you've created", NotGroupOwnerError)
    return group


def get_visible_chit_group(*, actor, chit_group_id: int) -> ChitGroup:
    """Group the actor created (manager) or belongs to (customer)."""
    group = load_chit_group(chit_group_id)
    membership = None
    if is_customer(actor):
        membership = get_store().get_membership(group.id, actor.user_id)
    if not can_view_chit_group(actor, group, membership):
        if is_customer(actor):
            deny(actor, group, "You are not a member of this chit group")
        deny(actor, group, "You can only access chit groups you've created")
    return group


def validate_month_number(group: ChitGroup, month_number: int):
    """Month must fall inside the group's duration."""
    if month_number < 1 or month_number > group.duration:
        raise InvalidError(
            f"Month number must be between 1 and {group.duration}",
            field='month_number'
        )
