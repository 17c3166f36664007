"""
Chit groups service layer.

Every function takes the acting user explicitly and enforces ownership or
membership before touching the store.
"""

from .exceptions import (
    ChitGroupNotFoundError,
    MemberUserNotFoundError,
    MembershipNotFoundError,
    AlreadyMemberError,
    NotGroupOwnerError,
)

from .group_access import (
    load_chit_group,
    get_owned_chit_group,
    get_visible_chit_group,
    validate_month_number,
)

from .group_management import (
    create_chit_group,
    update_chit_group,
    get_chit_group,
    list_chit_groups,
)

from .membership_management import (
    add_member,
    remove_member,
    get_group_members,
)


__all__ = [
    # Exceptions
    'ChitGroupNotFoundError',
    'MemberUserNotFoundError',
    'MembershipNotFoundError',
    'AlreadyMemberError',
    'NotGroupOwnerError',

    # Access
    'load_chit_group',
    'get_owned_chit_group',
    'get_visible_chit_group',
    'validate_month_number',

    # Group Management
    'create_chit_group',
    'update_chit_group',
    'get_chit_group',
    'list_chit_groups',

    # Membership Management
    'add_member',
    'remove_member',
    'get_group_members',
]
