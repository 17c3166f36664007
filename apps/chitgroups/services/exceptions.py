"""
Domain-specific exceptions for chit groups.

Each one is a kind from the shared error taxonomy, so views can let them
propagate to the exception handler.
"""

from apps.core.exceptions import ConflictError, ForbiddenError, NotFoundError


class ChitGroupNotFoundError(NotFoundError):
    """Raised when a chit group does not exist."""
    default_detail = 'Chit group not found.'


class MemberUserNotFoundError(NotFoundError):
    """Raised when the user to enroll or remove does not exist."""
    default_detail = 'User not found.'


class MembershipNotFoundError(NotFoundError):
    """Raised when removing a membership that does not exist."""
    default_detail = 'User is not a member of this chit group.'


class AlreadyMemberError(ConflictError):
    """Raised when a user is already enrolled in the group."""
    default_detail = 'User is already a member of this chit group.'


class NotGroupOwnerError(ForbiddenError):
    """Raised when a manager acts on a group created by another manager."""
    default_detail = "You can only manage chit groups you've created."
