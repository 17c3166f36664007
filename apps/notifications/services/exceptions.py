"""Domain-specific exceptions for notifications."""

from apps.core.exceptions import NotFoundError


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification does not exist."""
    default_detail = 'Notification not found.'
