"""Services for notifications."""

from .exceptions import NotificationNotFoundError
from .notification_delivery import (
    notify_user,
    list_notifications,
    mark_notification_read,
)

__all__ = [
    # Exceptions
    'NotificationNotFoundError',
    # Services
    'notify_user',
    'list_notifications',
    'mark_notification_read',
]
