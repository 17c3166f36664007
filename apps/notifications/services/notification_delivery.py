"""
Notification delivery.

Notifications are advisory: the write that triggers one is the
authoritative record, so a failed notification is logged and dropped
instead of failing the caller.
"""

import logging
from typing import List, Optional

from apps.core.guards import deny, owns_notification
from apps.storage import get_store
from apps.storage.records import Notification, NotificationType

from .exceptions import NotificationNotFoundError

logger = logging.getLogger(__name__)


def notify_user(
    *,
    user_id: int,
    message: str,
    type: str = NotificationType.GENERAL
) -> Optional[Notification]:
    """Best-effort notification; returns None if it could not be stored."""
    try:
        return get_store().create_notification(user_id=user_id, message=message, type=type)
    except Exception:
        logger.exception("Failed to create %s notification for user #%s", type, user_id)
        return None


def list_notifications(*, actor) -> List[Notification]:
    return get_store().get_notifications_by_user(actor.user_id)


def mark_notification_read(*, actor, notification_id: int) -> Notification:
    """
    Mark one of the actor's notifications as read.

    Raises:
        NotificationNotFoundError: If notification doesn't exist
        ForbiddenError: If it is addressed to someone else
    """
    store = get_store()
    notification = store.get_notification(notification_id)
    if notification is None:
        raise NotificationNotFoundError(f"Notification with ID {notification_id} not found")

    if not owns_notification(actor, notification):
        deny(actor, notification, "You can only read your own notifications")

    store.mark_notification_as_read(notification_id)
    return store.get_notification(notification_id)
