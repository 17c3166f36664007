"""Customer listing, always scoped to the acting manager."""

from typing import List

from apps.core.guards import deny, is_manager
from apps.storage import get_store
from apps.storage.records import User


def list_customers(*, actor) -> List[User]:
    """Customers whose manager is the acting manager."""
    if not is_manager(actor):
        deny(actor, None, "Only managers can list customers")
    return get_store().get_customers_by_manager(actor.user_id)
