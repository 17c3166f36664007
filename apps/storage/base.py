"""
Entity store contract.

Lookups return ``None`` (or an empty list) for unknown ids instead of
raising; deciding which error the caller sees is the job of the services.
The only errors raised here are ``DuplicateRecordError`` for the username
and (chit_group_id, user_id) uniqueness constraints.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .records import (
    Auction,
    Bid,
    ChitGroup,
    ChitGroupMember,
    Notification,
    Payment,
    User,
)


class EntityStore(ABC):
    """Persistence for users, chit groups, memberships, auctions, bids, payments and notifications."""

    backend_name = 'abstract'

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def create_user(self, **data) -> User:
        ...

    @abstractmethod
    def update_user(self, user_id: int, **changes) -> Optional[User]:
        ...

    @abstractmethod
    def get_customers_by_manager(self, manager_id: int) -> List[User]:
        ...

    @abstractmethod
    def get_all_users(self) -> List[User]:
        """Unscoped. Operator diagnostics only."""

    @abstractmethod
    def get_all_customers(self) -> List[User]:
        """Unscoped. Operator diagnostics only, never exposed to a manager."""

    # Chit groups

    @abstractmethod
    def create_chit_group(self, **data) -> ChitGroup:
        ...

    @abstractmethod
    def get_chit_group(self, chit_group_id: int) -> Optional[ChitGroup]:
        ...

    @abstractmethod
    def get_chit_groups_by_creator(self, manager_id: int) -> List[ChitGroup]:
        ...

    @abstractmethod
    def get_chit_groups_by_user(self, user_id: int) -> List[ChitGroup]:
        """Groups the user belongs to, resolved through membership records."""

    @abstractmethod
    def get_all_chit_groups(self) -> List[ChitGroup]:
        """Unscoped. Operator diagnostics only."""

    @abstractmethod
    def update_chit_group(self, chit_group_id: int, **changes) -> Optional[ChitGroup]:
        ...

    # Memberships

    @abstractmethod
    def add_member(self, **data) -> ChitGroupMember:
        ...

    @abstractmethod
    def get_membership(self, chit_group_id: int, user_id: int) -> Optional[ChitGroupMember]:
        ...

    @abstractmethod
    def get_chit_group_members(self, chit_group_id: int) -> List[ChitGroupMember]:
        ...

    @abstractmethod
    def remove_member(self, chit_group_id: int, user_id: int) -> bool:
        ...

    # Auctions

    @abstractmethod
    def create_auction(self, **data) -> Auction:
        ...

    @abstractmethod
    def get_auction(self, auction_id: int) -> Optional[Auction]:
        ...

    @abstractmethod
    def get_auctions_by_chit_group(self, chit_group_id: int) -> List[Auction]:
        ...

    @abstractmethod
    def update_auction(self, auction_id: int, **changes) -> Optional[Auction]:
        ...

    @abstractmethod
    def update_auction_checked(self, auction_id: int, check) -> Optional[Auction]:
        """
        Read, check and write one auction as a single step.

        ``check(current)`` returns the changes to store or raises; no other
        update of the same auction can interleave between the read and the
        write. Returns None for an unknown id.
        """
        ...

    # Bids

    @abstractmethod
    def create_bid(self, **data) -> Bid:
        ...

    @abstractmethod
    def get_bids_by_auction(self, auction_id: int) -> List[Bid]:
        ...

    # Payments

    @abstractmethod
    def create_payment(self, **data) -> Payment:
        ...

    @abstractmethod
    def get_payment(self, payment_id: int) -> Optional[Payment]:
        ...

    @abstractmethod
    def get_payments_by_user(self, user_id: int) -> List[Payment]:
        ...

    @abstractmethod
    def get_payments_by_chit_group(self, chit_group_id: int) -> List[Payment]:
        ...

    @abstractmethod
    def update_payment(self, payment_id: int, **changes) -> Optional[Payment]:
        ...

    # Notifications

    @abstractmethod
    def create_notification(self, **data) -> Notification:
        ...

    @abstractmethod
    def get_notification(self, notification_id: int) -> Optional[Notification]:
        ...

    @abstractmethod
    def get_notifications_by_user(self, user_id: int) -> List[Notification]:
        ...

    @abstractmethod
    def mark_notification_as_read(self, notification_id: int) -> bool:
        ...
