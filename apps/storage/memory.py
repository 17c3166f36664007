"""
In-process entity store.

Ephemeral: everything lives in dictionaries keyed by id and is lost when the
process exits. Used when no database is reachable and in tests.
"""

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from django.utils import timezone

from .base import EntityStore
from .exceptions import DuplicateRecordError
from .records import (
    Auction,
    Bid,
    ChitGroup,
    ChitGroupMember,
    Notification,
    Payment,
    User,
    UserRole,
)

IMMUTABLE_FIELDS = ('id', 'created_at')


class MemoryStore(EntityStore):
    """Map-based store; one lock serializes id assignment and membership writes."""

    backend_name = 'memory'

    def __init__(self):
        self._lock = threading.RLock()
        self._tables: Dict[type, Dict[int, object]] = {
            User: {},
            ChitGroup: {},
            ChitGroupMember: {},
            Auction: {},
            Bid: {},
            Payment: {},
            Notification: {},
        }
        self._counters: Dict[type, int] = {record_class: 0 for record_class in self._tables}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _next_id(self, record_class) -> int:
        with self._lock:
            self._counters[record_class] += 1
            return self._counters[record_class]

    def _insert(self, record_class, **data):
        with self._lock:
            record = record_class(
                id=self._next_id(record_class),
                created_at=timezone.now(),
                **data
            )
            self._tables[record_class][record.id] = record
            return replace(record)

    def _get(self, record_class, record_id) -> Optional[object]:
        record = self._tables[record_class].get(record_id)
        return replace(record) if record is not None else None

    def _filter(self, record_class, predicate) -> List[object]:
        with self._lock:
            rows = sorted(self._tables[record_class].values(), key=lambda r: r.id)
            return [replace(r) for r in rows if predicate(r)]

    def _update(self, record_class, record_id, changes):
        changes = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        with self._lock:
            record = self._tables[record_class].get(record_id)
            if record is None:
                return None
            updated = replace(record, **changes)
            self._tables[record_class][record_id] = updated
            return replace(updated)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id):
        return self._get(User, user_id)

    def get_user_by_username(self, username):
        matches = self._filter(User, lambda u: u.username == username)
        return matches[0] if matches else None

    def create_user(self, **data):
        if data.get('role') != UserRole.CUSTOMER:
            data['manager_id'] = None
        with self._lock:
            if self.get_user_by_username(data.get('username')) is not None:
                raise DuplicateRecordError('user', ['username'])
            return self._insert(User, **data)

    def update_user(self, user_id, **changes):
        with self._lock:
            username = changes.get('username')
            if username is not None:
                existing = self.get_user_by_username(username)
                if existing is not None and existing.id != user_id:
                    raise DuplicateRecordError('user', ['username'])
            return self._update(User, user_id, changes)

    def get_customers_by_manager(self, manager_id):
        return self._filter(
            User,
            lambda u: u.role == UserRole.CUSTOMER and u.manager_id == manager_id
        )

    def get_all_users(self):
        return self._filter(User, lambda u: True)

    def get_all_customers(self):
        return self._filter(User, lambda u: u.role == UserRole.CUSTOMER)

    # ------------------------------------------------------------------
    # Chit groups
    # ------------------------------------------------------------------

    def create_chit_group(self, **data):
        data.setdefault('is_active', True)
        return self._insert(ChitGroup, **data)

    def get_chit_group(self, chit_group_id):
        return self._get(ChitGroup, chit_group_id)

    def get_chit_groups_by_creator(self, manager_id):
        return self._filter(ChitGroup, lambda g: g.created_by == manager_id)

    def get_chit_groups_by_user(self, user_id):
        with self._lock:
            memberships = self._filter(ChitGroupMember, lambda m: m.user_id == user_id)
            groups = (self.get_chit_group(m.chit_group_id) for m in memberships)
            return [g for g in groups if g is not None]

    def get_all_chit_groups(self):
        return self._filter(ChitGroup, lambda g: True)

    def update_chit_group(self, chit_group_id, **changes):
        return self._update(ChitGroup, chit_group_id, changes)

    # ------------------------------------------------------------------
    # Memberships
    # ------------------------------------------------------------------

    def add_member(self, **data):
        with self._lock:
            if self.get_membership(data.get('chit_group_id'), data.get('user_id')) is not None:
                raise DuplicateRecordError('chit group member', ['chit_group_id', 'user_id'])
            return self._insert(ChitGroupMember, **data)

    def get_membership(self, chit_group_id, user_id):
        matches = self._filter(
            ChitGroupMember,
            lambda m: m.chit_group_id == chit_group_id and m.user_id == user_id
        )
        return matches[0] if matches else None

    def get_chit_group_members(self, chit_group_id):
        return self._filter(ChitGroupMember, lambda m: m.chit_group_id == chit_group_id)

    def remove_member(self, chit_group_id, user_id):
        with self._lock:
            membership = self.get_membership(chit_group_id, user_id)
            if membership is None:
                return False
            del self._tables[ChitGroupMember][membership.id]
            return True

    # ------------------------------------------------------------------
    # Auctions and bids
    # ------------------------------------------------------------------

    def create_auction(self, **data):
        return self._insert(Auction, **data)

    def get_auction(self, auction_id):
        return self._get(Auction, auction_id)

    def get_auctions_by_chit_group(self, chit_group_id):
        return self._filter(Auction, lambda a: a.chit_group_id == chit_group_id)

    def update_auction(self, auction_id, **changes):
        return self._update(Auction, auction_id, changes)

    def update_auction_checked(self, auction_id, check):
        with self._lock:
            current = self._get(Auction, auction_id)
            if current is None:
                return None
            return self._update(Auction, auction_id, check(current))

    def create_bid(self, **data):
        data.setdefault('bid_time', timezone.now())
        return self._insert(Bid, **data)

    def get_bids_by_auction(self, auction_id):
        return self._filter(Bid, lambda b: b.auction_id == auction_id)

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def create_payment(self, **data):
        return self._insert(Payment, **data)

    def get_payment(self, payment_id):
        return self._get(Payment, payment_id)

    def get_payments_by_user(self, user_id):
        return self._filter(Payment, lambda p: p.user_id == user_id)

    def get_payments_by_chit_group(self, chit_group_id):
        return self._filter(Payment, lambda p: p.chit_group_id == chit_group_id)

    def update_payment(self, payment_id, **changes):
        return self._update(Payment, payment_id, changes)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def create_notification(self, **data):
        data['is_read'] = False
        return self._insert(Notification, **data)

    def get_notification(self, notification_id):
        return self._get(Notification, notification_id)

    def get_notifications_by_user(self, user_id):
        return self._filter(Notification, lambda n: n.user_id == user_id)

    def mark_notification_as_read(self, notification_id):
        return self._update(Notification, notification_id, {'is_read': True}) is not None
