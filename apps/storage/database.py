"""
Durable entity store backed by the Django ORM.

Ids come from the ``counters`` table rather than database sequences so
both backends hand out the same per-entity numbering.
"""

from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from . import models
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
    field_names,
)

IMMUTABLE_FIELDS = ('id', 'created_at')

# Record field -> model attribute, where they differ
COLUMN_ALIASES = {
    ChitGroup: {'created_by': 'created_by_id'},
}


def next_sequence(name: str) -> int:
    """
    Atomically increment and return the counter for ``name``.

    The UPDATE takes a row lock held until the transaction commits, so
    concurrent callers never read the same value. The row is created on
    first use; a concurrent creator losing the race falls back to the UPDATE.
    """
    with transaction.atomic():
        updated = models.Counter.objects.filter(model=name).update(count=F('count') + 1)
        if not updated:
            try:
                with transaction.atomic():
                    models.Counter.objects.create(model=name, count=1)
                return 1
            except IntegrityError:
                models.Counter.objects.filter(model=name).update(count=F('count') + 1)
        return models.Counter.objects.values_list('count', flat=True).get(model=name)


class DatabaseStore(EntityStore):
    """ORM-backed store. Uniqueness is enforced by database constraints."""

    backend_name = 'database'

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_columns(record_class, data):
        aliases = COLUMN_ALIASES.get(record_class, {})
        return {aliases.get(key, key): value for key, value in data.items()}

    @staticmethod
    def _to_record(record_class, obj):
        if obj is None:
            return None
        aliases = COLUMN_ALIASES.get(record_class, {})
        return record_class(**{
            name: getattr(obj, aliases.get(name, name))
            for name in field_names(record_class)
        })

    def _to_records(self, record_class, queryset):
        return [self._to_record(record_class, obj) for obj in queryset.order_by('id')]

    def _insert(self, model, record_class, **data):
        with transaction.atomic():
            obj = model.objects.create(
                id=next_sequence(record_class.__name__),
                created_at=timezone.now(),
                **self._to_columns(record_class, data)
            )
        return self._to_record(record_class, obj)

    def _get(self, model, record_class, pk) -> Optional[object]:
        return self._to_record(record_class, model.objects.filter(pk=pk).first())

    def _update(self, model, record_class, pk, changes):
        changes = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        with transaction.atomic():
            if changes:
                model.objects.filter(pk=pk).update(**self._to_columns(record_class, changes))
            obj = model.objects.filter(pk=pk).first()
        return self._to_record(record_class, obj)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id):
        return self._get(models.UserAccount, User, user_id)

    def get_user_by_username(self, username):
        obj = models.UserAccount.objects.filter(username=username).first()
        return self._to_record(User, obj)

    def create_user(self, **data):
        if data.get('role') != UserRole.CUSTOMER:
            data['manager_id'] = None
        if models.UserAccount.objects.filter(username=data.get('username')).exists():
            raise DuplicateRecordError('user', ['username'])
        try:
            return self._insert(models.UserAccount, User, **data)
        except IntegrityError:
            if models.UserAccount.objects.filter(username=data.get('username')).exists():
                raise DuplicateRecordError('user', ['username'])
            raise

    def update_user(self, user_id, **changes):
        try:
            return self._update(models.UserAccount, User, user_id, changes)
        except IntegrityError:
            if 'username' in changes:
                raise DuplicateRecordError('user', ['username'])
            raise

    def get_customers_by_manager(self, manager_id):
        return self._to_records(
            User,
            models.UserAccount.objects.filter(role=UserRole.CUSTOMER, manager_id=manager_id)
        )

    def get_all_users(self):
        return self._to_records(User, models.UserAccount.objects.all())

    def get_all_customers(self):
        return self._to_records(User, models.UserAccount.objects.filter(role=UserRole.CUSTOMER))

    # ------------------------------------------------------------------
    # Chit groups
    # ------------------------------------------------------------------

    def create_chit_group(self, **data):
        data.setdefault('is_active', True)
        return self._insert(models.ChitGroup, ChitGroup, **data)

    def get_chit_group(self, chit_group_id):
        return self._get(models.ChitGroup, ChitGroup, chit_group_id)

    def get_chit_groups_by_creator(self, manager_id):
        return self._to_records(ChitGroup, models.ChitGroup.objects.filter(created_by_id=manager_id))

    def get_chit_groups_by_user(self, user_id):
        group_ids = list(
            models.ChitGroupMember.objects
            .filter(user_id=user_id)
            .values_list('chit_group_id', flat=True)
        )
        return self._to_records(ChitGroup, models.ChitGroup.objects.filter(id__in=group_ids))

    def get_all_chit_groups(self):
        return self._to_records(ChitGroup, models.ChitGroup.objects.all())

    def update_chit_group(self, chit_group_id, **changes):
        return self._update(models.ChitGroup, ChitGroup, chit_group_id, changes)

    # ------------------------------------------------------------------
    # Memberships
    # ------------------------------------------------------------------

    def add_member(self, **data):
        chit_group_id = data.get('chit_group_id')
        user_id = data.get('user_id')
        try:
            return self._insert(models.ChitGroupMember, ChitGroupMember, **data)
        except IntegrityError:
            # Unique constraint on (chit_group, user)
            if self.get_membership(chit_group_id, user_id) is not None:
                raise DuplicateRecordError('chit group member', ['chit_group_id', 'user_id'])
            raise

    def get_membership(self, chit_group_id, user_id):
        obj = (
            models.ChitGroupMember.objects
            .filter(chit_group_id=chit_group_id, user_id=user_id)
            .first()
        )
        return self._to_record(ChitGroupMember, obj)

    def get_chit_group_members(self, chit_group_id):
        return self._to_records(
            ChitGroupMember,
            models.ChitGroupMember.objects.filter(chit_group_id=chit_group_id)
        )

    def remove_member(self, chit_group_id, user_id):
        deleted, _ = (
            models.ChitGroupMember.objects
            .filter(chit_group_id=chit_group_id, user_id=user_id)
            .delete()
        )
        return deleted > 0

    # ------------------------------------------------------------------
    # Auctions and bids
    # ------------------------------------------------------------------

    def create_auction(self, **data):
        return self._insert(models.Auction, Auction, **data)

    def get_auction(self, auction_id):
        return self._get(models.Auction, Auction, auction_id)

    def get_auctions_by_chit_group(self, chit_group_id):
        return self._to_records(Auction, models.Auction.objects.filter(chit_group_id=chit_group_id))

    def update_auction(self, auction_id, **changes):
        return self._update(models.Auction, Auction, auction_id, changes)

    def update_auction_checked(self, auction_id, check):
        with transaction.atomic():
            # Row lock held until commit; concurrent updates queue here
            obj = models.Auction.objects.select_for_update().filter(pk=auction_id).first()
            if obj is None:
                return None
            return self._update(models.Auction, Auction, auction_id, check(self._to_record(Auction, obj)))

    def create_bid(self, **data):
        data.setdefault('bid_time', timezone.now())
        return self._insert(models.Bid, Bid, **data)

    def get_bids_by_auction(self, auction_id):
        return self._to_records(Bid, models.Bid.objects.filter(auction_id=auction_id))

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def create_payment(self, **data):
        return self._insert(models.Payment, Payment, **data)

    def get_payment(self, payment_id):
        return self._get(models.Payment, Payment, payment_id)

    def get_payments_by_user(self, user_id):
        return self._to_records(Payment, models.Payment.objects.filter(user_id=user_id))

    def get_payments_by_chit_group(self, chit_group_id):
        return self._to_records(Payment, models.Payment.objects.filter(chit_group_id=chit_group_id))

    def update_payment(self, payment_id, **changes):
        return self._update(models.Payment, Payment, payment_id, changes)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def create_notification(self, **data):
        data['is_read'] = False
        return self._insert(models.Notification, Notification, **data)

    def get_notification(self, notification_id):
        return self._get(models.Notification, Notification, notification_id)

    def get_notifications_by_user(self, user_id):
        return self._to_records(Notification, models.Notification.objects.filter(user_id=user_id))

    def mark_notification_as_read(self, notification_id):
        return models.Notification.objects.filter(pk=notification_id).update(is_read=True) > 0
