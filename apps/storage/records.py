# ==========================================
# apps/storage/records.py
# ==========================================

"""
Backend-neutral entity records.

Both store implementations return these dataclasses, never ORM instances,
so services and serializers work the same against either backend.
"""

from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


class UserRole:
    MANAGER = 'manager'
    CUSTOMER = 'customer'

    choices = [(MANAGER, 'Manager'), (CUSTOMER, 'Customer')]
    values = [MANAGER, CUSTOMER]


class AuctionStatus:
    SCHEDULED = 'scheduled'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    choices = [(SCHEDULED, 'Scheduled'), (COMPLETED, 'Completed'), (CANCELLED, 'Cancelled')]
    values = [SCHEDULED, COMPLETED, CANCELLED]
    terminal = [COMPLETED, CANCELLED]


class PaymentStatus:
    PAID = 'paid'
    PENDING = 'pending'
    OVERDUE = 'overdue'

    choices = [(PAID, 'Paid'), (PENDING, 'Pending'), (OVERDUE, 'Overdue')]
    values = [PAID, PENDING, OVERDUE]


class NotificationType:
    PAYMENT = 'payment'
    AUCTION = 'auction'
    GENERAL = 'general'

    choices = [(PAYMENT, 'Payment'), (AUCTION, 'Auction'), (GENERAL, 'General')]
    values = [PAYMENT, AUCTION, GENERAL]


@dataclass
class User:
    id: int
    username: str
    password: str
    phone: str
    name: str
    role: str
    email: Optional[str] = None
    is_first_login: bool = True
    manager_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_manager(self):
        return self.role == UserRole.MANAGER

    @property
    def is_customer(self):
        return self.role == UserRole.CUSTOMER


@dataclass
class ChitGroup:
    id: int
    name: str
    value: int
    duration: int
    members_count: int
    start_date: date
    created_by: int
    is_active: bool = True
    created_at: Optional[datetime] = None


@dataclass
class ChitGroupMember:
    id: int
    chit_group_id: int
    user_id: int
    join_date: date
    created_at: Optional[datetime] = None


@dataclass
class Auction:
    id: int
    chit_group_id: int
    auction_date: date
    month_number: int
    status: str = AuctionStatus.SCHEDULED
    winner_user_id: Optional[int] = None
    winning_bid: Optional[Decimal] = None
    created_at: Optional[datetime] = None


@dataclass
class Bid:
    id: int
    auction_id: int
    user_id: int
    bid_amount: Decimal
    bid_time: Optional[datetime] = None
    created_at: Optional[datetime] = None


@dataclass
class Payment:
    id: int
    chit_group_id: int
    user_id: int
    amount: Decimal
    payment_date: date
    month_number: int
    status: str
    created_at: Optional[datetime] = None


@dataclass
class Notification:
    id: int
    user_id: int
    message: str
    type: str = NotificationType.GENERAL
    is_read: bool = False
    created_at: Optional[datetime] = None


def field_names(record_class):
    """Names of the fields declared by a record dataclass."""
    return [f.name for f in fields(record_class)]
