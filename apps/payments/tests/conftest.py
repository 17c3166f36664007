from datetime import date
from decimal import Decimal

import pytest

from apps.payments.services import record_payment


@pytest.fixture
def member(manager, customer, chit_group, enroll):
    enroll(manager, chit_group, customer)
    return customer


@pytest.fixture
def payment_fields():
    return {
        'amount': Decimal('10000'),
        'payment_date': date(2024, 2, 5),
        'month_number': 1,
        'status': 'paid',
    }


@pytest.fixture
def make_payment(actor, manager, chit_group, payment_fields):
    """Record a payment for ``user`` in ``group`` (default group) as its owner."""
    def _make(user, group=None, owner=None, **overrides):
        return record_payment(
            actor=actor(owner or manager),
            chit_group_id=(group or chit_group).id,
            user_id=user.id,
            **{**payment_fields, **overrides}
        )
    return _make
