import pytest
from datetime import date
from decimal import Decimal

from apps.storage.database import DatabaseStore
from apps.storage.memory import MemoryStore
from apps.storage.records import UserRole


@pytest.fixture(params=['memory', 'database'])
def store(request):
    """Run the test against both store backends."""
    if request.param == 'database':
        request.getfixturevalue('db')
        return DatabaseStore()
    return MemoryStore()


@pytest.fixture
def manager(store):
    return store.create_user(
        username='manager',
        password='hash.salt',
        phone='9000000001',
        name='Manager One',
        role=UserRole.MANAGER,
        is_first_login=False,
    )


@pytest.fixture
def customer(store, manager):
    return store.create_user(
        username='customer',
        password='hash.salt',
        phone='9000000002',
        name='Customer One',
        role=UserRole.CUSTOMER,
        manager_id=manager.id,
    )


@pytest.fixture
def chit_group(store, manager):
    return store.create_chit_group(
        name='Gold Circle',
        value=100000,
        duration=10,
        members_count=5,
        start_date=date(2024, 1, 1),
        created_by=manager.id,
    )


@pytest.fixture
def auction(store, chit_group):
    return store.create_auction(
        chit_group_id=chit_group.id,
        auction_date=date(2024, 2, 1),
        month_number=1,
    )


@pytest.fixture
def payment_data(chit_group, customer):
    return {
        'chit_group_id': chit_group.id,
        'user_id': customer.id,
        'amount': Decimal('10000.00'),
        'payment_date': date(2024, 1, 15),
        'month_number': 1,
        'status': 'paid',
    }
