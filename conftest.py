from datetime import date

import pytest
from rest_framework.test import APIClient

from apps.accounts.authentication import issue_tokens
from apps.accounts.services import create_customer, register_user
from apps.chitgroups.services import add_member, create_chit_group
from apps.core.actor import ActorContext
from apps.storage import MemoryStore, reset_store, set_store

MANAGER_PASSWORD = 'ManagerPass123'
CUSTOMER_PASSWORD = 'TempPass123'


@pytest.fixture(autouse=True)
def memory_store():
    """Give every test its own empty in-memory entity store."""
    store = MemoryStore()
    set_store(store)
    yield store
    reset_store()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_manager():
    """Factory registering a manager account."""
    def _make(username='manager'):
        return register_user(
            actor=None,
            username=username,
            password=MANAGER_PASSWORD,
            phone='9876543210',
            name=f'Manager {username}',
            role='manager',
        )
    return _make


@pytest.fixture
def manager(make_manager):
    return make_manager()


@pytest.fixture
def other_manager(make_manager):
    return make_manager('other-manager')


@pytest.fixture
def make_customer(manager):
    """Factory creating a customer, managed by ``manager`` unless told otherwise."""
    def _make(username='customer', managed_by=None):
        return create_customer(
            actor=ActorContext.from_user(managed_by or manager),
            username=username,
            password=CUSTOMER_PASSWORD,
            phone='9123456780',
            name=f'Customer {username}',
        )
    return _make


@pytest.fixture
def customer(make_customer):
    return make_customer()


@pytest.fixture
def actor():
    """Build the ActorContext a request by ``user`` would carry."""
    return ActorContext.from_user


@pytest.fixture
def client_for():
    """Factory returning an API client authenticated with a bearer token."""
    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(user)['access']}")
        return client
    return _client


@pytest.fixture
def manager_client(client_for, manager):
    return client_for(manager)


@pytest.fixture
def other_manager_client(client_for, other_manager):
    return client_for(other_manager)


@pytest.fixture
def customer_client(client_for, customer):
    return client_for(customer)


@pytest.fixture
def make_chit_group(actor):
    """Factory creating a chit group owned by ``owner``."""
    def _make(owner, name='Monthly Savers', value=100000):
        return create_chit_group(
            actor=actor(owner),
            name=name,
            value=value,
            duration=10,
            members_count=5,
            start_date=date(2024, 1, 1),
        )
    return _make


@pytest.fixture
def chit_group(make_chit_group, manager):
    return make_chit_group(manager)


@pytest.fixture
def enroll(actor):
    """Enroll ``user`` in ``group`` on behalf of the group's owner."""
    def _enroll(owner, group, user):
        return add_member(actor=actor(owner), chit_group_id=group.id, user_id=user.id)
    return _enroll
