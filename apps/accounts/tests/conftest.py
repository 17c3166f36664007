import pytest


@pytest.fixture
def registration_data():
    """Valid payload for registering an account."""
    return {
        'username': 'newmanager',
        'password': 'SecurePass123',
        'password_confirm': 'SecurePass123',
        'phone': '9988776655',
        'name': 'New Manager',
        'email': 'new@example.com',
        'role': 'manager',
    }


@pytest.fixture
def customer_data():
    """Valid payload for creating a customer."""
    return {
        'username': 'ravi',
        'password': 'Temp123456',
        'phone': '9000012345',
        'name': 'Ravi Kumar',
    }
