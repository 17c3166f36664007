import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.accounts.services import verify_password

MANAGER_PASSWORD = 'ManagerPass123'
CUSTOMER_PASSWORD = 'TempPass123'


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/register/"""

    def test_anonymous_registers_manager_and_is_logged_in(self, api_client, registration_data):
        response = api_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['role'] == 'manager'
        assert 'password' not in response.data['user']
        assert 'access' in response.data['tokens']

        # Session is bound to the new manager
        me = api_client.get(reverse('accounts:current-user'))
        assert me.status_code == status.HTTP_200_OK
        assert me.data['username'] == 'newmanager'

    def test_anonymous_cannot_register_customer(self, api_client, registration_data):
        registration_data['role'] = 'customer'

        response = api_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['kind'] == 'forbidden'

    def test_manager_registers_customer(self, manager_client, manager, registration_data):
        registration_data.update(username='cust1', role='customer')

        response = manager_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['manager_id'] == manager.id
        assert response.data['user']['is_first_login'] is True
        assert 'tokens' not in response.data

    def test_manager_cannot_register_manager(self, manager_client, registration_data):
        response = manager_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_duplicate_username(self, api_client, manager, registration_data):
        registration_data['username'] = manager.username

        response = api_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['kind'] == 'conflict'

    def test_invalid_fields_reported(self, api_client, registration_data):
        registration_data.update(username='ab', phone='123')

        response = api_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'invalid'
        assert 'username' in response.data['fields']
        assert 'phone' in response.data['fields']

    @pytest.mark.parametrize('password', ['Ab1', 'password', '98765432101'])
    def test_weak_password_rejected(self, api_client, registration_data, password):
        registration_data.update(password=password, password_confirm=password)

        response = api_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data['fields']

    def test_password_mismatch(self, api_client, registration_data):
        registration_data['password_confirm'] = 'Different123'

        response = api_client.post(reverse('accounts:register'), registration_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data['fields']


# =============================================================================
# Login / Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/login/ and /api/logout/"""

    def test_login_success(self, api_client, manager):
        response = api_client.post(
            reverse('accounts:login'),
            {'username': 'manager', 'password': MANAGER_PASSWORD},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['id'] == manager.id
        assert 'refresh' in response.data['tokens']

    def test_login_wrong_password(self, api_client, manager):
        response = api_client.post(
            reverse('accounts:login'),
            {'username': 'manager', 'password': 'nope'},
            format='json',
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['kind'] == 'unauthenticated'

    def test_session_identity_and_logout(self, api_client, manager):
        api_client.post(
            reverse('accounts:login'),
            {'username': 'manager', 'password': MANAGER_PASSWORD},
            format='json',
        )
        assert api_client.get(reverse('accounts:current-user')).status_code == status.HTTP_200_OK

        response = api_client.post(reverse('accounts:logout'))

        assert response.status_code == status.HTTP_200_OK
        assert api_client.get(reverse('accounts:current-user')).status_code == status.HTTP_401_UNAUTHORIZED

    def test_session_of_vanished_user_is_unauthenticated(self, api_client, manager, memory_store):
        api_client.post(
            reverse('accounts:login'),
            {'username': 'manager', 'password': MANAGER_PASSWORD},
            format='json',
        )
        memory_store._tables[type(manager)].pop(manager.id)

        response = api_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_of_vanished_user_is_rejected(self, manager_client, manager, memory_store):
        memory_store._tables[type(manager)].pop(manager.id)

        response = manager_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestTokenRefresh:
    """Tests for POST /api/token/refresh/"""

    def _login(self, api_client):
        response = api_client.post(
            reverse('accounts:login'),
            {'username': 'manager', 'password': MANAGER_PASSWORD},
            format='json',
        )
        return response.data['tokens']

    def test_refresh_from_login_issues_working_access_token(self, api_client, manager):
        tokens = self._login(api_client)

        response = APIClient().post(reverse('token_refresh'), {'refresh': tokens['refresh']}, format='json')

        assert response.status_code == status.HTTP_200_OK
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        me = client.get(reverse('accounts:current-user'))
        assert me.status_code == status.HTTP_200_OK
        assert me.data['id'] == manager.id

    def test_refresh_for_vanished_user(self, api_client, manager, memory_store):
        tokens = self._login(api_client)
        memory_store._tables[type(manager)].pop(manager.id)

        response = APIClient().post(reverse('token_refresh'), {'refresh': tokens['refresh']}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['kind'] == 'unauthenticated'

    def test_garbage_refresh_token(self, api_client):
        response = api_client.post(reverse('token_refresh'), {'refresh': 'not-a-token'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Current user / Password reset
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/user/"""

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['kind'] == 'unauthenticated'

    def test_returns_profile_without_password(self, customer_client, customer):
        response = customer_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == customer.id
        assert response.data['role'] == 'customer'
        assert 'password' not in response.data


@pytest.mark.django_db
class TestPasswordReset:
    """Tests for POST /api/users/{id}/reset-password/"""

    def test_first_login_reset(self, customer_client, customer, memory_store):
        url = reverse('accounts:reset-password', kwargs={'pk': customer.id})

        response = customer_client.post(url, {
            'current_password': CUSTOMER_PASSWORD,
            'new_password': 'NewSecret123',
            'confirm_password': 'NewSecret123',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['is_first_login'] is False
        assert verify_password('NewSecret123', memory_store.get_user(customer.id).password)

    def test_wrong_current_password(self, customer_client, customer):
        url = reverse('accounts:reset-password', kwargs={'pk': customer.id})

        response = customer_client.post(url, {
            'current_password': 'wrong',
            'new_password': 'NewSecret123',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['fields'] == {'current_password': ['Current password is incorrect']}

    def test_weak_new_password_rejected(self, customer_client, customer, memory_store):
        url = reverse('accounts:reset-password', kwargs={'pk': customer.id})

        response = customer_client.post(url, {
            'current_password': CUSTOMER_PASSWORD,
            'new_password': '123456789',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'new_password' in response.data['fields']
        assert verify_password(CUSTOMER_PASSWORD, memory_store.get_user(customer.id).password)

    def test_cannot_reset_other_user(self, manager_client, customer):
        url = reverse('accounts:reset-password', kwargs={'pk': customer.id})

        response = manager_client.post(url, {
            'current_password': CUSTOMER_PASSWORD,
            'new_password': 'NewSecret123',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Customers
# =============================================================================

@pytest.mark.django_db
class TestCustomers:
    """Tests for GET/POST /api/customers/"""

    def test_manager_lists_only_own_customers(self, manager_client, other_manager, make_customer):
        mine = make_customer('mine')
        make_customer('theirs', managed_by=other_manager)

        response = manager_client.get(reverse('accounts:customers'))

        assert response.status_code == status.HTTP_200_OK
        assert [c['id'] for c in response.data] == [mine.id]

    def test_manager_creates_customer(self, manager_client, manager, customer_data):
        response = manager_client.post(reverse('accounts:customers'), customer_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['role'] == 'customer'
        assert response.data['manager_id'] == manager.id
        assert response.data['is_first_login'] is True

    def test_customer_cannot_list_customers(self, customer_client):
        response = customer_client.get(reverse('accounts:customers'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['kind'] == 'forbidden'

    def test_anonymous_cannot_list_customers(self, api_client):
        response = api_client.get(reverse('accounts:customers'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
