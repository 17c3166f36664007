import pytest
from django.urls import reverse
from rest_framework import status


def payment_url(payment_id):
    return reverse('payments:payment-detail', kwargs={'pk': payment_id})


@pytest.fixture
def payment_payload(chit_group, customer):
    return {
        'chit_group_id': chit_group.id,
        'user_id': customer.id,
        'amount': '10000.00',
        'payment_date': '2024-02-05',
        'month_number': 1,
        'status': 'paid',
    }


@pytest.mark.django_db
class TestRecordPayment:
    """Tests for POST /api/payments/"""

    def test_owner_records_payment(self, manager_client, member, chit_group, payment_payload, memory_store):
        response = manager_client.post(reverse('payments:payment-list'), payment_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '10000.00'
        assert response.data['chit_group'] == {'id': chit_group.id, 'name': chit_group.name}
        assert response.data['user'] == {'id': member.id, 'name': member.name}
        assert len(memory_store.get_notifications_by_user(member.id)) == 1

    def test_non_member_payer(self, manager_client, customer, payment_payload, memory_store):
        response = manager_client.post(reverse('payments:payment-list'), payment_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'user_id' in response.data['fields']
        assert memory_store.get_payments_by_user(customer.id) == []
        assert memory_store.get_notifications_by_user(customer.id) == []

    def test_customer_cannot_record(self, customer_client, member, payment_payload):
        response = customer_client.post(reverse('payments:payment-list'), payment_payload, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.parametrize('field,value', [
        ('amount', '0'),
        ('status', 'late'),
        ('month_number', 0),
    ])
    def test_invalid_fields(self, manager_client, member, payment_payload, field, value):
        payment_payload[field] = value

        response = manager_client.post(reverse('payments:payment-list'), payment_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data['fields']

    def test_month_beyond_group_duration(self, manager_client, member, chit_group, payment_payload, memory_store):
        payment_payload['month_number'] = chit_group.duration + 1

        response = manager_client.post(reverse('payments:payment-list'), payment_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'month_number' in response.data['fields']
        assert memory_store.get_payments_by_user(member.id) == []


@pytest.mark.django_db
class TestPaymentAccess:
    """Tests for GET /api/payments/ and /api/payments/{id}/"""

    def test_customer_lists_own_payments(self, customer_client, make_payment, member):
        payment = make_payment(member)

        response = customer_client.get(reverse('payments:payment-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [p['id'] for p in response.data] == [payment.id]

    def test_manager_filters_by_group(self, manager_client, make_payment, member, chit_group):
        payment = make_payment(member)

        response = manager_client.get(reverse('payments:payment-list'), {'chit_group_id': chit_group.id})

        assert response.status_code == status.HTTP_200_OK
        assert [p['id'] for p in response.data] == [payment.id]

    def test_other_manager_filter_is_forbidden(self, other_manager_client, chit_group):
        response = other_manager_client.get(reverse('payments:payment-list'), {'chit_group_id': chit_group.id})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_other_manager_cannot_view(self, other_manager_client, make_payment, member):
        payment = make_payment(member)

        response = other_manager_client.get(payment_url(payment.id))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_payment(self, manager_client):
        response = manager_client.get(payment_url(404))

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestUpdatePayment:
    """Tests for PUT/PATCH /api/payments/{id}/"""

    def test_owner_marks_overdue(self, manager_client, make_payment, member):
        payment = make_payment(member, status='pending')

        response = manager_client.patch(payment_url(payment.id), {'status': 'overdue'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'overdue'

    def test_customer_cannot_update(self, customer_client, make_payment, member):
        payment = make_payment(member)

        response = customer_client.patch(payment_url(payment.id), {'status': 'pending'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
