import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.transactions.models import Transaction
from apps.transactions.services import record_transaction


@pytest.mark.django_db
class TestRecordTransactionEndpoint:

    def test_merchant_records_redemption(self, merchant_client, student, offer):
        url = reverse('transactions:transaction-list')
        data = {
            'student_bb_id': 'bb-000042',
            'offer_id': str(offer.id),
            'original_amount': '150.00',
            'payment_method': 'online',
        }

        response = merchant_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['student_bb_id'] == 'BB-000042'
        assert Decimal(response.data['discount_amount']) == Decimal('30.00')
        assert response.data['payment_method'] == 'online'

    def test_unknown_student(self, merchant_client, offer):
        url = reverse('transactions:transaction-list')
        data = {'student_bb_id': 'BB-123456', 'offer_id': str(offer.id)}

        response = merchant_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data

    def test_limit_reached(self, merchant_client, merchant, student, offer):
        for _ in range(2):
            record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        url = reverse('transactions:transaction-list')
        data = {'student_bb_id': student.bb_id, 'offer_id': str(offer.id)}

        response = merchant_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'limit' in response.data['error'].lower()

    def test_student_cannot_record(self, student_client, student, offer):
        url = reverse('transactions:transaction-list')
        data = {'student_bb_id': student.bb_id, 'offer_id': str(offer.id)}

        response = student_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_requires_auth(self, api_client):
        response = api_client.post(reverse('transactions:transaction-list'), {}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestLookupEndpoint:

    def test_lookup_returns_eligibility(self, merchant_client, student, offer, flat_offer):
        url = reverse('transactions:transaction-lookup')

        response = merchant_client.post(url, {'bb_id': 'BB-000042'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['full_name'] == 'Asha Rao'
        assert response.data['is_verified'] is True
        assert len(response.data['offers']) == 2
        assert all(item['allowed'] for item in response.data['offers'])

    def test_lookup_unknown(self, merchant_client, merchant):
        url = reverse('transactions:transaction-lookup')

        response = merchant_client.post(url, {'bb_id': 'BB-000000'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestListTransactions:

    def test_scoped_by_role(self, merchant_client, student_client, admin_client, merchant, student, offer):
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        url = reverse('transactions:transaction-list')

        assert merchant_client.get(url).data['count'] == 1
        assert student_client.get(url).data['count'] == 1
        assert admin_client.get(url).data['count'] == 1

    def test_admin_filter_by_bb_id(self, admin_client, merchant, student, offer):
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        url = reverse('transactions:transaction-list')

        response = admin_client.get(url, {'student_bb_id': 'BB-000001'})

        assert response.data['count'] == 0

    def test_other_student_sees_nothing(self, make_client, merchant, student, offer):
        from apps.accounts.models import User

        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)
        other = User.objects.create_user(email='other@example.com', password='x')

        response = make_client(other).get(reverse('transactions:transaction-list'))

        assert response.data['count'] == 0
        assert Transaction.objects.count() == 1


@pytest.mark.django_db
class TestSummaryEndpoint:

    def test_summary(self, merchant_client, merchant, student, offer):
        record_transaction(merchant=merchant, student_bb_id=student.bb_id, offer_id=offer.id)

        response = merchant_client.get(reverse('transactions:transaction-summary'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_transactions'] == 1
        assert Decimal(response.data['total_discount_given']) == Decimal('40.00')
