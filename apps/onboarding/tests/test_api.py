import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework import status

from apps.onboarding.models import ApprovalStatus, Merchant, Student


# =============================================================================
# Application Tests
# =============================================================================

@pytest.mark.django_db
class TestApplications:
    """Tests for POST /api/onboarding/{kind}/apply/"""

    def test_student_apply(self, student_client, student_user):
        url = reverse('onboarding:apply-student')
        data = {
            'full_name': 'Asha Rao',
            'college': 'IIT Bombay',
            'city': 'Mumbai',
            'state': 'Maharashtra',
        }
        response = student_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == ApprovalStatus.PENDING
        assert response.data['bb_id'] is None
        assert Student.objects.filter(user=student_user).exists()

    def test_student_apply_with_photo(self, student_client):
        url = reverse('onboarding:apply-student')
        data = {
            'full_name': 'Asha Rao',
            'college': 'IIT Bombay',
            'city': 'Mumbai',
            'state': 'Maharashtra',
            'profile_image': SimpleUploadedFile('me.png', b'\x89PNG' + b'0' * 32, content_type='image/png'),
        }
        response = student_client.post(url, data, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['profile_image_url'].startswith('/media/profiles/')

    def test_student_apply_rejects_non_image(self, student_client, student_user):
        url = reverse('onboarding:apply-student')
        data = {
            'full_name': 'Asha Rao',
            'college': 'IIT Bombay',
            'city': 'Mumbai',
            'state': 'Maharashtra',
            'profile_image': SimpleUploadedFile('me.txt', b'hello', content_type='text/plain'),
        }
        response = student_client.post(url, data, format='multipart')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Student.objects.filter(user=student_user).exists()

    def test_student_apply_twice_conflicts(self, student_client, pending_student):
        url = reverse('onboarding:apply-student')
        data = {
            'full_name': 'Asha Rao',
            'college': 'IIT Bombay',
            'city': 'Mumbai',
            'state': 'Maharashtra',
        }
        response = student_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_merchant_apply(self, merchant_client):
        url = reverse('onboarding:apply-merchant')
        data = {
            'business_name': 'Chai Point',
            'owner_name': 'Ravi',
            'phone': '9999999999',
            'category': 'food',
            'address': '12 MG Road',
            'city': 'Bengaluru',
            'state': 'Karnataka',
            'pin_code': '560001',
        }
        response = merchant_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['bbm_id'] is None

    def test_merchant_apply_invalid_pin(self, merchant_client):
        url = reverse('onboarding:apply-merchant')
        data = {
            'business_name': 'Chai Point',
            'owner_name': 'Ravi',
            'phone': '9999999999',
            'category': 'food',
            'address': '12 MG Road',
            'city': 'Bengaluru',
            'state': 'Karnataka',
            'pin_code': '56',
        }
        response = merchant_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'pin_code' in response.data

    def test_student_cannot_apply_as_merchant(self, student_client):
        url = reverse('onboarding:apply-merchant')
        response = student_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_apply_requires_auth(self, api_client):
        url = reverse('onboarding:apply-student')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_my_profiles(self, student_client, pending_student):
        url = reverse('onboarding:my-profiles')
        response = student_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['student']['status'] == ApprovalStatus.PENDING
        assert response.data['merchant'] is None


# =============================================================================
# Student Pass Tests
# =============================================================================

@pytest.mark.django_db
class TestStudentPass:
    """Tests for GET /api/onboarding/students/me/pass/"""

    def test_pass_png(self, student_client, approved_student):
        url = reverse('onboarding:student-pass')
        response = student_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'image/png'
        assert response.content.startswith(b'\x89PNG')

    def test_pass_unavailable_while_pending(self, student_client, pending_student):
        url = reverse('onboarding:student-pass')
        response = student_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_pass_without_profile(self, student_client):
        url = reverse('onboarding:student-pass')
        response = student_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Admin Review Tests
# =============================================================================

@pytest.mark.django_db
class TestAdminReview:
    """Tests for /api/onboarding/admin/{kind}/"""

    def test_list_requires_admin(self, merchant_client, pending_merchant):
        url = reverse('onboarding:admin-merchant-list')
        response = merchant_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_filtered_by_status(self, admin_client, pending_merchant, approved_student):
        url = reverse('onboarding:admin-merchant-list')
        response = admin_client.get(url, {'status': 'pending'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['business_name'] == 'Chai Point'

        response = admin_client.get(url, {'status': 'approved'})
        assert response.data['count'] == 0

    def test_list_search(self, admin_client, pending_merchant):
        url = reverse('onboarding:admin-merchant-list')

        assert admin_client.get(url, {'search': 'chai'}).data['count'] == 1
        assert admin_client.get(url, {'search': 'dosa'}).data['count'] == 0

    def test_list_invalid_status(self, admin_client):
        url = reverse('onboarding:admin-student-list')
        response = admin_client.get(url, {'status': 'banned'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_approve_merchant(self, admin_client, pending_merchant):
        url = reverse('onboarding:admin-merchant-approve', kwargs={'pk': pending_merchant.pk})
        response = admin_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == ApprovalStatus.APPROVED
        assert response.data['bbm_id'] == 'BBM-000001'

    def test_reject_requires_reason(self, admin_client, pending_merchant):
        url = reverse('onboarding:admin-merchant-reject', kwargs={'pk': pending_merchant.pk})
        response = admin_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_reject_merchant(self, admin_client, pending_merchant):
        url = reverse('onboarding:admin-merchant-reject', kwargs={'pk': pending_merchant.pk})
        response = admin_client.post(url, {'reason': 'Address not verifiable'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        pending_merchant.refresh_from_db()
        assert pending_merchant.status == ApprovalStatus.REJECTED
        assert pending_merchant.rejection_reason == 'Address not verifiable'

    def test_invalid_transition(self, admin_client, pending_student):
        url = reverse('onboarding:admin-student-suspend', kwargs={'pk': pending_student.pk})
        response = admin_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_suspend_and_reinstate(self, admin_client, pending_merchant):
        admin_client.post(reverse('onboarding:admin-merchant-approve', kwargs={'pk': pending_merchant.pk}))
        admin_client.post(reverse('onboarding:admin-merchant-suspend', kwargs={'pk': pending_merchant.pk}))
        response = admin_client.post(
            reverse('onboarding:admin-merchant-reinstate', kwargs={'pk': pending_merchant.pk})
        )

        assert response.status_code == status.HTTP_200_OK
        merchant = Merchant.objects.get(pk=pending_merchant.pk)
        assert merchant.status == ApprovalStatus.APPROVED
        assert merchant.bbm_id == 'BBM-000001'
