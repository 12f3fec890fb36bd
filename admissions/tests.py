"""
Tests for admission application submission and retrieval
"""
import uuid
from datetime import timedelta
from unittest.mock import patch

import pytest
from django.core import mail
from django.db import DatabaseError
from django.test import override_settings
from django.utils import timezone
from kombu.exceptions import OperationalError
from rest_framework import status

from admissions.models import Application
from admissions.tasks import send_application_notification


@pytest.fixture
def application_data():
    return {
        'full_name': 'Kavya Nair',
        'email': 'Kavya.Nair@Example.com',
        'phone': '+919876543210',
        'date_of_birth': '2006-04-12',
        'address': '12 MG Road, Kochi',
        'course': 'B.Sc Physics',
        'qualification': 'Higher Secondary (Science)',
        'message': 'I would like to apply for the hostel as well.',
    }


@pytest.fixture
def make_application(db):
    def _make(**overrides):
        fields = {
            'full_name': 'Arjun Menon',
            'email': 'arjun@example.com',
            'phone': '+919812345678',
            'course': 'B.Com',
            'qualification': 'Higher Secondary (Commerce)',
        }
        fields.update(overrides)
        return Application.objects.create(**fields)
    return _make


# =============================================================================
# SUBMISSION
# =============================================================================

@pytest.mark.django_db
class TestApplicationSubmission:

    @pytest.mark.parametrize('url', ['/api/submit-application', '/api/applications'])
    def test_submit_application_success(self, api_client, application_data, url):
        response = api_client.post(url, application_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['message'] == 'Application received successfully! We will contact you soon.'

        application = Application.objects.get(id=response.data['applicationId'])
        assert response.data['referenceId'] == application.reference_id
        assert application.reference_id.startswith('APP-')
        assert application.email == 'kavya.nair@example.com'
        assert application.status == 'pending'
        assert str(application.date_of_birth) == '2006-04-12'

    def test_optional_fields_may_be_omitted(self, api_client, application_data):
        for field in ('date_of_birth', 'address', 'message'):
            del application_data[field]

        response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        application = Application.objects.get(id=response.data['applicationId'])
        assert application.date_of_birth is None
        assert application.address == ''

    @pytest.mark.parametrize('url', ['/api/submit-application', '/api/applications'])
    def test_markup_only_name_counts_as_missing(self, api_client, application_data, url):
        application_data['full_name'] = '<p></p>'

        response = api_client.post(url, application_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'All fields are required.'
        assert 'full_name' in response.data['errors']
        assert Application.objects.count() == 0

    def test_markup_only_message_is_allowed(self, api_client, application_data):
        application_data['message'] = '<br>'

        response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Application.objects.get(id=response.data['applicationId']).message == ''

    def test_status_cannot_be_set_by_applicant(self, api_client, application_data):
        application_data['status'] = 'accepted'

        response = api_client.post('/api/submit-application', application_data, format='json')

        assert Application.objects.get(id=response.data['applicationId']).status == 'pending'

    def test_submit_sends_notification(self, api_client, application_data):
        api_client.post('/api/submit-application', application_data, format='json')

        assert len(mail.outbox) == 1
        email = mail.outbox[0]
        assert email.subject == 'New Admission Application: Kavya Nair - B.Sc Physics'
        assert email.to == ['admissions@college.example.com']
        assert email.reply_to == ['kavya.nair@example.com']
        assert 'Higher Secondary (Science)' in email.body

    @pytest.mark.parametrize('missing', ['full_name', 'email', 'phone', 'course', 'qualification'])
    def test_missing_required_field(self, api_client, application_data, missing):
        del application_data[missing]

        response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'All fields are required.'
        assert missing in response.data['errors']
        assert Application.objects.count() == 0

    def test_invalid_phone(self, api_client, application_data):
        application_data['phone'] = 'call me maybe'

        response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Validation failed.'
        assert 'phone' in response.data['errors']

    def test_invalid_date_of_birth(self, api_client, application_data):
        application_data['date_of_birth'] = '12/04/2006'

        response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'date_of_birth' in response.data['errors']

    @override_settings(COLLEGE_EMAIL_RECEIVER='')
    def test_no_receiver_still_stores(self, api_client, application_data):
        response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert len(mail.outbox) == 0

    def test_broker_down_still_stores(self, api_client, application_data):
        with patch('admissions.views.send_application_notification') as mock_task:
            mock_task.delay.side_effect = OperationalError('broker unreachable')
            response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Application.objects.count() == 1

    def test_database_failure(self, api_client, application_data):
        with patch.object(Application.objects, 'create', side_effect=DatabaseError('down')):
            response = api_client.post('/api/submit-application', application_data, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['success'] is False
        assert len(mail.outbox) == 0


@pytest.mark.django_db
class TestApplicationNotificationTask:

    def test_unknown_application(self):
        result = send_application_notification.apply(args=[str(uuid.uuid4())]).get()
        assert 'not found' in result

    def test_sends_email(self, make_application):
        application = make_application()

        result = send_application_notification.apply(args=[str(application.id)]).get()

        assert result == f'Application notification sent for {application.reference_id}'
        assert mail.outbox[0].reply_to == ['arjun@example.com']


# =============================================================================
# RETRIEVAL
# =============================================================================

@pytest.mark.django_db
class TestApplicationRetrieval:

    def test_list_newest_first(self, api_client, make_application):
        older = make_application(submitted_at=timezone.now() - timedelta(days=3))
        newer = make_application(full_name='Diya Iyer')

        response = api_client.get('/api/applications')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2
        assert [item['id'] for item in response.data['data']] == [str(newer.id), str(older.id)]

    def test_filter_by_course_and_status(self, api_client, make_application):
        make_application(course='B.Com')
        physics = make_application(course='B.Sc Physics')
        make_application(course='B.Sc Physics', status='rejected')

        response = api_client.get('/api/applications', {'course': 'B.Sc Physics', 'status': 'pending'})

        assert response.data['count'] == 1
        assert response.data['data'][0]['id'] == str(physics.id)

    def test_search(self, api_client, make_application):
        make_application(full_name='Diya Iyer')
        make_application()

        response = api_client.get('/api/applications', {'search': 'diya'})

        assert response.data['count'] == 1

    def test_detail(self, api_client, make_application):
        application = make_application(status='under_review')

        response = api_client.get(f'/api/applications/{application.id}')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['phone'] == '+919812345678'
        assert data['statusDisplay'] == 'Under Review'
        assert data['referenceId'] == application.reference_id

    def test_detail_not_found(self, api_client):
        response = api_client.get(f'/api/applications/{uuid.uuid4()}')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'Application not found.'
