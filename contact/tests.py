"""
Tests for contact enquiry submission and retrieval
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

from contact.models import Enquiry
from contact.tasks import send_enquiry_notification


@pytest.fixture
def enquiry_data():
    return {
        'name': 'Asha Verma',
        'email': 'Asha.Verma@Example.com',
        'subject': 'Hostel facilities',
        'message': 'Do first-year students get hostel rooms?\nThanks.',
    }


@pytest.fixture
def sample_enquiry(db):
    return Enquiry.objects.create(
        name='Rohan Das',
        email='rohan@example.com',
        subject='Fee structure',
        message='Please share the fee structure for B.Sc.',
    )


# =============================================================================
# SUBMISSION
# =============================================================================

@pytest.mark.django_db
class TestEnquirySubmission:

    def test_submit_enquiry_success(self, api_client, enquiry_data):
        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['message'] == (
            'Enquiry received and stored successfully! Notification email attempted.'
        )

        enquiry = Enquiry.objects.get(id=response.data['enquiryId'])
        assert response.data['referenceId'] == enquiry.reference_id
        assert enquiry.reference_id.startswith('ENQ-')
        assert enquiry.email == 'asha.verma@example.com'

    def test_submit_sends_notification(self, api_client, enquiry_data):
        api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert len(mail.outbox) == 1
        email = mail.outbox[0]
        assert email.subject == 'New Website Inquiry: Hostel facilities'
        assert email.to == ['admissions@college.example.com']
        assert email.reply_to == ['asha.verma@example.com']
        assert email.from_email == '"Website Inquiry" <website@college.example.com>'
        assert 'Do first-year students get hostel rooms?' in email.body

        html, mimetype = email.alternatives[0]
        assert mimetype == 'text/html'
        assert 'hostel rooms?<br>Thanks.' in html

    @pytest.mark.parametrize('missing', ['name', 'email', 'subject', 'message'])
    def test_missing_field(self, api_client, enquiry_data, missing):
        del enquiry_data[missing]

        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['message'] == 'All fields are required.'
        assert missing in response.data['errors']
        assert Enquiry.objects.count() == 0
        assert len(mail.outbox) == 0

    def test_blank_field_counts_as_missing(self, api_client, enquiry_data):
        enquiry_data['subject'] = '   '

        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'All fields are required.'

    def test_invalid_email(self, api_client, enquiry_data):
        enquiry_data['email'] = 'not-an-email'

        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Validation failed.'
        assert 'email' in response.data['errors']

    def test_message_too_long(self, api_client, enquiry_data):
        enquiry_data['message'] = 'x' * 5001

        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Validation failed.'

    @pytest.mark.parametrize('field, value', [
        ('name', '<b></b>'),
        ('subject', '<i> </i>'),
    ])
    def test_markup_only_field_counts_as_missing(self, api_client, enquiry_data, field, value):
        enquiry_data[field] = value

        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'All fields are required.'
        assert field in response.data['errors']
        assert Enquiry.objects.count() == 0

    def test_html_is_stripped_from_name_and_subject(self, api_client, enquiry_data):
        enquiry_data['name'] = '<b>Asha</b> Verma'
        enquiry_data['subject'] = '<script>alert(1)</script>Hostel'

        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        enquiry = Enquiry.objects.get(id=response.data['enquiryId'])
        assert enquiry.name == 'Asha Verma'
        assert '<script>' not in enquiry.subject

    @override_settings(COLLEGE_EMAIL_RECEIVER='')
    def test_no_receiver_still_stores(self, api_client, enquiry_data):
        response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Enquiry.objects.count() == 1
        assert len(mail.outbox) == 0

    def test_broker_down_still_stores(self, api_client, enquiry_data):
        with patch('contact.views.send_enquiry_notification') as mock_task:
            mock_task.delay.side_effect = OperationalError('broker unreachable')
            response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Enquiry.objects.count() == 1
        mock_task.delay.assert_called_once_with(response.data['enquiryId'])

    def test_database_failure(self, api_client, enquiry_data):
        with patch('contact.serializers.Enquiry.objects.create', side_effect=DatabaseError('down')):
            response = api_client.post('/api/send-enquiry', enquiry_data, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {
            'success': False,
            'message': 'Failed to store enquiry. Please try again later.',
        }
        assert len(mail.outbox) == 0


# =============================================================================
# NOTIFICATION TASK
# =============================================================================

@pytest.mark.django_db
class TestEnquiryNotificationTask:

    def test_unknown_enquiry(self):
        result = send_enquiry_notification.apply(args=[str(uuid.uuid4())]).get()
        assert 'not found' in result
        assert len(mail.outbox) == 0

    @override_settings(COLLEGE_EMAIL_RECEIVER='')
    def test_skipped_without_receiver(self, sample_enquiry):
        result = send_enquiry_notification.apply(args=[str(sample_enquiry.id)]).get()
        assert 'skipped' in result
        assert len(mail.outbox) == 0

    def test_sends_email(self, sample_enquiry):
        result = send_enquiry_notification.apply(args=[str(sample_enquiry.id)]).get()

        assert result == f'Enquiry notification sent for {sample_enquiry.reference_id}'
        assert mail.outbox[0].subject == 'New Website Inquiry: Fee structure'


# =============================================================================
# RETRIEVAL
# =============================================================================

@pytest.mark.django_db
class TestEnquiryRetrieval:

    def test_list_newest_first(self, api_client, sample_enquiry):
        older = Enquiry.objects.create(
            name='Older', email='old@example.com', subject='Old', message='Old message',
            submitted_at=timezone.now() - timedelta(days=2),
        )

        response = api_client.get('/api/enquiries')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['count'] == 2
        assert [item['id'] for item in response.data['data']] == [
            str(sample_enquiry.id), str(older.id)
        ]

    def test_list_empty(self, api_client):
        response = api_client.get('/api/enquiries')
        assert response.data == {'success': True, 'count': 0, 'data': []}

    def test_list_search(self, api_client, sample_enquiry):
        Enquiry.objects.create(
            name='Meera', email='meera@example.com', subject='Library', message='Opening hours?'
        )

        response = api_client.get('/api/enquiries', {'search': 'fee'})

        assert response.data['count'] == 1
        assert response.data['data'][0]['referenceId'] == sample_enquiry.reference_id

    def test_detail(self, api_client, sample_enquiry):
        response = api_client.get(f'/api/enquiries/{sample_enquiry.id}')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['name'] == 'Rohan Das'
        assert data['referenceId'] == sample_enquiry.reference_id
        assert 'submittedAt' in data

    def test_detail_not_found(self, api_client):
        response = api_client.get(f'/api/enquiries/{uuid.uuid4()}')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'success': False, 'message': 'Enquiry not found.'}
