"""
Integration tests for origin admission (CORS)

Tests cover:
1. Allow-list matching with trailing-slash normalization
2. Absent Origin admitted
3. Preflight answered before any view (204 admitted, 403 rejected)
4. Rejected origins served without CORS headers
5. Malformed allow-list entries refused at start-up
6. Decision logging

Run with: pytest tests/integration/test_origin_admission.py -v
"""
import logging

import pytest
from django.http import HttpResponse
from django.test import override_settings
from rest_framework import status

from core.cors import (
    OriginAdmissionFilter,
    OriginRejected,
    normalize_origin,
    validate_allowed_origin,
)
from core.exceptions import InvalidConfiguration
from core.middleware import OriginAdmissionMiddleware


ALLOWED = 'https://college.example.com'
EVIL = 'https://evil.com'


@pytest.fixture
def origin_filter():
    return OriginAdmissionFilter(
        ['https://example.com'],
        allow_methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['Content-Type'],
        allow_credentials=True,
        max_age=600,
    )


@pytest.fixture
def view_calls():
    return []


@pytest.fixture
def middleware(view_calls):
    def get_response(request):
        view_calls.append(request.path)
        return HttpResponse('ok')
    return OriginAdmissionMiddleware(get_response)


# =============================================================================
# FILTER
# =============================================================================

class TestOriginAdmissionFilter:

    def test_trailing_slash_origin_matches(self, origin_filter):
        assert origin_filter.check('https://example.com/') == 'https://example.com'

    def test_exact_origin_matches(self, origin_filter):
        assert origin_filter.check('https://example.com') == 'https://example.com'

    def test_unknown_origin_rejected_with_named_origin(self, origin_filter):
        with pytest.raises(OriginRejected) as exc_info:
            origin_filter.check('https://evil.com')

        assert 'evil.com' in str(exc_info.value)
        assert exc_info.value.origin == 'https://evil.com'

    @pytest.mark.parametrize('origin', [None, ''])
    def test_absent_origin_admitted(self, origin_filter, origin):
        assert origin_filter.check(origin) is None
        assert origin_filter.evaluate(origin).allowed is True

    def test_comparison_is_case_sensitive(self, origin_filter):
        with pytest.raises(OriginRejected):
            origin_filter.check('https://Example.com')

    def test_only_one_trailing_slash_is_stripped(self, origin_filter):
        assert normalize_origin('https://example.com//') == 'https://example.com/'
        with pytest.raises(OriginRejected):
            origin_filter.check('https://example.com//')

    def test_subdomain_not_implied(self, origin_filter):
        with pytest.raises(OriginRejected):
            origin_filter.check('https://www.example.com')

    def test_allow_list_entries_normalized(self):
        origin_filter = OriginAdmissionFilter(['https://example.com/'])
        assert origin_filter.check('https://example.com') == 'https://example.com'

    def test_empty_allow_list_rejects_every_origin(self):
        origin_filter = OriginAdmissionFilter([])
        with pytest.raises(OriginRejected):
            origin_filter.check('https://example.com')
        assert origin_filter.check(None) is None

    def test_headers_for_admitted_origin(self, origin_filter):
        decision = origin_filter.evaluate('https://example.com/')

        headers = origin_filter.allow_headers_for(decision)

        assert headers['Access-Control-Allow-Origin'] == 'https://example.com/'
        assert headers['Access-Control-Allow-Credentials'] == 'true'
        assert headers['Access-Control-Allow-Methods'] == 'GET, POST, OPTIONS'
        assert headers['Access-Control-Allow-Headers'] == 'Content-Type'
        assert 'Access-Control-Max-Age' not in headers

    def test_preflight_headers_include_max_age(self, origin_filter):
        decision = origin_filter.evaluate('https://example.com')

        headers = origin_filter.allow_headers_for(decision, preflight=True)

        assert headers['Access-Control-Max-Age'] == '600'

    def test_no_headers_for_rejected_origin(self, origin_filter):
        decision = origin_filter.evaluate('https://evil.com')

        assert decision.allowed is False
        assert origin_filter.allow_headers_for(decision, preflight=True) == {}

    def test_absent_origin_gets_no_allow_origin(self, origin_filter):
        headers = origin_filter.allow_headers_for(origin_filter.evaluate(None))

        assert 'Access-Control-Allow-Origin' not in headers
        assert 'Access-Control-Allow-Credentials' not in headers


class TestAllowListValidation:

    @pytest.mark.parametrize('entry', [
        '',
        '   ',
        None,
        'example.com',
        'https://example.com/path',
        'https://example.com?x=1',
        ' https://example.com',
        '*',
    ])
    def test_malformed_entries_rejected(self, entry):
        with pytest.raises(InvalidConfiguration):
            validate_allowed_origin(entry)

    @pytest.mark.parametrize('entry, expected', [
        ('https://example.com', 'https://example.com'),
        ('https://example.com/', 'https://example.com'),
        ('http://localhost:3000', 'http://localhost:3000'),
    ])
    def test_valid_entries(self, entry, expected):
        assert validate_allowed_origin(entry) == expected

    def test_filter_refuses_malformed_entry(self):
        with pytest.raises(InvalidConfiguration):
            OriginAdmissionFilter(['https://example.com', 'not an origin'])

    @override_settings(CORS_ALLOWED_ORIGINS=['https://example.com/admissions'])
    def test_middleware_refuses_malformed_settings(self):
        with pytest.raises(InvalidConfiguration):
            OriginAdmissionMiddleware(lambda request: HttpResponse())


# =============================================================================
# MIDDLEWARE
# =============================================================================

class TestOriginAdmissionMiddleware:

    def test_admitted_request_gets_headers(self, rf, middleware, view_calls):
        response = middleware(rf.get('/api/enquiries', HTTP_ORIGIN=ALLOWED))

        assert view_calls == ['/api/enquiries']
        assert response['Access-Control-Allow-Origin'] == ALLOWED
        assert response['Access-Control-Allow-Credentials'] == 'true'
        assert 'Origin' in response['Vary']

    def test_trailing_slash_settings_entry(self, rf, middleware):
        # test settings list 'http://localhost:3000/'
        response = middleware(rf.get('/api', HTTP_ORIGIN='http://localhost:3000'))

        assert response['Access-Control-Allow-Origin'] == 'http://localhost:3000'

    def test_rejected_request_still_reaches_view_without_headers(self, rf, middleware, view_calls):
        response = middleware(rf.post('/api/send-enquiry', HTTP_ORIGIN=EVIL))

        assert view_calls == ['/api/send-enquiry']
        assert response.status_code == status.HTTP_200_OK
        assert not response.has_header('Access-Control-Allow-Origin')
        assert not response.has_header('Access-Control-Allow-Methods')

    def test_no_origin_request(self, rf, middleware, view_calls):
        response = middleware(rf.get('/'))

        assert view_calls == ['/']
        assert not response.has_header('Access-Control-Allow-Origin')
        assert response['Access-Control-Allow-Methods']

    def test_preflight_admitted(self, rf, middleware, view_calls):
        request = rf.options(
            '/api/send-enquiry',
            HTTP_ORIGIN=ALLOWED,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )

        response = middleware(request)

        assert view_calls == []
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b''
        assert response['Access-Control-Allow-Origin'] == ALLOWED
        assert 'POST' in response['Access-Control-Allow-Methods']
        assert 'Content-Type' in response['Access-Control-Allow-Headers']
        assert response['Access-Control-Max-Age'] == '600'

    def test_preflight_rejected(self, rf, middleware, view_calls):
        request = rf.options(
            '/api/send-enquiry',
            HTTP_ORIGIN=EVIL,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )

        response = middleware(request)

        assert view_calls == []
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not response.has_header('Access-Control-Allow-Origin')
        assert not response.has_header('Access-Control-Max-Age')

    @override_settings(CORS_PREFLIGHT_MAX_AGE=0, CORS_ALLOW_CREDENTIALS=False)
    def test_max_age_and_credentials_disabled(self, rf):
        middleware = OriginAdmissionMiddleware(lambda request: HttpResponse())

        response = middleware(rf.options('/api', HTTP_ORIGIN=ALLOWED))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not response.has_header('Access-Control-Max-Age')
        assert not response.has_header('Access-Control-Allow-Credentials')

    def test_decisions_are_logged(self, rf, middleware, caplog):
        with caplog.at_level(logging.INFO, logger='core.cors'):
            middleware(rf.get('/api', HTTP_ORIGIN=ALLOWED + '/'))
            middleware(rf.get('/api', HTTP_ORIGIN=EVIL))

        messages = [record.getMessage() for record in caplog.records if record.name == 'core.cors']
        assert any(
            f'origin={ALLOWED}/ normalized={ALLOWED} allowed=True' in message
            for message in messages
        )
        rejected = [record for record in caplog.records if 'allowed=False' in record.getMessage()]
        assert rejected and rejected[0].levelno == logging.WARNING
        assert 'evil.com' in rejected[0].getMessage()


# =============================================================================
# FULL STACK
# =============================================================================

@pytest.mark.django_db
class TestOriginAdmissionThroughApi:

    def test_health_check_without_origin(self, api_client):
        response = api_client.get('/')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'message': 'Backend API is healthy and running!'}

    def test_api_root(self, api_client):
        response = api_client.get('/api', HTTP_ORIGIN=ALLOWED)

        assert response.json() == {'message': 'Hello from the college website backend API!'}
        assert response['Access-Control-Allow-Origin'] == ALLOWED

    def test_preflight_never_reaches_view(self, api_client):
        response = api_client.options(
            '/api/send-enquiry',
            HTTP_ORIGIN=ALLOWED,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b''

    def test_rejected_origin_submission_is_still_processed(self, api_client):
        from contact.models import Enquiry

        response = api_client.post(
            '/api/send-enquiry',
            {'name': 'X', 'email': 'x@example.com', 'subject': 'S', 'message': 'M'},
            format='json',
            HTTP_ORIGIN=EVIL,
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert not response.has_header('Access-Control-Allow-Origin')
        assert Enquiry.objects.count() == 1
