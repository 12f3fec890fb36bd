"""
Tests for the site visit counter
"""
import pytest
from unittest.mock import MagicMock, patch
from django.db import DatabaseError
from django.test import override_settings
from rest_framework import status

from core.exceptions import InvalidConfiguration
from analytics.counters import CounterStoreUnavailable, VisitCounterStore
from analytics.models import VisitCounter


@pytest.fixture
def store(db):
    return VisitCounterStore()


# =============================================================================
# COUNTER STORE
# =============================================================================

class TestGetOrCreate:

    def test_absent_key_starts_at_zero(self, store):
        assert store.get_or_create('site_visits') == 0
        assert VisitCounter.objects.filter(key='site_visits').count() == 1

    def test_repeated_calls_are_idempotent(self, store):
        store.get_or_create('site_visits')
        store.get_or_create('site_visits')
        store.get_or_create('site_visits')

        assert VisitCounter.objects.filter(key='site_visits').count() == 1
        assert store.get_or_create('site_visits') == 0

    def test_returns_existing_count_unchanged(self, store):
        VisitCounter.objects.create(key='site_visits', count=41)

        assert store.get_or_create('site_visits') == 41
        assert VisitCounter.objects.get(key='site_visits').count == 41

    def test_keys_are_independent(self, store):
        store.increment('site_visits')
        assert store.get_or_create('brochure_downloads') == 0
        assert store.get_or_create('site_visits') == 1

    @pytest.mark.parametrize('key', ['', '   ', None])
    def test_blank_key_is_rejected(self, store, key):
        with pytest.raises(InvalidConfiguration):
            store.get_or_create(key)
        assert VisitCounter.objects.count() == 0

    def test_overlong_key_is_rejected(self, store):
        with pytest.raises(InvalidConfiguration):
            store.get_or_create('k' * 101)
        with pytest.raises(InvalidConfiguration):
            store.increment('k' * 101)
        assert VisitCounter.objects.count() == 0

    def test_key_at_max_length_is_accepted(self, store):
        assert store.increment('k' * 100) == 1

    def test_database_failure_raises_unavailable(self, store):
        with patch.object(VisitCounter.objects, 'using', side_effect=DatabaseError('connection refused')):
            with pytest.raises(CounterStoreUnavailable) as exc_info:
                store.get_or_create('site_visits')

        assert isinstance(exc_info.value.__cause__, DatabaseError)


class TestIncrement:

    def test_first_increment_creates_counter_at_one(self, store):
        assert store.increment('site_visits') == 1
        assert VisitCounter.objects.get(key='site_visits').count == 1

    def test_increment_after_get_or_create(self, store):
        assert store.get_or_create('site_visits') == 0
        assert store.increment('site_visits') == 1
        assert store.get_or_create('site_visits') == 1

    def test_increment_existing_then_read(self, store):
        VisitCounter.objects.create(key='site_visits', count=5)

        assert store.increment('site_visits') == 6
        assert store.get_or_create('site_visits') == 6

    def test_sequential_increments_return_consecutive_totals(self, store):
        VisitCounter.objects.create(key='site_visits', count=5)

        totals = [store.increment('site_visits') for _ in range(3)]

        assert totals == [6, 7, 8]
        assert VisitCounter.objects.filter(key='site_visits').count() == 1

    def test_blank_key_is_rejected(self, store):
        with pytest.raises(InvalidConfiguration):
            store.increment('')

    def test_database_failure_raises_unavailable(self, store):
        connection = MagicMock()
        connection.ops.quote_name = lambda name: f'"{name}"'
        cursor = connection.cursor.return_value.__enter__.return_value
        cursor.execute.side_effect = DatabaseError('database is locked')

        with patch('analytics.counters.connections', {store.using: connection}):
            with pytest.raises(CounterStoreUnavailable):
                store.increment('site_visits')

        # No retry
        assert cursor.execute.call_count == 1


# =============================================================================
# ENDPOINTS
# =============================================================================

@pytest.mark.django_db
class TestVisitEndpoints:

    def test_get_visits_initialises_counter(self, api_client):
        response = api_client.get('/api/analytics/visits')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'count': 0}

    def test_track_visit_returns_new_total(self, api_client):
        first = api_client.post('/api/analytics/track-visit')
        second = api_client.post('/api/analytics/track-visit')

        assert first.status_code == status.HTTP_200_OK
        assert first.data['count'] == 1
        assert second.data['count'] == 2
        assert api_client.get('/api/analytics/visits').data['count'] == 2

    @override_settings(VISIT_COUNTER_KEY='open_day_visits')
    def test_counter_key_comes_from_settings(self, api_client):
        api_client.post('/api/analytics/track-visit')

        assert VisitCounter.objects.get(key='open_day_visits').count == 1
        assert not VisitCounter.objects.filter(key='site_visits').exists()

    def test_track_visit_store_failure(self, api_client):
        with patch(
            'analytics.views.VisitCounterStore.increment',
            side_effect=CounterStoreUnavailable('down')
        ):
            response = api_client.post('/api/analytics/track-visit')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'success': False, 'message': 'Failed to track visit.'}

    def test_get_visits_store_failure(self, api_client):
        with patch(
            'analytics.views.VisitCounterStore.get_or_create',
            side_effect=CounterStoreUnavailable('down')
        ):
            response = api_client.get('/api/analytics/visits')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['message'] == 'Failed to fetch visit count.'

    def test_track_visit_rejects_get(self, api_client):
        response = api_client.get('/api/analytics/track-visit')
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
